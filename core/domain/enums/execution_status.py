"""
Execution Status Enum.

Status values for execution and step tracking.
"""
from enum import Enum


class ExecutionStatus(str, Enum):
    """Lifecycle status shared by executions and steps."""

    RUNNING = "RUNNING"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        """True for the states an execution or step may end in."""
        return self is not ExecutionStatus.RUNNING


# Steps move through the same three states.
StepStatus = ExecutionStatus
