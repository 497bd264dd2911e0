"""Domain enums."""
from .event_type import EventType
from .execution_status import ExecutionStatus, StepStatus

__all__ = ["EventType", "ExecutionStatus", "StepStatus"]
