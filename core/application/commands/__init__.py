"""Application commands."""
from .execution_commands import (
    HeartbeatCommand,
    RegisterAgentCommand,
    StartExecutionCommand,
    StartStepCommand,
)

__all__ = [
    "HeartbeatCommand",
    "RegisterAgentCommand",
    "StartExecutionCommand",
    "StartStepCommand",
]
