"""Application layer - commands, DTOs and services."""

from .commands import (
    HeartbeatCommand,
    RegisterAgentCommand,
    StartExecutionCommand,
    StartStepCommand,
)
from .dtos import ExecutionDetail
from .services import ExecutionDetailAssembler, OrchestrationService

__all__ = [
    # Commands
    "HeartbeatCommand",
    "RegisterAgentCommand",
    "StartExecutionCommand",
    "StartStepCommand",
    # Read models
    "ExecutionDetail",
    # Services
    "ExecutionDetailAssembler",
    "OrchestrationService",
]
