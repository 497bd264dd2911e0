"""Application DTOs."""

from .execution_dto import (
    AgentDTO,
    EventDTO,
    ExecutionDetail,
    ExecutionDetailDTO,
    ExecutionDTO,
    HeartbeatDTO,
    HeartbeatListDTO,
    StepDTO,
)
from .request_dto import (
    EndExecutionRequest,
    EndStepRequest,
    HeartbeatRequest,
    RegisterAgentRequest,
    StartExecutionRequest,
    StartStepRequest,
)

__all__ = [
    "AgentDTO",
    "EndExecutionRequest",
    "EndStepRequest",
    "EventDTO",
    "ExecutionDetail",
    "ExecutionDetailDTO",
    "ExecutionDTO",
    "HeartbeatDTO",
    "HeartbeatListDTO",
    "HeartbeatRequest",
    "RegisterAgentRequest",
    "StartExecutionRequest",
    "StartStepRequest",
    "StepDTO",
]
