"""Domain layer - entities, enums, events and value objects."""

from .entities import Agent, Execution, Heartbeat, Step
from .enums import EventType, ExecutionStatus, StepStatus
from .events import MetricEvent
from .value_objects import ErrorDetail

__all__ = [
    "Agent",
    "ErrorDetail",
    "EventType",
    "Execution",
    "ExecutionStatus",
    "Heartbeat",
    "MetricEvent",
    "Step",
    "StepStatus",
]
