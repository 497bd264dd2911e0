"""
Execution DTOs.

Read models for the tracking API. Built from the store's dataclass
records with ``model_validate`` (``from_attributes``).
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.domain.entities import Execution, Step
from core.domain.enums import EventType, ExecutionStatus, StepStatus
from core.domain.events import MetricEvent


@dataclass
class ExecutionDetail:
    """One execution joined with its ordered steps and events."""

    execution: Execution
    steps: List[Step] = field(default_factory=list)
    events: List[MetricEvent] = field(default_factory=list)


class AgentDTO(BaseModel):
    """Response DTO for an agent."""

    model_config = ConfigDict(from_attributes=True)

    agent_id: str
    agent_name: str
    agent_type: str
    owner_team: str
    is_active: bool
    version: str
    tags: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime


class ExecutionDTO(BaseModel):
    """Response DTO for an execution."""

    model_config = ConfigDict(from_attributes=True)

    execution_id: str
    agent_id: str
    request_id: Optional[str] = None
    conversation_id: Optional[str] = None
    user_id: Optional[str] = None
    channel: Optional[str] = None
    status: ExecutionStatus
    started_at: datetime
    ended_at: Optional[datetime] = None
    duration_ms: Optional[int] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    input_payload: Optional[Any] = None
    output_payload: Optional[Any] = None
    meta: Optional[Any] = None


class StepDTO(BaseModel):
    """Response DTO for a step."""

    model_config = ConfigDict(from_attributes=True)

    step_id: str
    execution_id: str
    step_seq: int
    step_name: str
    step_type: str
    target_system: Optional[str] = None
    target_name: Optional[str] = None
    status: StepStatus
    started_at: datetime
    ended_at: Optional[datetime] = None
    duration_ms: Optional[int] = None
    retry_count: int = 0
    idempotency_key: Optional[str] = None
    request_payload: Optional[Any] = None
    response_payload: Optional[Any] = None
    metrics: Optional[Any] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None


class EventDTO(BaseModel):
    """Response DTO for an event log entry."""

    model_config = ConfigDict(from_attributes=True)

    event_id: str
    execution_id: str
    step_id: Optional[str] = None
    event_type: EventType
    event_time: datetime
    payload: Optional[Any] = None


class ExecutionDetailDTO(BaseModel):
    """Response DTO for ``GET /executions/{id}``."""

    model_config = ConfigDict(from_attributes=True)

    execution: ExecutionDTO
    steps: List[StepDTO] = Field(default_factory=list)
    events: List[EventDTO] = Field(default_factory=list)


class HeartbeatDTO(BaseModel):
    """Response DTO for a worker heartbeat."""

    model_config = ConfigDict(from_attributes=True)

    worker_id: str
    host: str
    env: str
    last_seen_at: datetime
    meta: Optional[Any] = None


class HeartbeatListDTO(BaseModel):
    """Response DTO for the heartbeat listing."""

    workers: List[HeartbeatDTO] = Field(default_factory=list)
