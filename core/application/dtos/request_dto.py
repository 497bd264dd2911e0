"""
Request DTOs for the tracking API.

Required-field checks live here, at the boundary; the store trusts its
callers.
"""
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from core.application.commands import (
    HeartbeatCommand,
    RegisterAgentCommand,
    StartExecutionCommand,
    StartStepCommand,
)
from core.domain.enums import ExecutionStatus
from core.domain.value_objects import ErrorDetail


def _require_terminal(value: ExecutionStatus) -> ExecutionStatus:
    if not value.is_terminal:
        raise ValueError("status must be SUCCEEDED or FAILED")
    return value


class RegisterAgentRequest(BaseModel):
    """Request DTO for ``POST /agents``."""

    agent_id: str = Field(..., min_length=1, description="Stable agent key")
    agent_name: str = Field(..., min_length=1, description="Display name")
    agent_type: Optional[str] = Field(None, description="Classification, e.g. ORCHESTRATOR")
    owner_team: Optional[str] = None
    is_active: Optional[bool] = None
    version: Optional[str] = None
    tags: Optional[List[str]] = None

    def to_command(self) -> RegisterAgentCommand:
        return RegisterAgentCommand(**self.model_dump())


class StartExecutionRequest(BaseModel):
    """Request DTO for ``POST /executions``."""

    agent_id: str = Field(..., min_length=1, description="Owning agent id")
    request_id: Optional[str] = None
    conversation_id: Optional[str] = None
    user_id: Optional[str] = None
    channel: Optional[str] = None
    input_payload: Optional[Any] = None
    meta: Optional[Any] = None

    def to_command(self) -> StartExecutionCommand:
        return StartExecutionCommand(**self.model_dump())


class EndExecutionRequest(BaseModel):
    """Request DTO for ``PATCH /executions/{id}/end``."""

    status: ExecutionStatus = Field(..., description="SUCCEEDED or FAILED")
    output_payload: Optional[Any] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_must_be_terminal(cls, value: ExecutionStatus) -> ExecutionStatus:
        return _require_terminal(value)

    def error(self) -> ErrorDetail:
        return ErrorDetail(code=self.error_code, message=self.error_message)


class StartStepRequest(BaseModel):
    """Request DTO for ``POST /executions/{id}/steps``."""

    step_seq: int = Field(..., description="Ordering key within the execution")
    step_name: str = Field(..., min_length=1)
    step_type: str = Field(..., min_length=1)
    target_system: Optional[str] = None
    target_name: Optional[str] = None
    retry_count: Optional[int] = Field(None, ge=0)
    idempotency_key: Optional[str] = None
    request_payload: Optional[Any] = None

    def to_command(self) -> StartStepCommand:
        return StartStepCommand(**self.model_dump())


class EndStepRequest(BaseModel):
    """Request DTO for ``PATCH /steps/{id}/end``."""

    status: ExecutionStatus = Field(..., description="SUCCEEDED or FAILED")
    response_payload: Optional[Any] = None
    metrics: Optional[Any] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @field_validator("status")
    @classmethod
    def status_must_be_terminal(cls, value: ExecutionStatus) -> ExecutionStatus:
        return _require_terminal(value)

    def error(self) -> ErrorDetail:
        return ErrorDetail(code=self.error_code, message=self.error_message)


class HeartbeatRequest(BaseModel):
    """
    Request DTO for ``POST /workers/heartbeat``.

    Any ``last_seen_at`` sent by the worker is ignored.
    """

    worker_id: str = Field(..., min_length=1)
    host: str = Field(..., min_length=1)
    env: str = Field(..., min_length=1)
    meta: Optional[Any] = None

    def to_command(self) -> HeartbeatCommand:
        return HeartbeatCommand(**self.model_dump())
