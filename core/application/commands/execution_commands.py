"""
Execution commands.

Inputs for the tracking operations that create or replace records.
"""
from dataclasses import dataclass
from typing import Any, List, Optional

from core.domain.enums.execution_status import ExecutionStatus


@dataclass
class RegisterAgentCommand:
    """Register or re-register an agent. Unset fields keep prior values."""

    agent_id: str
    agent_name: str
    agent_type: Optional[str] = None
    owner_team: Optional[str] = None
    is_active: Optional[bool] = None
    version: Optional[str] = None
    tags: Optional[List[str]] = None


@dataclass
class StartExecutionCommand:
    """Open a new execution for an agent."""

    agent_id: str
    request_id: Optional[str] = None
    conversation_id: Optional[str] = None
    user_id: Optional[str] = None
    channel: Optional[str] = None
    input_payload: Optional[Any] = None
    output_payload: Optional[Any] = None
    meta: Optional[Any] = None
    status: Optional[ExecutionStatus] = None


@dataclass
class StartStepCommand:
    """Open a step inside an existing execution."""

    step_seq: int
    step_name: str
    step_type: str
    target_system: Optional[str] = None
    target_name: Optional[str] = None
    retry_count: Optional[int] = None
    idempotency_key: Optional[str] = None
    request_payload: Optional[Any] = None


@dataclass
class HeartbeatCommand:
    """Report worker liveness."""

    worker_id: str
    host: str
    env: str
    meta: Optional[Any] = None
