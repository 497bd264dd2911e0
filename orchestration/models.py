"""Orchestration models - SubflowRunRequest, SubflowRunResult."""

from dataclasses import dataclass

from core.application.dtos.execution_dto import ExecutionDetail
from core.domain.entities import Execution, Step


@dataclass
class SubflowRunRequest:
    """Input for one tracked downstream call."""

    agent_id: str
    step_name: str
    mode: str = "local"
    step_type: str = "RFC"
    target_system: str = "EAR"
    target_name: str | None = None
    request_id: str | None = None
    conversation_id: str | None = None
    user_id: str | None = None
    channel: str | None = None
    input_payload: dict[str, object] | None = None
    request_payload: dict[str, object] | None = None
    auto_end_execution: bool = True


@dataclass
class SubflowRunResult:
    """Outcome of a subflow run."""

    execution: Execution
    step: Step
    detail: ExecutionDetail | None
