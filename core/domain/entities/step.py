"""
Step Entity.

One unit of work (typically one downstream call) within an execution.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from core.domain.enums.execution_status import StepStatus


@dataclass
class Step:
    """
    Execution step record.

    ``step_seq`` is caller-supplied and drives read ordering; it is not
    checked for uniqueness.
    """

    step_id: str
    execution_id: str
    step_seq: int
    step_name: str
    step_type: str
    started_at: datetime
    status: StepStatus = StepStatus.RUNNING

    target_system: Optional[str] = None
    target_name: Optional[str] = None

    ended_at: Optional[datetime] = None
    duration_ms: Optional[int] = None
    retry_count: int = 0
    idempotency_key: Optional[str] = None

    request_payload: Optional[Any] = None
    response_payload: Optional[Any] = None
    metrics: Optional[Any] = None

    error_code: Optional[str] = None
    error_message: Optional[str] = None
