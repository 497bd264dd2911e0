"""
Execution Entity.

One orchestration run.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from core.domain.enums.execution_status import ExecutionStatus


@dataclass
class Execution:
    """
    Execution record.

    ``duration_ms`` is derived when the execution ends and is never
    supplied by the caller.
    """

    execution_id: str
    agent_id: str
    started_at: datetime
    status: ExecutionStatus = ExecutionStatus.RUNNING

    # Correlation fields, carried opaquely
    request_id: Optional[str] = None
    conversation_id: Optional[str] = None
    user_id: Optional[str] = None
    channel: Optional[str] = None

    ended_at: Optional[datetime] = None
    duration_ms: Optional[int] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    input_payload: Optional[Any] = None
    output_payload: Optional[Any] = None
    meta: Optional[Any] = None
