"""
Heartbeat Entity.

Liveness record for an external worker process.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass
class Heartbeat:
    """Last known sign of life from one worker."""

    worker_id: str
    host: str
    env: str
    last_seen_at: datetime
    meta: Optional[Any] = None
