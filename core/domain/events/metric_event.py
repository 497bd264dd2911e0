"""
Metric Event.

Immutable record of a lifecycle transition. The store appends one for
every execution/step start and end; events are never changed or removed.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from core.domain.enums.event_type import EventType


@dataclass(frozen=True)
class MetricEvent:
    """
    Event log entry.

    ``sequence`` is a store-wide insertion counter used to order events
    whose timestamps collide.
    """

    event_id: str
    execution_id: str
    event_type: EventType
    event_time: datetime
    sequence: int
    step_id: Optional[str] = None
    payload: Optional[Dict[str, Any]] = None

    def sort_key(self) -> Tuple[datetime, int]:
        """Ordering key for per-execution reads."""
        return (self.event_time, self.sequence)
