"""
Clock and identifier provider.

Timestamps are UTC and truncated to millisecond resolution, the precision
of the ISO-8601 strings the API returns. Two calls inside the same
millisecond therefore produce equal timestamps; readers break such ties
by insertion order.
"""
import uuid
from datetime import datetime, timedelta, timezone

_ONE_MILLISECOND = timedelta(milliseconds=1)


def truncate_to_millis(value: datetime) -> datetime:
    """Drop sub-millisecond precision from a datetime."""
    return value.replace(microsecond=(value.microsecond // 1000) * 1000)


def duration_ms(started_at: datetime, ended_at: datetime) -> int:
    """Elapsed milliseconds between two millisecond-resolution timestamps."""
    return int((ended_at - started_at) / _ONE_MILLISECOND)


class Clock:
    """Wall clock plus UUID generator."""

    def now(self) -> datetime:
        """Current UTC time at millisecond resolution."""
        return truncate_to_millis(datetime.now(timezone.utc))

    def new_id(self) -> str:
        """Random unique identifier."""
        return str(uuid.uuid4())


system_clock = Clock()
