"""
Event Type Enum.

Lifecycle transitions recorded in the event log.
"""
from enum import Enum


class EventType(str, Enum):
    """Event types appended by the execution store."""

    EXECUTION_STARTED = "EXECUTION_STARTED"
    EXECUTION_ENDED = "EXECUTION_ENDED"
    STEP_STARTED = "STEP_STARTED"
    STEP_ENDED = "STEP_ENDED"
