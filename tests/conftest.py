"""Shared fixtures for the tracking tests."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest

from core.application.services.orchestration_service import OrchestrationService
from core.infrastructure.clock import Clock
from core.infrastructure.store import InMemoryExecutionStore


BASE_TIME = datetime(2025, 1, 15, 10, 30, 0, tzinfo=timezone.utc)


class TickingClock(Clock):
    """Deterministic clock: every ``now()`` advances by ``step_ms``."""

    def __init__(self, step_ms: int = 5, start: datetime = BASE_TIME) -> None:
        self.step = timedelta(milliseconds=step_ms)
        self.current = start
        self.calls = 0

    def now(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        self.calls += 1
        return value

    def new_id(self) -> str:
        return str(uuid.uuid4())


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def frozen_clock() -> TickingClock:
    """Clock whose time never moves, for timestamp-collision cases."""
    return TickingClock(step_ms=0)


@pytest.fixture
def store(clock: TickingClock) -> InMemoryExecutionStore:
    return InMemoryExecutionStore(clock=clock)


@pytest.fixture
def service(store: InMemoryExecutionStore) -> OrchestrationService:
    return OrchestrationService(store=store)
