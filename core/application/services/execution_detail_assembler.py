"""
Execution Detail Assembler.

Read-side join of one execution with its steps and events.
"""
from typing import TYPE_CHECKING, Optional

from core.application.dtos.execution_dto import ExecutionDetail

if TYPE_CHECKING:
    from core.infrastructure.store import InMemoryExecutionStore


class ExecutionDetailAssembler:
    """Builds point-in-time ``ExecutionDetail`` views from the store."""

    def __init__(self, store: "InMemoryExecutionStore"):
        self._store = store

    def assemble(self, execution_id: str) -> Optional[ExecutionDetail]:
        """
        Assemble the detail view for one execution.

        The store hands back a snapshot taken under its lock, so the
        execution, steps and events are mutually consistent. Steps are
        ordered by ``step_seq`` (creation order on ties) and events by
        ``event_time`` (insertion order on ties).

        Args:
            execution_id: Execution to read

        Returns:
            ExecutionDetail, or None if the execution is unknown
        """
        snapshot = self._store.snapshot(execution_id)
        if snapshot is None:
            return None

        execution, steps, events = snapshot
        return ExecutionDetail(
            execution=execution,
            steps=sorted(steps, key=lambda step: step.step_seq),
            events=sorted(events, key=lambda event: event.sort_key()),
        )
