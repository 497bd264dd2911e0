"""
Orchestration Service.

The call contract used by the HTTP layer and by in-process workers.
Forwards to the execution store and the detail assembler; holds no state
of its own.
"""
import logging
from typing import TYPE_CHECKING, Any, List, Optional

from core.application.commands import (
    HeartbeatCommand,
    RegisterAgentCommand,
    StartExecutionCommand,
    StartStepCommand,
)
from core.application.dtos.execution_dto import ExecutionDetail
from core.application.services.execution_detail_assembler import ExecutionDetailAssembler
from core.domain.entities import Agent, Execution, Heartbeat, Step
from core.domain.enums import ExecutionStatus, StepStatus
from core.domain.value_objects import ErrorDetail

if TYPE_CHECKING:
    from core.infrastructure.store import InMemoryExecutionStore


logger = logging.getLogger(__name__)


class OrchestrationService:
    """
    Facade over the execution store.

    Every method maps one-to-one onto a store operation. Unknown ids come
    back as ``None``; translating that into a 404 is the caller's job.
    """

    def __init__(
        self,
        store: "InMemoryExecutionStore",
        assembler: Optional[ExecutionDetailAssembler] = None,
    ):
        """
        Initialize service.

        Args:
            store: The process-wide execution store
            assembler: Detail assembler (built over ``store`` if omitted)
        """
        self._store = store
        self._assembler = assembler or ExecutionDetailAssembler(store)

    @property
    def store(self) -> "InMemoryExecutionStore":
        return self._store

    def register_agent(self, command: RegisterAgentCommand) -> Agent:
        """Register or update an agent."""
        return self._store.register_agent(command)

    def start_execution(self, command: StartExecutionCommand) -> Execution:
        """Open an execution."""
        return self._store.create_execution(command)

    def end_execution(
        self,
        execution_id: str,
        status: ExecutionStatus,
        output_payload: Optional[Any] = None,
        error: Optional[ErrorDetail] = None,
    ) -> Optional[Execution]:
        """Close an execution; None if unknown."""
        return self._store.end_execution(execution_id, status, output_payload, error)

    def start_step(self, execution_id: str, command: StartStepCommand) -> Optional[Step]:
        """Open a step; None if the execution is unknown."""
        return self._store.create_step(execution_id, command)

    def end_step(
        self,
        step_id: str,
        status: StepStatus,
        response_payload: Optional[Any] = None,
        metrics: Optional[Any] = None,
        error: Optional[ErrorDetail] = None,
    ) -> Optional[Step]:
        """Close a step; None if unknown."""
        return self._store.end_step(step_id, status, response_payload, metrics, error)

    def upsert_heartbeat(self, command: HeartbeatCommand) -> Heartbeat:
        """Record worker liveness."""
        return self._store.upsert_heartbeat(command)

    def get_execution_detail(self, execution_id: str) -> Optional[ExecutionDetail]:
        """Execution with ordered steps and events; None if unknown."""
        detail = self._assembler.assemble(execution_id)
        if detail is None:
            logger.info(f"Execution detail requested for unknown id: {execution_id}")
        return detail

    def list_heartbeats(self) -> List[Heartbeat]:
        """All heartbeats, most recently seen first."""
        return self._store.list_heartbeats()
