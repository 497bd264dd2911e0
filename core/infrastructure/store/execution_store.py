"""
In-Memory Execution Store.

Volatile storage for agents, executions, steps, heartbeats and the
append-only event log. State lives only in process memory and is lost on
restart.

Every public method runs under one re-entrant lock, so an operation that
touches several collections (for example ``create_step`` updates the step
map, the execution's step index and the event log) is never observed
half-applied. Payloads are copied on the way in and records on the way out;
callers cannot change stored state without going through the store.
"""
import copy
import threading
from typing import Any, Dict, List, Mapping, Optional, Tuple

from core.application.commands.execution_commands import (
    HeartbeatCommand,
    RegisterAgentCommand,
    StartExecutionCommand,
    StartStepCommand,
)
from core.domain.entities import Agent, Execution, Heartbeat, Step
from core.domain.entities.agent import (
    DEFAULT_AGENT_TYPE,
    DEFAULT_OWNER_TEAM,
    DEFAULT_TAGS,
    DEFAULT_VERSION,
)
from core.domain.enums import EventType, ExecutionStatus, StepStatus
from core.domain.events import MetricEvent
from core.domain.value_objects import ErrorDetail
from core.infrastructure.clock import Clock, duration_ms, system_clock
from core.infrastructure.logging import get_logger


logger = get_logger(__name__)

ExecutionSnapshot = Tuple[Execution, List[Step], List[MetricEvent]]


def _first_set(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def _step_metrics(metrics: Any, elapsed: int) -> Dict[str, Any]:
    """
    Caller metrics with the computed duration on top.

    Mappings are merged; any other non-None value is kept under ``value``.
    """
    if metrics is None:
        return {"duration_ms": elapsed}
    if isinstance(metrics, Mapping):
        return {**copy.deepcopy(dict(metrics)), "duration_ms": elapsed}
    return {"value": copy.deepcopy(metrics), "duration_ms": elapsed}


class InMemoryExecutionStore:
    """
    Sole owner of all tracking state.

    Not-found conditions return ``None``; no method raises for any input
    shape, and opaque payloads are stored as given.
    """

    def __init__(self, clock: Optional[Clock] = None):
        """
        Initialize empty storage.

        Args:
            clock: Timestamp/id provider (system clock by default)
        """
        self._clock = clock or system_clock
        self._lock = threading.RLock()

        self._agents: Dict[str, Agent] = {}
        self._executions: Dict[str, Execution] = {}
        self._steps: Dict[str, Step] = {}
        self._execution_steps: Dict[str, List[str]] = {}
        self._events: List[MetricEvent] = []
        self._heartbeats: Dict[str, Heartbeat] = {}
        self._event_sequence = 0

        logger.info("InMemoryExecutionStore initialized (in-memory storage)")

    # =========================================================================
    # AGENTS
    # =========================================================================

    def register_agent(self, command: RegisterAgentCommand) -> Agent:
        """
        Insert or update an agent.

        ``created_at`` survives re-registration; ``updated_at`` is refreshed.
        Omitted fields fall back to the stored value, then to the defaults.

        Args:
            command: Registration input (agent_id and agent_name required)

        Returns:
            The stored agent
        """
        with self._lock:
            existing = self._agents.get(command.agent_id)
            now = self._clock.now()

            agent = Agent(
                agent_id=command.agent_id,
                agent_name=command.agent_name,
                agent_type=_first_set(
                    command.agent_type,
                    existing.agent_type if existing else None,
                    DEFAULT_AGENT_TYPE,
                ),
                owner_team=_first_set(
                    command.owner_team,
                    existing.owner_team if existing else None,
                    DEFAULT_OWNER_TEAM,
                ),
                is_active=_first_set(
                    command.is_active,
                    existing.is_active if existing else None,
                    True,
                ),
                version=_first_set(
                    command.version,
                    existing.version if existing else None,
                    DEFAULT_VERSION,
                ),
                tags=list(_first_set(
                    command.tags,
                    existing.tags if existing else None,
                    DEFAULT_TAGS,
                )),
                created_at=existing.created_at if existing else now,
                updated_at=now,
            )

            self._agents[agent.agent_id] = agent
            logger.info(
                f"Agent {'updated' if existing else 'registered'}: {agent.agent_id}"
            )
            return copy.deepcopy(agent)

    def get_agent(self, agent_id: str) -> Optional[Agent]:
        """Get agent by id."""
        with self._lock:
            agent = self._agents.get(agent_id)
            return copy.deepcopy(agent) if agent else None

    def list_agents(self) -> List[Agent]:
        """All registered agents in registration order."""
        with self._lock:
            return copy.deepcopy(list(self._agents.values()))

    # =========================================================================
    # EXECUTIONS
    # =========================================================================

    def create_execution(self, command: StartExecutionCommand) -> Execution:
        """
        Open a new execution.

        The agent id is not checked against registered agents.

        Args:
            command: Execution input (agent_id required)

        Returns:
            The new execution, RUNNING unless the command overrides status
        """
        with self._lock:
            execution = Execution(
                execution_id=self._clock.new_id(),
                agent_id=command.agent_id,
                request_id=command.request_id,
                conversation_id=command.conversation_id,
                user_id=command.user_id,
                channel=command.channel,
                status=command.status or ExecutionStatus.RUNNING,
                started_at=self._clock.now(),
                input_payload=copy.deepcopy(command.input_payload),
                output_payload=copy.deepcopy(command.output_payload),
                meta=copy.deepcopy(command.meta),
            )

            self._executions[execution.execution_id] = execution
            self._execution_steps[execution.execution_id] = []
            self._append_event(
                execution.execution_id,
                EventType.EXECUTION_STARTED,
                {"agent_id": execution.agent_id, "channel": execution.channel},
            )

            logger.info(
                f"Execution started: {execution.execution_id} (agent: {execution.agent_id})"
            )
            return copy.deepcopy(execution)

    def end_execution(
        self,
        execution_id: str,
        status: ExecutionStatus,
        output_payload: Optional[Any] = None,
        error: Optional[ErrorDetail] = None,
    ) -> Optional[Execution]:
        """
        Close an execution.

        There is no terminal-state guard: ending twice recomputes the
        duration from the original ``started_at`` and overwrites the
        previous end data.

        Args:
            execution_id: Execution to close
            status: Final status
            output_payload: Result payload; keeps the prior one when omitted
            error: Optional failure code/message

        Returns:
            The updated execution, or None if the id is unknown
        """
        with self._lock:
            execution = self._executions.get(execution_id)
            if execution is None:
                logger.warning(f"end_execution: execution not found: {execution_id}")
                return None

            ended_at = self._clock.now()
            elapsed = duration_ms(execution.started_at, ended_at)
            error = error or ErrorDetail()

            execution.status = status
            execution.ended_at = ended_at
            execution.duration_ms = elapsed
            if output_payload is not None:
                execution.output_payload = copy.deepcopy(output_payload)
            execution.error_code = error.code
            execution.error_message = error.message

            self._append_event(
                execution_id,
                EventType.EXECUTION_ENDED,
                {"status": status, "duration_ms": elapsed, "error_code": error.code},
            )

            logger.info(
                f"Execution ended: {execution_id} "
                f"(status: {status}, duration_ms: {elapsed})"
            )
            return copy.deepcopy(execution)

    def get_execution(self, execution_id: str) -> Optional[Execution]:
        """Get execution by id."""
        with self._lock:
            execution = self._executions.get(execution_id)
            return copy.deepcopy(execution) if execution else None

    def list_executions(self) -> List[Execution]:
        """All executions in creation order."""
        with self._lock:
            return copy.deepcopy(list(self._executions.values()))

    # =========================================================================
    # STEPS
    # =========================================================================

    def create_step(
        self, execution_id: str, command: StartStepCommand
    ) -> Optional[Step]:
        """
        Open a step inside an execution.

        Nothing is written when the execution is unknown.

        Args:
            execution_id: Owning execution
            command: Step input (step_seq, step_name, step_type required)

        Returns:
            The new RUNNING step, or None if the execution is unknown
        """
        with self._lock:
            if execution_id not in self._executions:
                logger.warning(f"create_step: execution not found: {execution_id}")
                return None

            step = Step(
                step_id=self._clock.new_id(),
                execution_id=execution_id,
                step_seq=command.step_seq,
                step_name=command.step_name,
                step_type=command.step_type,
                target_system=command.target_system,
                target_name=command.target_name,
                status=StepStatus.RUNNING,
                started_at=self._clock.now(),
                retry_count=command.retry_count if command.retry_count is not None else 0,
                idempotency_key=command.idempotency_key,
                request_payload=copy.deepcopy(command.request_payload),
            )

            self._steps[step.step_id] = step
            self._execution_steps.setdefault(execution_id, []).append(step.step_id)
            self._append_event(
                execution_id,
                EventType.STEP_STARTED,
                {
                    "step_name": step.step_name,
                    "step_type": step.step_type,
                    "step_seq": step.step_seq,
                },
                step_id=step.step_id,
            )

            logger.info(
                f"Step started: {step.step_id} "
                f"(execution: {execution_id}, seq: {step.step_seq}, name: {step.step_name})"
            )
            return copy.deepcopy(step)

    def end_step(
        self,
        step_id: str,
        status: StepStatus,
        response_payload: Optional[Any] = None,
        metrics: Optional[Any] = None,
        error: Optional[ErrorDetail] = None,
    ) -> Optional[Step]:
        """
        Close a step.

        The computed ``duration_ms`` always replaces any ``duration_ms``
        the caller put in ``metrics``. No terminal-state guard.

        Args:
            step_id: Step to close
            status: Final status
            response_payload: Downstream response
            metrics: Caller metrics; a non-mapping value is kept under ``value``
            error: Optional failure code/message

        Returns:
            The updated step, or None if the id is unknown
        """
        with self._lock:
            step = self._steps.get(step_id)
            if step is None:
                logger.warning(f"end_step: step not found: {step_id}")
                return None

            ended_at = self._clock.now()
            elapsed = duration_ms(step.started_at, ended_at)
            error = error or ErrorDetail()

            step.status = status
            step.ended_at = ended_at
            step.duration_ms = elapsed
            step.response_payload = copy.deepcopy(response_payload)
            step.metrics = _step_metrics(metrics, elapsed)
            step.error_code = error.code
            step.error_message = error.message

            self._append_event(
                step.execution_id,
                EventType.STEP_ENDED,
                {
                    "step_name": step.step_name,
                    "status": status,
                    "duration_ms": elapsed,
                    "error_code": error.code,
                },
                step_id=step.step_id,
            )

            logger.info(
                f"Step ended: {step_id} (status: {status}, duration_ms: {elapsed})"
            )
            return copy.deepcopy(step)

    def get_step(self, step_id: str) -> Optional[Step]:
        """Get step by id."""
        with self._lock:
            step = self._steps.get(step_id)
            return copy.deepcopy(step) if step else None

    # =========================================================================
    # HEARTBEATS
    # =========================================================================

    def upsert_heartbeat(self, command: HeartbeatCommand) -> Heartbeat:
        """
        Replace the worker's heartbeat record.

        ``last_seen_at`` is always the store's current time.

        Args:
            command: Worker identity and meta

        Returns:
            The stored heartbeat
        """
        with self._lock:
            heartbeat = Heartbeat(
                worker_id=command.worker_id,
                host=command.host,
                env=command.env,
                last_seen_at=self._clock.now(),
                meta=copy.deepcopy(command.meta),
            )

            # Re-insert so dict order follows upsert order.
            self._heartbeats.pop(heartbeat.worker_id, None)
            self._heartbeats[heartbeat.worker_id] = heartbeat

            logger.debug(f"Heartbeat from {heartbeat.worker_id} ({heartbeat.host}/{heartbeat.env})")
            return copy.deepcopy(heartbeat)

    def list_heartbeats(self) -> List[Heartbeat]:
        """
        All heartbeats, most recently seen first.

        Equal timestamps resolve to the most recently upserted worker first.
        """
        with self._lock:
            newest_first = list(reversed(list(self._heartbeats.values())))
            ordered = sorted(newest_first, key=lambda hb: hb.last_seen_at, reverse=True)
            return copy.deepcopy(ordered)

    # =========================================================================
    # READ SNAPSHOT
    # =========================================================================

    def snapshot(self, execution_id: str) -> Optional[ExecutionSnapshot]:
        """
        Consistent copy of one execution with its steps and events.

        Steps come back in creation order and events in append order;
        ordering for presentation is left to the caller.

        Args:
            execution_id: Execution to read

        Returns:
            (execution, steps, events), or None if the id is unknown
        """
        with self._lock:
            execution = self._executions.get(execution_id)
            if execution is None:
                return None

            step_ids = self._execution_steps.get(execution_id, [])
            steps = [self._steps[step_id] for step_id in step_ids if step_id in self._steps]
            events = [event for event in self._events if event.execution_id == execution_id]

            return copy.deepcopy((execution, steps, events))

    def counts(self) -> Dict[str, int]:
        """Collection sizes, for health output and tests."""
        with self._lock:
            return {
                "agents": len(self._agents),
                "executions": len(self._executions),
                "steps": len(self._steps),
                "events": len(self._events),
                "heartbeats": len(self._heartbeats),
            }

    # =========================================================================
    # EVENT EMITTER
    # =========================================================================

    def _append_event(
        self,
        execution_id: str,
        event_type: EventType,
        payload: Optional[Dict[str, Any]] = None,
        step_id: Optional[str] = None,
    ) -> MetricEvent:
        """
        Append one event to the log.

        Called exactly once per state transition, inside the caller's
        critical section.
        """
        self._event_sequence += 1
        event = MetricEvent(
            event_id=self._clock.new_id(),
            execution_id=execution_id,
            step_id=step_id,
            event_type=event_type,
            event_time=self._clock.now(),
            sequence=self._event_sequence,
            payload=payload,
        )
        self._events.append(event)
        logger.debug(f"Event appended: {event_type} (execution: {execution_id})")
        return event
