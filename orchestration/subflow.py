"""Subflow runner - wraps one downstream call as a tracked execution."""

from datetime import datetime, timezone

from core.application.commands import StartExecutionCommand, StartStepCommand
from core.application.services.orchestration_service import OrchestrationService
from core.domain.entities import Execution, Step
from core.domain.enums import ExecutionStatus, StepStatus
from core.domain.value_objects import ErrorDetail
from core.infrastructure.logging import get_logger

from .invokers import LocalMockInvoker, StepInvoker, is_success_result
from .models import SubflowRunRequest, SubflowRunResult

FALLBACK_TARGET_NAME = "EAR_ENDPOINT"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _elapsed_ms(started_at: datetime) -> int:
    return int((_utc_now() - started_at).total_seconds() * 1000)


class SubflowRunner:
    """Runs a single-step subflow with execution tracking.

    The downstream call itself is delegated to a ``StepInvoker`` chosen by
    the request's ``mode``. No retries happen here.
    """

    def __init__(
        self,
        service: OrchestrationService,
        invokers: dict[str, StepInvoker] | None = None,
    ) -> None:
        """Initialize runner.

        Args:
            service: OrchestrationService used for all tracking calls
            invokers: Invokers by mode; defaults to the local mock only
        """
        self._service = service
        self._invokers: dict[str, StepInvoker] = (
            dict(invokers) if invokers is not None else {"local": LocalMockInvoker()}
        )
        self._logger = get_logger("orchestration.subflow")

    def register_invoker(self, mode: str, invoker: StepInvoker) -> None:
        """Register (or replace) the invoker for a mode."""
        self._invokers[mode] = invoker

    async def run(self, request: SubflowRunRequest) -> SubflowRunResult:
        """Run a subflow.

        Args:
            request: SubflowRunRequest to run

        Returns:
            SubflowRunResult with the execution, the step and the detail view

        Raises:
            Exception: Whatever the invoker raised, after the step is
                recorded as FAILED
        """
        execution = self._service.start_execution(
            StartExecutionCommand(
                agent_id=request.agent_id,
                request_id=request.request_id,
                conversation_id=request.conversation_id,
                user_id=request.user_id,
                channel=request.channel,
                input_payload=request.input_payload,
                meta={"mode": request.mode, "integration": "ear"},
            )
        )

        self._logger.info(
            f"Subflow starting: {execution.execution_id} "
            f"(agent: {request.agent_id}, mode: {request.mode}, step: {request.step_name})"
        )

        step, success, response_payload = await self._execute_step(execution, request)

        ended: Execution | None = execution
        if request.auto_end_execution:
            ended = self._service.end_execution(
                execution.execution_id,
                ExecutionStatus.SUCCEEDED if success else ExecutionStatus.FAILED,
                {"step_id": step.step_id, "result": response_payload},
                None
                if success
                else ErrorDetail(code="SUBFLOW_FAILED", message="EAR integrated subflow failed"),
            )

        self._logger.info(
            f"Subflow finished: {execution.execution_id} "
            f"(success: {success}, auto_end: {request.auto_end_execution})"
        )

        return SubflowRunResult(
            execution=ended or execution,
            step=step,
            detail=self._service.get_execution_detail(execution.execution_id),
        )

    async def _execute_step(
        self, execution: Execution, request: SubflowRunRequest
    ) -> tuple[Step, bool, dict[str, object]]:
        """Open the step, call the invoker and close the step.

        Args:
            execution: Owning execution
            request: SubflowRunRequest

        Returns:
            (ended step, success flag, response payload)
        """
        invoker = self._invokers.get(request.mode)
        execution_id = execution.execution_id

        step = self._service.start_step(
            execution_id,
            StartStepCommand(
                step_seq=1,
                step_name=request.step_name,
                step_type=request.step_type,
                target_system=request.target_system,
                target_name=request.target_name
                or (invoker.target_name if invoker is not None else FALLBACK_TARGET_NAME),
                request_payload=request.request_payload,
                idempotency_key=f"{execution_id}:1",
            ),
        )
        if step is None:
            raise RuntimeError(f"failed to create step for execution {execution_id}")

        started_at = _utc_now()

        try:
            if invoker is None:
                raise ValueError(f"no invoker registered for mode '{request.mode}'")

            response_payload = await invoker.invoke(
                execution_id, step.step_id, request.request_payload
            )
        except Exception as exc:
            self._logger.warning(
                f"Subflow step failed: {step.step_id} "
                f"(execution: {execution_id}, error: {exc})"
            )
            self._service.end_step(
                step.step_id,
                StepStatus.FAILED,
                None,
                {"duration_ms": _elapsed_ms(started_at), "mode": request.mode},
                ErrorDetail(code="EAR_CALL_EXCEPTION", message=str(exc) or "EAR call failed"),
            )
            raise

        success = is_success_result(response_payload)
        ended_step = self._service.end_step(
            step.step_id,
            StepStatus.SUCCEEDED if success else StepStatus.FAILED,
            response_payload,
            {"duration_ms": _elapsed_ms(started_at), "mode": request.mode},
            None
            if success
            else ErrorDetail(code="EAR_CALL_FAILED", message="EAR response indicates failure"),
        )
        if ended_step is None:
            raise RuntimeError(f"failed to end step {step.step_id}")

        return ended_step, success, response_payload
