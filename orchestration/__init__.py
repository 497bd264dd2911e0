"""Orchestration layer - tracked subflow runs over the execution store."""

from typing import TYPE_CHECKING

from .invokers import LocalMockInvoker, StepInvoker, is_success_result
from .models import SubflowRunRequest, SubflowRunResult
from .subflow import SubflowRunner

if TYPE_CHECKING:
    from core.application.services.orchestration_service import OrchestrationService

__all__ = [
    "LocalMockInvoker",
    "StepInvoker",
    "SubflowRunRequest",
    "SubflowRunResult",
    "SubflowRunner",
    "create_default_runner",
    "is_success_result",
]


def create_default_runner(service: "OrchestrationService") -> SubflowRunner:
    """Create a subflow runner with only the local mock invoker.

    Args:
        service: OrchestrationService instance

    Returns:
        SubflowRunner instance
    """
    return SubflowRunner(service=service, invokers={"local": LocalMockInvoker()})
