"""
Step endpoints.
"""
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_orchestration_service
from core.application.dtos import EndStepRequest, StepDTO
from core.application.services.orchestration_service import OrchestrationService


router = APIRouter(prefix="/steps", tags=["steps"])


@router.patch("/{step_id}/end", response_model=StepDTO)
async def end_step(
    step_id: str,
    request: EndStepRequest,
    service: OrchestrationService = Depends(get_orchestration_service),
) -> StepDTO:
    """
    Close a step.

    metrics.duration_ms is always the computed elapsed time.

    Raises:
        HTTPException: 404 if the step is unknown
    """
    step = service.end_step(
        step_id,
        request.status,
        request.response_payload,
        request.metrics,
        request.error(),
    )
    if step is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="step not found")
    return StepDTO.model_validate(step)
