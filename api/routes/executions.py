"""
Execution tracking endpoints.

Open and close executions, open steps inside them, and read the full
execution detail (execution, ordered steps, ordered events).
"""
from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import get_orchestration_service
from core.application.dtos import (
    EndExecutionRequest,
    ExecutionDetailDTO,
    ExecutionDTO,
    StartExecutionRequest,
    StartStepRequest,
    StepDTO,
)
from core.application.services.orchestration_service import OrchestrationService


router = APIRouter(prefix="/executions", tags=["executions"])


@router.post("", response_model=ExecutionDTO, status_code=status.HTTP_201_CREATED)
async def start_execution(
    request: StartExecutionRequest,
    service: OrchestrationService = Depends(get_orchestration_service),
) -> ExecutionDTO:
    """Open a new execution in RUNNING state."""
    execution = service.start_execution(request.to_command())
    return ExecutionDTO.model_validate(execution)


@router.patch("/{execution_id}/end", response_model=ExecutionDTO)
async def end_execution(
    execution_id: str,
    request: EndExecutionRequest,
    service: OrchestrationService = Depends(get_orchestration_service),
) -> ExecutionDTO:
    """
    Close an execution.

    Raises:
        HTTPException: 404 if the execution is unknown
    """
    execution = service.end_execution(
        execution_id, request.status, request.output_payload, request.error()
    )
    if execution is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="execution not found")
    return ExecutionDTO.model_validate(execution)


@router.post(
    "/{execution_id}/steps",
    response_model=StepDTO,
    status_code=status.HTTP_201_CREATED,
)
async def start_step(
    execution_id: str,
    request: StartStepRequest,
    service: OrchestrationService = Depends(get_orchestration_service),
) -> StepDTO:
    """
    Open a step inside an execution.

    Raises:
        HTTPException: 404 if the execution is unknown
    """
    step = service.start_step(execution_id, request.to_command())
    if step is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="execution not found")
    return StepDTO.model_validate(step)


@router.get(
    "/{execution_id}",
    response_model=ExecutionDetailDTO,
    summary="Get execution detail",
    description="""
    Get an execution with its steps (ordered by step_seq) and its
    lifecycle events (ordered by event_time).
    """,
)
async def get_execution_detail(
    execution_id: str,
    service: OrchestrationService = Depends(get_orchestration_service),
) -> ExecutionDetailDTO:
    detail = service.get_execution_detail(execution_id)
    if detail is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="execution not found")
    return ExecutionDetailDTO.model_validate(detail)
