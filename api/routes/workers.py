"""
Worker heartbeat endpoints.
"""
from fastapi import APIRouter, Depends

from api.dependencies import get_orchestration_service
from core.application.dtos import HeartbeatDTO, HeartbeatListDTO, HeartbeatRequest
from core.application.services.orchestration_service import OrchestrationService


router = APIRouter(prefix="/workers", tags=["workers"])


@router.post("/heartbeat", response_model=HeartbeatDTO)
async def upsert_heartbeat(
    request: HeartbeatRequest,
    service: OrchestrationService = Depends(get_orchestration_service),
) -> HeartbeatDTO:
    """Record a worker heartbeat; last_seen_at is set server-side."""
    heartbeat = service.upsert_heartbeat(request.to_command())
    return HeartbeatDTO.model_validate(heartbeat)


@router.get("/heartbeat", response_model=HeartbeatListDTO)
async def list_heartbeats(
    service: OrchestrationService = Depends(get_orchestration_service),
) -> HeartbeatListDTO:
    """All workers, most recently seen first."""
    return HeartbeatListDTO(
        workers=[HeartbeatDTO.model_validate(hb) for hb in service.list_heartbeats()]
    )
