"""
Agent registration endpoints.
"""
from fastapi import APIRouter, Depends, status

from api.dependencies import get_orchestration_service
from core.application.dtos import AgentDTO, RegisterAgentRequest
from core.application.services.orchestration_service import OrchestrationService


router = APIRouter(prefix="/agents", tags=["agents"])


@router.post("", response_model=AgentDTO, status_code=status.HTTP_201_CREATED)
async def register_agent(
    request: RegisterAgentRequest,
    service: OrchestrationService = Depends(get_orchestration_service),
) -> AgentDTO:
    """
    Register or update an agent.

    Re-registering an existing agent_id keeps its created_at.
    """
    agent = service.register_agent(request.to_command())
    return AgentDTO.model_validate(agent)
