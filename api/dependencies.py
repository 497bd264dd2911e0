"""
FastAPI Dependencies.

Provides the process-wide execution store and the services built on it.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.commands import RegisterAgentCommand
from core.application.services.orchestration_service import OrchestrationService
from core.infrastructure.store import InMemoryExecutionStore
from core.settings import get_app_settings
from orchestration import SubflowRunner, create_default_runner

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_execution_store: Optional[InMemoryExecutionStore] = None
_orchestration_service: Optional[OrchestrationService] = None
_subflow_runner: Optional[SubflowRunner] = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_execution_store() -> InMemoryExecutionStore:
    global _execution_store
    if _execution_store is None:
        _execution_store = InMemoryExecutionStore()
        logger.info("Created InMemoryExecutionStore instance")
    return _execution_store


def get_orchestration_service() -> OrchestrationService:
    global _orchestration_service

    if _orchestration_service is None:
        _orchestration_service = OrchestrationService(store=get_execution_store())
        logger.info("Created OrchestrationService instance")
        register_default_agent(_orchestration_service)

    return _orchestration_service


def get_subflow_runner() -> SubflowRunner:
    global _subflow_runner
    if _subflow_runner is None:
        _subflow_runner = create_default_runner(get_orchestration_service())
        logger.info("Created SubflowRunner with local mock invoker")
    return _subflow_runner


def register_default_agent(service: OrchestrationService) -> None:
    """Register the service's own agent identity, if enabled in settings."""
    tracker = get_app_settings().tracker
    if not tracker.register_default_agent:
        logger.info("Default agent registration disabled")
        return

    agent = service.register_agent(
        RegisterAgentCommand(
            agent_id=tracker.default_agent_id,
            agent_name=tracker.default_agent_name,
            agent_type=tracker.default_agent_type,
            owner_team=tracker.default_owner_team,
            tags=list(tracker.default_agent_tags),
        )
    )
    logger.info(f"Registered default agent: {agent.agent_id}")


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _execution_store, _orchestration_service, _subflow_runner

    _execution_store = None
    _orchestration_service = None
    _subflow_runner = None

    logger.info("Dependencies reset")
