"""
Health check endpoints.

Used for monitoring and load balancer health checks.
"""
from datetime import datetime, timezone
import platform

from fastapi import APIRouter, Depends

from api.dependencies import get_execution_store
from core.infrastructure.store import InMemoryExecutionStore
from core.settings import get_app_settings


router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.

    Returns system health status.
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": get_app_settings().tracker.service_name,
        "version": "1.0.0",
        "python_version": platform.python_version(),
    }


@router.get("/health/ready")
async def readiness_check(store: InMemoryExecutionStore = Depends(get_execution_store)):
    """
    Readiness check endpoint.

    Reports the in-memory collection sizes.
    """
    return {
        "status": "ready",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "store": store.counts(),
    }
