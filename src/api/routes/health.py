"""
Health check endpoints for the application.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import Response

from src.api.dependencies import HealthCheckerDep
from src.config.logging import get_logger
from src.config.settings import settings
from src.infrastructure.monitoring.metrics import get_metrics, get_metrics_content_type

logger = get_logger(__name__)
router = APIRouter(prefix="/health", tags=["health"])


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/")
async def health_check(health_checker: HealthCheckerDep) -> Dict[str, Any]:
    """Basic health check endpoint."""
    is_healthy = await health_checker.check_readiness()
    return {
        "status": "healthy" if is_healthy else "unhealthy",
        "timestamp": _timestamp(),
    }


@router.get("/ready")
async def readiness_check(health_checker: HealthCheckerDep) -> Dict[str, Any]:
    """Readiness check for Kubernetes."""
    if not await health_checker.check_readiness():
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Service not ready",
        )
    return {"status": "ready", "timestamp": _timestamp()}


@router.get("/live")
async def liveness_check() -> Dict[str, Any]:
    """Liveness check for Kubernetes."""
    return {"status": "alive", "timestamp": _timestamp()}


@router.get("/detailed")
async def detailed_health_check(health_checker: HealthCheckerDep) -> Dict[str, Any]:
    """Detailed health check with all components."""
    return {
        "status": "success",
        "data": await health_checker.check_all_components(),
        "timestamp": _timestamp(),
    }


@router.get("/metrics")
async def prometheus_metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.ENABLE_METRICS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Metrics disabled"
        )
    logger.debug("Prometheus metrics requested")
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
