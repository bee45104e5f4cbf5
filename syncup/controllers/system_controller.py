# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from syncup.core.config import settings
from syncup.core.dependencies import get_group_repo, get_member_repo
from syncup.metrics.prometheus import ACTIVE_GROUPS

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    """Liveness check for Docker and orchestration."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "groups_count": get_group_repo().count(),
        "members_count": get_member_repo().count(),
    }


@router.get("/health/ready")
def readiness_check():
    """Readiness check: the in-memory store is always ready."""
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    ACTIVE_GROUPS.set(get_group_repo().count())
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
