# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from incident_desk.core.config import settings
from incident_desk.core.dependencies import get_incident_store
from incident_desk.repositories.incident_store import IncidentStore

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check(store: IncidentStore = Depends(get_incident_store)):
    """Liveness probe for Docker and orchestration."""
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "incidents_count": store.count(),
    }


@router.get("/health/ready")
def readiness_check(store: IncidentStore = Depends(get_incident_store)):
    """Readiness probe: the store lives in memory, so it is ready once built."""
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "incidents_loaded": store.count() > 0,
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
