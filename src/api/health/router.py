"""Health check endpoints for monitoring."""

from datetime import datetime, timezone

from fastapi import APIRouter

from src.api.core.dependencies import (
    AsyncSessionDep,
    ImageClassifierDep,
    VesselDirectoryDep,
)
from src.modules.health.service import HealthService, OverallHealthStatus

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    """Liveness check, touches nothing."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


@router.get("/details")
async def health_details(
    db: AsyncSessionDep,
    classifier: ImageClassifierDep,
    directory: VesselDirectoryDep,
) -> OverallHealthStatus:
    """Database connectivity and which adapters are on live services."""
    health_service = HealthService(db, classifier, directory)
    return await health_service.run_all_checks()
