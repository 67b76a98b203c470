"""Health check endpoints."""

from fastapi import APIRouter, HTTPException, status

from trackrecords.api.dependencies import RecordDAODep, SettingsDep
from trackrecords.errors import SourceUnavailable

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check() -> dict:
    """Basic health check."""
    return {"status": "healthy"}


@router.get("/health/ready")
def readiness_check(settings: SettingsDep, dao: RecordDAODep) -> dict:
    """Readiness check - verifies the record source can be read."""
    try:
        rows = dao.data_rows()
    except SourceUnavailable as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(e)
        ) from e

    return {
        "status": "ready",
        "environment": settings.environment.value,
        "source": str(dao.source),
        "rows": len(rows),
    }
