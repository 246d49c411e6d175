"""
API Health Check Endpoint

Health check for the modcatalog API.
"""

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from modcatalog.api.schemas.error import ErrorResponse
from modcatalog.api.v1.dependencies import get_database
from modcatalog.api.v1.schemas.responses import HealthResponse
from modcatalog.core.config import settings
from modcatalog.core.logger import get_logger
from modcatalog.stores.database import Database

logger = get_logger(__name__)

router = APIRouter()


def check_database_health(database: Database) -> Dict[str, Any]:
    """Check database connection health."""
    try:
        status = database.test_connection()
        return {"status": "healthy", "details": status}
    except Exception as e:
        logger.warning("Database health check failed: %s", str(e))
        return {"status": "unhealthy", "error": str(e)}


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="API Health Check",
    description="Check the overall health of the API and its database",
    tags=["health"],
    responses={
        200: {"model": HealthResponse, "description": "Health check results"},
        503: {"model": ErrorResponse, "description": "Service unavailable"},
    },
)
async def health_check(
    request: Request, database: Database = Depends(get_database)
) -> HealthResponse:
    """
    Health check endpoint for the API.

    Checks the status of:
    - API service itself
    - Database connection (if enabled in configuration)
    """
    config = getattr(request.app.state, "settings", None) or settings
    components = {}
    overall_healthy = True

    if config.health__check_database:
        db_health = check_database_health(database)
        components["database"] = db_health
        if db_health["status"] == "unhealthy":
            overall_healthy = False

    # API service is healthy if we can respond
    components["api"] = {
        "status": "healthy",
        "version": config.api__version,
        "environment": config.environment,
    }

    return HealthResponse(
        status="healthy" if overall_healthy else "unhealthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=config.api__version,
        environment=config.environment,
        components=components,
    )
