"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from users_service.api.http.app_data import ApplicationDependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy", "service": "users"}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the store answers, 503 otherwise."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    database_service = app_deps.database_service

    try:
        db_healthy = database_service.health_check()
        database_check = {
            "status": "healthy" if db_healthy else "unhealthy",
            "type": "sqlite" if database_service.is_sqlite else "postgresql",
        }
    except Exception as e:
        db_healthy = False
        database_check = {"status": "unhealthy", "error": str(e)}

    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": app_deps.config.app.environment,
        "checks": {"database": database_check},
    }
    if not db_healthy:
        return JSONResponse(status_code=503, content=response)
    return response


@router.get("/database", response_model=None)
def health_database(request: Request) -> dict[str, Any] | JSONResponse:
    """Database-specific health check with connection pool status."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    database_service = app_deps.database_service

    try:
        healthy = database_service.health_check()
        return {
            "status": "healthy" if healthy else "unhealthy",
            "type": "sqlite" if database_service.is_sqlite else "postgresql",
            "pool": database_service.get_pool_status(),
        }
    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
