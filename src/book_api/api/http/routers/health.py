"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.book_api.api.http.app_data import ApplicationDependencies
from src.book_api.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Basic health check endpoint - checks if app is running.

    This is a liveness probe that returns 200 OK as long as the application
    process is running. It does not check dependencies.
    """
    return {"status": "healthy", "service": "book-api"}


@router.get("/ready", response_model=None)
def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness check - validates the book store is reachable.

    Returns 200 if the store is ready, 503 otherwise.
    """
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()

    if app_deps.memory_store is not None:
        store_check = {
            "status": "healthy" if app_deps.memory_store.is_available() else "unhealthy",
            "type": "in-memory",
        }
    elif app_deps.database_service is not None:
        store_check = {
            "status": "healthy" if app_deps.database_service.health_check() else "unhealthy",
            "type": "sqlite" if config.database.is_sqlite else "postgresql",
        }
    else:
        store_check = {"status": "unhealthy", "error": "No book store configured"}

    result = {
        "status": "ready" if store_check["status"] == "healthy" else "not_ready",
        "checks": {"book_store": store_check},
        "environment": config.app.environment,
    }

    if result["status"] != "ready":
        return JSONResponse(status_code=503, content=result)
    return result
