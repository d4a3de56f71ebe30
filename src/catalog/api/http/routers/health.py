"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.catalog.api.http.app_data import ApplicationDependencies
from src.catalog.api.http.deps import get_app_dependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is serving requests."""
    return {"status": "healthy", "service": "api"}


@router.get("/ready", response_model=None)
def readiness(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the product store is usable, 503 otherwise."""
    store = app_deps.product_store

    checks: dict[str, Any] = {}
    try:
        store_healthy = store.health_check()
        checks["store"] = {
            "status": "healthy" if store_healthy else "unhealthy",
            "type": type(store).__name__,
        }
    except Exception as e:
        store_healthy = False
        checks["store"] = {"status": "unhealthy", "error": str(e)}

    if app_deps.database_service is not None:
        checks["database_pool"] = app_deps.database_service.get_pool_status()

    if not store_healthy:
        return JSONResponse(
            status_code=503, content={"status": "not_ready", "checks": checks}
        )
    return {"status": "ready", "checks": checks}
