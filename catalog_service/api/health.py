"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from fastapi import APIRouter

from catalog_service.api.dependencies import CatalogServiceDep
from catalog_service.api.schemas import ErrorResponse, HealthResponse
from catalog_service.infrastructure.config import settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(service: CatalogServiceDep) -> HealthResponse:
    """Check service health.

    The service reports healthy even when the store is down; the
    database field tells the two apart.

    Returns:
        Health status with service name, version and store status.
    """
    connected = await service.is_store_available()

    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=settings.api_version,
        database="connected" if connected else "disconnected",
    )


@router.get(
    "/ready",
    responses={503: {"model": ErrorResponse}},
)
async def readiness_check(service: CatalogServiceDep) -> dict[str, str]:
    """Check if service is ready to accept requests.

    Returns:
        Readiness status.

    Raises:
        StoreUnavailableError: If the store does not answer (503).
    """
    await service.ping()
    return {"status": "ready"}
