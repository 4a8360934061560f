from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.dependencies import get_resource_service
from app.schemas.resources import HealthResponse
from app.services.resources import ResourceService

router = APIRouter()


@router.get("/ping")
def ping() -> dict[str, str]:
    return {"message": "pong"}


@router.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/health", response_model=HealthResponse)
def health(
    service: ResourceService = Depends(get_resource_service),  # noqa: B008
) -> HealthResponse:
    """Report the service as healthy along with the cluster version, if readable."""
    status = service.health()
    return HealthResponse(healthy=status.healthy, version=status.version)
