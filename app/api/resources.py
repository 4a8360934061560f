from __future__ import annotations

from fastapi import APIRouter, Depends

from app.core.dependencies import get_resource_service
from app.schemas.resources import (
    DeploymentResponse,
    ErrorResponse,
    NamespaceResponse,
    PodResponse,
    ServiceResponse,
)
from app.services.resources import ResourceService

router = APIRouter(prefix="/api", responses={500: {"model": ErrorResponse}})


@router.get("/namespaces", response_model=list[NamespaceResponse])
def list_namespaces(
    service: ResourceService = Depends(get_resource_service),  # noqa: B008
) -> list[NamespaceResponse]:
    return [NamespaceResponse(**item.to_dict()) for item in service.list_namespaces()]


@router.get("/pods", response_model=list[PodResponse])
def list_pods(
    ns: str | None = None,
    service: ResourceService = Depends(get_resource_service),  # noqa: B008
) -> list[PodResponse]:
    """List pods in ``ns``, or across the cluster when ``ns`` is missing or ``all``."""
    return [PodResponse(**item.to_dict()) for item in service.list_pods(ns)]


@router.get("/deployments", response_model=list[DeploymentResponse])
def list_deployments(
    ns: str | None = None,
    service: ResourceService = Depends(get_resource_service),  # noqa: B008
) -> list[DeploymentResponse]:
    return [DeploymentResponse(**item.to_dict()) for item in service.list_deployments(ns)]


@router.get("/services", response_model=list[ServiceResponse])
def list_services(
    ns: str | None = None,
    service: ResourceService = Depends(get_resource_service),  # noqa: B008
) -> list[ServiceResponse]:
    return [ServiceResponse(**item.to_dict()) for item in service.list_services(ns)]
