from __future__ import annotations

from functools import lru_cache

from app.clients.k8s import KubernetesClient
from app.core.config import Settings, load_settings
from app.services.resources import ResourceService


@lru_cache
def get_settings() -> Settings:
    return load_settings()


@lru_cache
def get_k8s_client() -> KubernetesClient:
    settings = get_settings()
    return KubernetesClient(timeout_seconds=settings.k8s_api_timeout_seconds)


@lru_cache
def get_resource_service() -> ResourceService:
    return ResourceService(get_k8s_client())
