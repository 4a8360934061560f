from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from app.clients.k8s import ALL_NAMESPACES, KubernetesClient, is_cluster_wide
from app.core.errors import ResourceQueryError, format_error
from app.models.k8s import (
    DeploymentSummary,
    HealthStatus,
    NamespaceSummary,
    PodSummary,
    ResourceKind,
    ServiceSummary,
)
from app.services.projection import (
    project_deployment,
    project_namespace,
    project_pod,
    project_service,
)

UNKNOWN_VERSION = "unknown"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ResourceService:
    def __init__(
        self,
        k8s_client: KubernetesClient,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._logger = logging.getLogger(__name__)
        self._k8s_client = k8s_client
        self._clock = clock or _utcnow

    def health(self) -> HealthStatus:
        try:
            version = self._k8s_client.get_version()
        except Exception as exc:  # noqa: BLE001 - a blocked version endpoint is not an outage
            self._logger.warning("Failed to read cluster version: %s", exc)
            version = None
        return HealthStatus(healthy=True, version=version or UNKNOWN_VERSION)

    def list_namespaces(self) -> list[NamespaceSummary]:
        try:
            items = self._k8s_client.list_namespaces()
        except Exception as exc:  # noqa: BLE001 - Kubernetes client raises many exception types.
            raise self._query_error("namespaces", None, exc) from exc
        return [project_namespace(item) for item in items]

    def list_pods(self, namespace: str | None) -> list[PodSummary]:
        items = self._fetch(ResourceKind.PODS, namespace)
        now = self._clock()
        return [project_pod(item, now) for item in items]

    def list_deployments(self, namespace: str | None) -> list[DeploymentSummary]:
        items = self._fetch(ResourceKind.DEPLOYMENTS, namespace)
        return [project_deployment(item) for item in items]

    def list_services(self, namespace: str | None) -> list[ServiceSummary]:
        items = self._fetch(ResourceKind.SERVICES, namespace)
        return [project_service(item) for item in items]

    def _fetch(self, kind: ResourceKind, namespace: str | None) -> list[object]:
        try:
            return self._k8s_client.list_resources(kind, namespace)
        except Exception as exc:  # noqa: BLE001 - Kubernetes client raises many exception types.
            raise self._query_error(kind.value, namespace, exc) from exc

    def _query_error(
        self, what: str, namespace: str | None, exc: Exception
    ) -> ResourceQueryError:
        scope = ALL_NAMESPACES if is_cluster_wide(namespace) else namespace
        self._logger.warning("Failed to list %s (namespace=%s): %s", what, scope, exc)
        return ResourceQueryError(format_error(exc))
