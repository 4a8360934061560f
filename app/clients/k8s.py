from __future__ import annotations

import logging

from kubernetes import client, config
from kubernetes.config.config_exception import ConfigException

from app.core.errors import KubernetesNotConfiguredError
from app.models.k8s import ResourceKind

ALL_NAMESPACES = "all"

# kind -> (api attribute, namespaced list method, cluster-wide list method)
_LIST_CALLS: dict[ResourceKind, tuple[str, str, str]] = {
    ResourceKind.PODS: ("_core_api", "list_namespaced_pod", "list_pod_for_all_namespaces"),
    ResourceKind.DEPLOYMENTS: (
        "_apps_api",
        "list_namespaced_deployment",
        "list_deployment_for_all_namespaces",
    ),
    ResourceKind.SERVICES: (
        "_core_api",
        "list_namespaced_service",
        "list_service_for_all_namespaces",
    ),
}


def is_cluster_wide(namespace: str | None) -> bool:
    return not namespace or namespace == ALL_NAMESPACES


class KubernetesClient:
    """Read-only snapshot access to the cluster.

    Nothing here catches upstream errors; callers decide how to report them.
    """

    def __init__(self, timeout_seconds: int) -> None:
        self._logger = logging.getLogger(__name__)
        self._timeout_seconds = timeout_seconds
        self._core_api = self._build_client()
        self._apps_api = client.AppsV1Api() if self._core_api else None
        self._version_api = client.VersionApi() if self._core_api else None

    @property
    def configured(self) -> bool:
        return self._core_api is not None

    def list_resources(self, kind: ResourceKind, namespace: str | None) -> list[object]:
        api_attr, namespaced_method, cluster_method = _LIST_CALLS[ResourceKind(kind)]
        api = self._require(getattr(self, api_attr))
        if is_cluster_wide(namespace):
            response = getattr(api, cluster_method)(_request_timeout=self._timeout_seconds)
        else:
            response = getattr(api, namespaced_method)(
                namespace=namespace,
                _request_timeout=self._timeout_seconds,
            )
        return list(response.items or [])

    def list_namespaces(self) -> list[object]:
        api = self._require(self._core_api)
        response = api.list_namespace(_request_timeout=self._timeout_seconds)
        return list(response.items or [])

    def get_version(self) -> str | None:
        api = self._require(self._version_api)
        info = api.get_code(_request_timeout=self._timeout_seconds)
        return info.git_version

    @staticmethod
    def _require(api: object | None) -> object:
        if api is None:
            raise KubernetesNotConfiguredError()
        return api

    def _build_client(self) -> client.CoreV1Api | None:
        try:
            config.load_incluster_config()
            self._logger.info("Loaded in-cluster Kubernetes config")
        except ConfigException:
            try:
                config.load_kube_config()
                self._logger.info("Loaded kubeconfig for local development")
            except ConfigException as exc:
                self._logger.warning("Failed to configure Kubernetes client: %s", exc)
                return None
        return client.CoreV1Api()
