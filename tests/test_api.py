from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from kubernetes import client
from kubernetes.client.exceptions import ApiException

from app.core.dependencies import get_resource_service
from app.main import app
from app.services.resources import ResourceService
from test_resource_service import FakeKubernetesClient

NOW = datetime(2026, 10, 17, 12, 0, tzinfo=timezone.utc)


def _sample_items() -> dict[str, list[object]]:
    return {
        "namespaces": [
            client.V1Namespace(
                metadata=client.V1ObjectMeta(name="shop"),
                status=client.V1NamespaceStatus(phase="Active"),
            )
        ],
        "pods": [
            client.V1Pod(
                metadata=client.V1ObjectMeta(
                    name="web-0",
                    namespace="shop",
                    creation_timestamp=NOW - timedelta(days=3),
                ),
                spec=client.V1PodSpec(containers=[], node_name="node-a"),
                status=client.V1PodStatus(
                    phase="Running",
                    container_statuses=[
                        client.V1ContainerStatus(
                            name="web",
                            image="nginx",
                            image_id="",
                            ready=True,
                            restart_count=2,
                        )
                    ],
                ),
            )
        ],
        "deployments": [
            client.V1Deployment(
                metadata=client.V1ObjectMeta(name="web", namespace="shop"),
                spec=client.V1DeploymentSpec(
                    selector=client.V1LabelSelector(match_labels={"app": "web"}),
                    template=client.V1PodTemplateSpec(),
                ),
                status=client.V1DeploymentStatus(
                    replicas=2, ready_replicas=1, available_replicas=1, updated_replicas=2
                ),
            )
        ],
        "services": [
            client.V1Service(
                metadata=client.V1ObjectMeta(name="web", namespace="shop"),
                spec=client.V1ServiceSpec(
                    type="NodePort",
                    cluster_ip="10.43.0.12",
                    ports=[client.V1ServicePort(port=80, node_port=30080, protocol="TCP")],
                ),
            )
        ],
    }


@contextmanager
def _client_for(fake: FakeKubernetesClient) -> Iterator[TestClient]:
    service = ResourceService(fake, clock=lambda: NOW)
    app.dependency_overrides[get_resource_service] = lambda: service
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def fake() -> FakeKubernetesClient:
    return FakeKubernetesClient(items=_sample_items())


@pytest.fixture
def api(fake: FakeKubernetesClient) -> Iterator[TestClient]:
    with _client_for(fake) as client_:
        yield client_


def test_health(api: TestClient) -> None:
    response = api.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"healthy": True, "version": "v1.30.4+k3s1"}


def test_health_with_blocked_version_endpoint() -> None:
    forbidden = ApiException(status=403, reason="Forbidden")
    with _client_for(FakeKubernetesClient(version_error=forbidden)) as api:
        response = api.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"healthy": True, "version": "unknown"}


def test_liveness_endpoints_do_not_touch_upstream(api: TestClient, fake: FakeKubernetesClient) -> None:
    assert api.get("/healthz").json() == {"status": "ok"}
    assert api.get("/ping").json() == {"message": "pong"}
    assert fake.calls == []


def test_list_namespaces(api: TestClient) -> None:
    response = api.get("/api/namespaces")

    assert response.status_code == 200
    assert response.json() == [{"name": "shop", "status": "Active"}]


def test_list_pods_uses_camel_case_keys(api: TestClient, fake: FakeKubernetesClient) -> None:
    response = api.get("/api/pods", params={"ns": "shop"})

    assert response.status_code == 200
    assert response.json() == [
        {
            "name": "web-0",
            "namespace": "shop",
            "phase": "Running",
            "readyLabel": "Yes",
            "restarts": 2,
            "nodeName": "node-a",
            "age": "3d",
        }
    ]
    assert fake.calls == [("pods", "shop")]


def test_list_deployments_without_namespace(api: TestClient, fake: FakeKubernetesClient) -> None:
    response = api.get("/api/deployments")

    assert response.status_code == 200
    assert response.json() == [
        {
            "name": "web",
            "namespace": "shop",
            "readyReplicas": 1,
            "desiredReplicas": 2,
            "availableReplicas": 1,
            "updatedReplicas": 2,
        }
    ]
    assert fake.calls == [("deployments", None)]


def test_list_services_for_all_namespaces(api: TestClient, fake: FakeKubernetesClient) -> None:
    response = api.get("/api/services", params={"ns": "all"})

    assert response.status_code == 200
    assert response.json() == [
        {
            "name": "web",
            "namespace": "shop",
            "type": "NodePort",
            "clusterIP": "10.43.0.12",
            "ports": ["80→30080/TCP"],
        }
    ]
    assert fake.calls == [("services", "all")]


@pytest.mark.parametrize("path", ["/api/namespaces", "/api/pods", "/api/deployments", "/api/services"])
def test_upstream_failure_returns_error_envelope(path: str) -> None:
    forbidden = ApiException(status=403, reason="Forbidden")
    forbidden.body = '{"message": "Forbidden"}'
    with _client_for(FakeKubernetesClient(error=forbidden)) as api:
        response = api.get(path, params={"ns": "shop"})

    assert response.status_code == 500
    assert response.json() == {"error": "Forbidden"}
