from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum


class ResourceKind(str, Enum):
    PODS = "pods"
    DEPLOYMENTS = "deployments"
    SERVICES = "services"


@dataclass(frozen=True)
class NamespaceSummary:
    name: str | None
    status: str | None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class PodSummary:
    """Flattened pod row.

    ``ready_label`` and ``restarts`` describe only the first container status
    reported by the kubelet; the remaining containers of a multi-container pod
    are not aggregated.
    """

    name: str | None
    namespace: str | None
    phase: str | None
    node_name: str | None
    restarts: int
    ready_label: str
    age: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class DeploymentSummary:
    name: str | None
    namespace: str | None
    ready_replicas: int = 0
    desired_replicas: int = 0
    available_replicas: int = 0
    updated_replicas: int = 0

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class ServiceSummary:
    name: str | None
    namespace: str | None
    type: str | None
    cluster_ip: str | None
    ports: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class HealthStatus:
    healthy: bool
    version: str

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
