from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime, timezone

from app.models.k8s import DeploymentSummary, NamespaceSummary, PodSummary, ServiceSummary

MISSING_LABEL = "-"


def age_from(timestamp: object | None, now: datetime | None = None) -> str:
    """Render the time elapsed since ``timestamp`` as ``Nm``, ``Nh`` or ``Nd``.

    Minutes are used below one hour, hours below two days and whole days after
    that. Anything that cannot be read as a point in time renders as ``-``.
    """
    created = _to_datetime(timestamp)
    if created is None:
        return MISSING_LABEL
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        current = current.replace(tzinfo=timezone.utc)

    minutes = int((current - created).total_seconds() // 60)
    if minutes < 60:
        return f"{minutes}m"
    hours = minutes // 60
    if hours < 48:
        return f"{hours}h"
    return f"{hours // 24}d"


def project_namespace(namespace: object) -> NamespaceSummary:
    return NamespaceSummary(
        name=_lookup(namespace, "metadata", "name"),
        status=_lookup(namespace, "status", "phase"),
    )


def project_pod(pod: object, now: datetime | None = None) -> PodSummary:
    container_statuses = _lookup(pod, "status", "container_statuses") or []
    first_status = container_statuses[0] if container_statuses else None

    return PodSummary(
        name=_lookup(pod, "metadata", "name"),
        namespace=_lookup(pod, "metadata", "namespace"),
        phase=_lookup(pod, "status", "phase"),
        node_name=_lookup(pod, "spec", "node_name"),
        restarts=_count(_lookup(first_status, "restart_count")),
        ready_label=_ready_label(first_status),
        age=age_from(_lookup(pod, "metadata", "creation_timestamp"), now),
    )


def project_deployment(deployment: object) -> DeploymentSummary:
    status = _lookup(deployment, "status")
    return DeploymentSummary(
        name=_lookup(deployment, "metadata", "name"),
        namespace=_lookup(deployment, "metadata", "namespace"),
        ready_replicas=_count(_lookup(status, "ready_replicas")),
        desired_replicas=_count(_lookup(status, "replicas")),
        available_replicas=_count(_lookup(status, "available_replicas")),
        updated_replicas=_count(_lookup(status, "updated_replicas")),
    )


def project_service(service: object) -> ServiceSummary:
    ports = _lookup(service, "spec", "ports") or []
    return ServiceSummary(
        name=_lookup(service, "metadata", "name"),
        namespace=_lookup(service, "metadata", "namespace"),
        type=_lookup(service, "spec", "type"),
        cluster_ip=_lookup(service, "spec", "cluster_ip"),
        ports=[format_service_port(port) for port in ports],
    )


def format_service_port(port: object) -> str:
    node_port = _lookup(port, "node_port")
    rendered = f"{_lookup(port, 'port')}"
    if node_port:
        rendered += f"→{node_port}"
    return f"{rendered}/{_lookup(port, 'protocol')}"


def _ready_label(container_status: object | None) -> str:
    if container_status is None:
        return MISSING_LABEL
    if _lookup(container_status, "ready"):
        return "Yes"
    # waiting and terminated are exclusive upstream; waiting wins if both show up
    reason = (
        _lookup(container_status, "state", "waiting", "reason")
        or _lookup(container_status, "state", "terminated", "reason")
        or ""
    )
    return f"No ({reason})"


def _lookup(value: object | None, *path: str) -> object | None:
    """Walk ``path`` through model objects or mappings, stopping at the first gap.

    Keys are the kubernetes client's snake_case attribute names
    (``container_statuses``, ``node_port``), also for mappings. Raw apiserver
    JSON uses camelCase keys and is not read here.
    """
    current = value
    for key in path:
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(key)
        else:
            current = getattr(current, key, None)
    return current


def _count(value: object | None) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)


def _to_datetime(value: object | None) -> datetime | None:
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        iso_value = raw.replace("Z", "+00:00") if raw.endswith("Z") else raw
        try:
            parsed = datetime.fromisoformat(iso_value)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
