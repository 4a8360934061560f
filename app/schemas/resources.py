from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NamespaceResponse(BaseModel):
    name: str | None = None
    status: str | None = None


class PodResponse(BaseModel):
    name: str | None = None
    namespace: str | None = None
    phase: str | None = None
    ready_label: str = Field(alias="readyLabel")
    restarts: int = 0
    node_name: str | None = Field(default=None, alias="nodeName")
    age: str

    model_config = ConfigDict(populate_by_name=True)


class DeploymentResponse(BaseModel):
    name: str | None = None
    namespace: str | None = None
    ready_replicas: int = Field(default=0, alias="readyReplicas")
    desired_replicas: int = Field(default=0, alias="desiredReplicas")
    available_replicas: int = Field(default=0, alias="availableReplicas")
    updated_replicas: int = Field(default=0, alias="updatedReplicas")

    model_config = ConfigDict(populate_by_name=True)


class ServiceResponse(BaseModel):
    name: str | None = None
    namespace: str | None = None
    type: str | None = None
    cluster_ip: str | None = Field(default=None, alias="clusterIP")
    ports: list[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class HealthResponse(BaseModel):
    healthy: bool
    version: str


class ErrorResponse(BaseModel):
    error: str
