"""Networking resource models for Nexus exposure."""

import copy
from enum import Enum
from typing import Any, ClassVar, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ROUTE_GROUP = "route.openshift.io"
ROUTE_VERSION = "v1"
ROUTE_PLURAL = "routes"

INGRESS_GROUP = "networking.k8s.io"
INGRESS_VERSION = "v1"


class ExposeType(str, Enum):
    """Networking resource kinds an owner can be exposed through."""

    ROUTE = "Route"
    INGRESS = "Ingress"


class TLSConfig(BaseModel):
    """TLS settings requested by the owner."""

    model_config = ConfigDict(frozen=True)

    mandatory: bool = False
    secret_name: Optional[str] = None  # Custom certificate for ingresses


class ExposureConfig(BaseModel):
    """How the owner wants its service exposed outside the cluster."""

    model_config = ConfigDict(frozen=True)

    expose: bool = False
    expose_as: Optional[ExposeType] = None
    host: Optional[str] = None
    tls: TLSConfig = Field(default_factory=TLSConfig)

    @property
    def tls_mandatory(self) -> bool:
        return self.tls.mandatory

    @property
    def tls_secret_name(self) -> str:
        return self.tls.secret_name or ""


class Owner(BaseModel):
    """The managed resource whose service is being exposed."""

    model_config = ConfigDict(frozen=True)

    name: str
    namespace: str = "default"
    labels: dict[str, str] = Field(default_factory=dict)
    service_port: int = 8081
    networking: ExposureConfig = Field(default_factory=ExposureConfig)


class CapabilityFlags(BaseModel):
    """Networking APIs served by the target cluster."""

    model_config = ConfigDict(frozen=True)

    route_available: bool = False
    ingress_available: bool = False

    def is_available(self, kind: ExposeType) -> bool:
        if kind == ExposeType.ROUTE:
            return self.route_available
        return self.ingress_available


class NamespacedName(BaseModel):
    """Lookup key for a namespaced object."""

    model_config = ConfigDict(frozen=True)

    namespace: str
    name: str

    @classmethod
    def for_owner(cls, owner: Owner) -> "NamespacedName":
        return cls(namespace=owner.namespace, name=owner.name)

    def __str__(self) -> str:
        return f"{self.namespace}/{self.name}"


class NetworkObject(BaseModel):
    """
    A networking resource, either requested or read back from the cluster.

    The spec is kept in its API (camelCase) form so that requested and
    deployed objects compare structurally. Server-populated fields are
    carried for callers but never take part in equality checks.
    """

    api_version: ClassVar[str]

    kind: ExposeType
    name: str
    namespace: str
    labels: dict[str, str] = Field(default_factory=dict)
    annotations: dict[str, str] = Field(default_factory=dict)
    spec: dict[str, Any] = Field(default_factory=dict)

    # Populated by the API server
    resource_version: Optional[str] = None
    generation: Optional[int] = None
    status: dict[str, Any] = Field(default_factory=dict)

    @property
    def key(self) -> NamespacedName:
        return NamespacedName(namespace=self.namespace, name=self.name)

    def to_manifest(self) -> dict[str, Any]:
        """
        Render the object as an API manifest suitable for create/replace.

        Returns:
            Manifest dict with apiVersion, kind, metadata and spec
        """
        metadata: dict[str, Any] = {
            "name": self.name,
            "namespace": self.namespace,
            "labels": dict(self.labels),
        }
        if self.annotations:
            metadata["annotations"] = dict(self.annotations)
        if self.resource_version:
            metadata["resourceVersion"] = self.resource_version

        return {
            "apiVersion": self.api_version,
            "kind": self.kind.value,
            "metadata": metadata,
            "spec": copy.deepcopy(self.spec),
        }

    @classmethod
    def from_api(cls, payload: dict[str, Any]) -> "NetworkObject":
        """
        Build an object from an API payload.

        Args:
            payload: Serialized object as returned by the API server

        Returns:
            Route or Ingress, depending on the payload kind
        """
        if cls is NetworkObject:
            kind = ExposeType(payload.get("kind"))
            return NETWORK_OBJECT_TYPES[kind].from_api(payload)

        metadata = payload.get("metadata") or {}
        return cls(
            name=metadata.get("name", ""),
            namespace=metadata.get("namespace", ""),
            labels=metadata.get("labels") or {},
            annotations=metadata.get("annotations") or {},
            spec=payload.get("spec") or {},
            resource_version=metadata.get("resourceVersion"),
            generation=metadata.get("generation"),
            status=payload.get("status") or {},
        )


class Route(NetworkObject):
    """OpenShift Route."""

    api_version: ClassVar[str] = f"{ROUTE_GROUP}/{ROUTE_VERSION}"

    kind: Literal[ExposeType.ROUTE] = ExposeType.ROUTE

    @property
    def tls_redirect(self) -> bool:
        tls = self.spec.get("tls") or {}
        return tls.get("insecureEdgeTerminationPolicy") == "Redirect"


class Ingress(NetworkObject):
    """Kubernetes Ingress."""

    api_version: ClassVar[str] = f"{INGRESS_GROUP}/{INGRESS_VERSION}"

    kind: Literal[ExposeType.INGRESS] = ExposeType.INGRESS

    @property
    def custom_tls(self) -> bool:
        return bool(self.spec.get("tls"))


NETWORK_OBJECT_TYPES: dict[ExposeType, type[NetworkObject]] = {
    ExposeType.ROUTE: Route,
    ExposeType.INGRESS: Ingress,
}


class ClusterConfig(BaseModel):
    """Cluster connection configuration."""

    name: str = "default"
    kubeconfig_path: Optional[str] = None
    kubeconfig_data: Optional[str] = None  # Base64 encoded kubeconfig
    context: Optional[str] = None  # Specific context to use
