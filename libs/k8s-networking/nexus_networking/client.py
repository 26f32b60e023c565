"""Point lookups of deployed networking resources."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from kubernetes.client.exceptions import ApiException

from .cluster import ClusterConnection
from .config import NetworkingSettings, get_settings
from .errors import ResourceNotFoundError
from .models import (
    ROUTE_GROUP,
    ROUTE_PLURAL,
    ROUTE_VERSION,
    ExposeType,
    Ingress,
    NamespacedName,
    NetworkObject,
    Route,
)


class ClientPort(ABC):
    """Reads a single networking object from the cluster."""

    @abstractmethod
    def get(self, key: NamespacedName, kind: ExposeType) -> NetworkObject:
        """
        Read an object by key.

        Args:
            key: Namespace and name of the object
            kind: Kind of object to read

        Returns:
            The deployed object

        Raises:
            ResourceNotFoundError: If the object does not exist
        """
        pass


class KubernetesNetworkingClient(ClientPort):
    """Reads routes and ingresses through the Kubernetes API."""

    def __init__(
        self,
        cluster: ClusterConnection,
        settings: Optional[NetworkingSettings] = None,
    ):
        """
        Initialize networking client.

        Args:
            cluster: Cluster connection
            settings: Optional settings override
        """
        self.cluster = cluster
        self.settings = settings or get_settings()

    def _request_options(self) -> dict[str, Any]:
        if self.settings.request_timeout_seconds is None:
            return {}
        return {"_request_timeout": self.settings.request_timeout_seconds}

    def get(self, key: NamespacedName, kind: ExposeType) -> NetworkObject:
        try:
            if kind == ExposeType.ROUTE:
                return self._get_route(key)
            return self._get_ingress(key)
        except ApiException as e:
            if e.status == 404:
                raise ResourceNotFoundError(kind, key) from e
            raise

    def _get_route(self, key: NamespacedName) -> Route:
        payload = self.cluster.custom_objects.get_namespaced_custom_object(
            group=ROUTE_GROUP,
            version=ROUTE_VERSION,
            namespace=key.namespace,
            plural=ROUTE_PLURAL,
            name=key.name,
            **self._request_options(),
        )
        return Route.from_api(payload)

    def _get_ingress(self, key: NamespacedName) -> Ingress:
        ingress = self.cluster.networking_v1.read_namespaced_ingress(
            key.name, key.namespace, **self._request_options()
        )
        payload = self.cluster.api_client.sanitize_for_serialization(ingress)
        return Ingress.from_api(payload)
