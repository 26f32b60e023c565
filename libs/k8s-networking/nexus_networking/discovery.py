"""Cluster capability discovery for networking resources."""

import logging
from abc import ABC, abstractmethod

from kubernetes.client.exceptions import ApiException

from .cluster import ClusterConnection
from .errors import DiscoveryError
from .models import ROUTE_GROUP, ROUTE_VERSION, CapabilityFlags

logger = logging.getLogger(__name__)


class DiscoveryPort(ABC):
    """Answers which networking APIs the cluster serves."""

    @abstractmethod
    def is_route_available(self) -> bool:
        """Check whether OpenShift Routes are served."""
        pass

    @abstractmethod
    def is_ingress_available(self) -> bool:
        """Check whether networking.k8s.io Ingresses are served."""
        pass


class KubernetesDiscovery(DiscoveryPort):
    """Discovery backed by the Kubernetes API discovery endpoints."""

    def __init__(self, cluster: ClusterConnection):
        """
        Initialize discovery.

        Args:
            cluster: Cluster connection
        """
        self.cluster = cluster

    def is_route_available(self) -> bool:
        """
        Check whether the route API group is served.

        Returns:
            True if route.openshift.io/v1 is listed by the server

        Raises:
            ApiException: If the group list cannot be read
        """
        group_list = self.cluster.apis.get_api_versions()
        for group in group_list.groups or []:
            if group.name != ROUTE_GROUP:
                continue
            return any(v.version == ROUTE_VERSION for v in group.versions or [])
        return False

    def is_ingress_available(self) -> bool:
        """
        Check whether the Ingress kind is served by networking.k8s.io/v1.

        Returns:
            True if the group version lists the Ingress kind

        Raises:
            ApiException: If the resource list cannot be read
        """
        try:
            resource_list = self.cluster.networking_v1.get_api_resources()
        except ApiException as e:
            if e.status == 404:
                return False
            raise
        return any(r.kind == "Ingress" for r in resource_list.resources or [])


def probe_capabilities(discovery: DiscoveryPort) -> CapabilityFlags:
    """
    Probe the cluster once for the networking kinds it serves.

    Args:
        discovery: Discovery port to query

    Returns:
        Capability flags for routes and ingresses

    Raises:
        DiscoveryError: If either query fails
    """
    try:
        route_available = discovery.is_route_available()
    except Exception as e:
        raise DiscoveryError("routes", e) from e

    try:
        ingress_available = discovery.is_ingress_available()
    except Exception as e:
        raise DiscoveryError("ingresses", e) from e

    logger.debug(
        f"Cluster capabilities: routes={route_available}, ingresses={ingress_available}"
    )
    return CapabilityFlags(
        route_available=route_available,
        ingress_available=ingress_available,
    )
