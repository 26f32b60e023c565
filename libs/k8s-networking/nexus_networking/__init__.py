"""Nexus Networking - Route/Ingress exposure resolution and drift detection."""

from .builders import IngressBuilder, RouteBuilder, create_ingress, create_route
from .client import ClientPort, KubernetesNetworkingClient
from .cluster import ClusterConnection
from .comparators import (
    COMPARATORS,
    ComparisonResult,
    EqualityComparator,
    FieldMismatch,
    ingress_equal,
    route_equal,
)
from .config import NetworkingSettings, configure_logging, get_settings
from .discovery import DiscoveryPort, KubernetesDiscovery, probe_capabilities
from .errors import (
    BuildError,
    DiscoveryError,
    FetchError,
    NetworkingError,
    NotInitializedError,
    ResourceNotFoundError,
    UnavailableResourceError,
)
from .fetcher import fetch_deployed
from .manager import NetworkingManager
from .models import (
    CapabilityFlags,
    ClusterConfig,
    ExposeType,
    ExposureConfig,
    Ingress,
    NamespacedName,
    NetworkObject,
    Owner,
    Route,
    TLSConfig,
)
from .resolver import resolve_desired

__version__ = "0.1.0"

__all__ = [
    # Manager
    "NetworkingManager",
    # Capability discovery
    "DiscoveryPort",
    "KubernetesDiscovery",
    "probe_capabilities",
    # Desired and deployed state
    "RouteBuilder",
    "IngressBuilder",
    "create_route",
    "create_ingress",
    "resolve_desired",
    "ClientPort",
    "KubernetesNetworkingClient",
    "fetch_deployed",
    # Drift detection
    "EqualityComparator",
    "ComparisonResult",
    "FieldMismatch",
    "route_equal",
    "ingress_equal",
    "COMPARATORS",
    # Cluster and configuration
    "ClusterConnection",
    "ClusterConfig",
    "NetworkingSettings",
    "get_settings",
    "configure_logging",
    # Errors
    "NetworkingError",
    "DiscoveryError",
    "UnavailableResourceError",
    "BuildError",
    "FetchError",
    "NotInitializedError",
    "ResourceNotFoundError",
    # Models
    "ExposeType",
    "TLSConfig",
    "ExposureConfig",
    "Owner",
    "CapabilityFlags",
    "NamespacedName",
    "NetworkObject",
    "Route",
    "Ingress",
]
