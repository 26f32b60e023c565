"""Networking resources manager."""

from typing import Optional

from .client import ClientPort
from .comparators import DiagnosticSink, EqualityComparator, comparators_for
from .config import NetworkingSettings
from .discovery import DiscoveryPort, probe_capabilities
from .errors import NotInitializedError
from .fetcher import fetch_deployed
from .models import CapabilityFlags, ExposeType, NetworkObject, Owner
from .resolver import resolve_desired


class NetworkingManager:
    """
    Creates networking resources, fetches deployed ones and compares them.

    One manager serves one owner for one reconcile session. Capabilities
    are fixed when the manager is created.
    """

    def __init__(
        self,
        owner: Owner,
        capabilities: CapabilityFlags,
        client: Optional[ClientPort] = None,
        sink: Optional[DiagnosticSink] = None,
        settings: Optional[NetworkingSettings] = None,
    ):
        """
        Initialize networking manager.

        Use from_cluster to get a manager that can also fetch deployed
        resources. Constructing one directly without a client only supports
        desired-state resolution and comparators; get_deployed_resources then
        raises NotInitializedError.

        Args:
            owner: Owner to expose
            capabilities: Kinds served by the cluster
            client: Client for reading deployed objects
            sink: Receiver for comparator mismatches, logs when omitted
            settings: Optional settings override
        """
        self.owner = owner
        self.capabilities = capabilities
        self.client = client
        self.settings = settings
        self._comparators = comparators_for(sink)

    @classmethod
    def from_cluster(
        cls,
        owner: Optional[Owner],
        client: Optional[ClientPort],
        discovery: DiscoveryPort,
        sink: Optional[DiagnosticSink] = None,
        settings: Optional[NetworkingSettings] = None,
    ) -> "NetworkingManager":
        """
        Probe the cluster and create a fully initialized manager.

        Args:
            owner: Owner to expose
            client: Client for reading deployed objects
            discovery: Discovery port used to probe capabilities
            sink: Receiver for comparator mismatches
            settings: Optional settings override

        Returns:
            NetworkingManager

        Raises:
            NotInitializedError: If owner or client is missing
            DiscoveryError: If capabilities cannot be determined
        """
        if owner is None:
            raise NotInitializedError("owner")
        if client is None:
            raise NotInitializedError("client")

        capabilities = probe_capabilities(discovery)
        return cls(owner, capabilities, client=client, sink=sink, settings=settings)

    def get_required_resources(self) -> list[NetworkObject]:
        """Return the resources the owner requires."""
        return resolve_desired(self.owner, self.capabilities, self.settings)

    def get_deployed_resources(self) -> list[NetworkObject]:
        """Return the networking resources deployed on the cluster."""
        return fetch_deployed(self.owner, self.client, self.capabilities)

    def get_comparator(self, kind: ExposeType) -> EqualityComparator:
        """
        Get the comparator used to detect drift for a kind.

        Args:
            kind: Resource kind

        Returns:
            Comparator callable returning True when objects are equal
        """
        return self._comparators[ExposeType(kind)]

    def get_comparators(self) -> dict[ExposeType, EqualityComparator]:
        """Get every comparator indexed by kind."""
        return dict(self._comparators)
