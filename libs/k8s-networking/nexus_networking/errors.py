"""Networking manager errors.

Only exceptions live here; callers decide how to log and requeue.
"""

from typing import Optional

from .models import ExposeType, NamespacedName

DISCOVERY_FAILURE_FORMAT = "unable to determine if {} are available: {}"
RESOURCE_UNAVAILABLE_FORMAT = "{} are not available in this cluster"
MANAGER_NOT_INITIALIZED = "the manager has not been initialized"

PLURALS = {
    ExposeType.ROUTE: "Routes",
    ExposeType.INGRESS: "Ingresses",
}


class NetworkingError(Exception):
    """Base error for networking resource management."""

    pass


class DiscoveryError(NetworkingError):
    """Raised when the cluster API surface cannot be probed."""

    def __init__(self, capability: str, cause: Exception):
        self.capability = capability
        self.cause = cause
        super().__init__(DISCOVERY_FAILURE_FORMAT.format(capability, cause))


class UnavailableResourceError(NetworkingError):
    """Raised when the requested kind is not served by the cluster."""

    def __init__(self, expose_type: ExposeType):
        self.expose_type = expose_type
        super().__init__(RESOURCE_UNAVAILABLE_FORMAT.format(PLURALS[expose_type]))


class BuildError(NetworkingError):
    """Raised when owner configuration cannot produce a valid object."""

    def __init__(
        self,
        field: str,
        message: str,
        expose_type: Optional[ExposeType] = None,
    ):
        self.field = field
        self.expose_type = expose_type
        super().__init__(message)


class FetchError(NetworkingError):
    """Raised when reading a deployed object fails for a reason other than absence."""

    def __init__(self, expose_type: ExposeType, owner: str, cause: Exception):
        self.expose_type = expose_type
        self.owner = owner
        self.cause = cause
        super().__init__(
            f"could not fetch {expose_type.value.lower()} ({owner}): {cause}"
        )


class NotInitializedError(NetworkingError):
    """Raised when the manager is used without its required collaborators."""

    def __init__(self, missing: str = ""):
        self.missing = missing
        message = MANAGER_NOT_INITIALIZED
        if missing:
            message = f"{message}: missing {missing}"
        super().__init__(message)


class ResourceNotFoundError(NetworkingError):
    """Raised by a client when the looked-up object does not exist."""

    def __init__(self, expose_type: ExposeType, key: NamespacedName):
        self.expose_type = expose_type
        self.key = key
        super().__init__(f"{expose_type.value} {key} not found")
