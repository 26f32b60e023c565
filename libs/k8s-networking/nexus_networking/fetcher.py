"""Deployed networking state for an owner."""

import logging
from typing import Optional

from .client import ClientPort
from .errors import FetchError, NotInitializedError, ResourceNotFoundError
from .models import CapabilityFlags, ExposeType, NamespacedName, NetworkObject, Owner

logger = logging.getLogger(__name__)

# Lookup order is fixed so results are deterministic
FETCH_ORDER = (ExposeType.ROUTE, ExposeType.INGRESS)


def fetch_deployed(
    owner: Optional[Owner],
    client: Optional[ClientPort],
    capabilities: CapabilityFlags,
) -> list[NetworkObject]:
    """
    Read the networking resources currently deployed for the owner.

    Only kinds served by the cluster are looked up. A missing object is
    simply left out of the result.

    Args:
        owner: Owner whose resources are read
        client: Client used for the lookups
        capabilities: Kinds served by the cluster

    Returns:
        Deployed objects, routes before ingresses

    Raises:
        NotInitializedError: If owner or client is missing
        FetchError: If a lookup fails for any reason other than absence
    """
    if owner is None or client is None:
        raise NotInitializedError("owner" if owner is None else "client")

    key = NamespacedName.for_owner(owner)
    resources: list[NetworkObject] = []
    for kind in FETCH_ORDER:
        if not capabilities.is_available(kind):
            continue
        try:
            resources.append(client.get(key, kind))
        except ResourceNotFoundError:
            logger.debug(f"There is no deployed {kind.value} ({owner.name})")
        except Exception as e:
            logger.error(f"Could not fetch {kind.value} ({owner.name}): {e}")
            raise FetchError(kind, owner.name, e) from e
    return resources
