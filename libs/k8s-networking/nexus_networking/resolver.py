"""Desired networking state for an owner."""

import logging
from typing import Callable, Optional

from .builders import create_ingress, create_route
from .config import NetworkingSettings
from .errors import BuildError, UnavailableResourceError
from .models import CapabilityFlags, ExposeType, NetworkObject, Owner

logger = logging.getLogger(__name__)


def resolve_desired(
    owner: Owner,
    capabilities: CapabilityFlags,
    settings: Optional[NetworkingSettings] = None,
) -> list[NetworkObject]:
    """
    Compute the networking resources the owner requires.

    At most one object is returned: the owner is exposed either through a
    route or through an ingress, never both.

    Args:
        owner: Owner to expose
        capabilities: Kinds served by the cluster
        settings: Optional settings override

    Returns:
        Empty list when exposure is disabled or no kind is requested,
        otherwise a single Route or Ingress

    Raises:
        UnavailableResourceError: If the requested kind is not served
        BuildError: If the owner configuration cannot produce the object
    """
    networking = owner.networking
    if not networking.expose:
        return []

    if networking.expose_as == ExposeType.ROUTE:
        if not capabilities.route_available:
            raise UnavailableResourceError(ExposeType.ROUTE)
        logger.debug(f"Creating Route ({owner.name})")
        return [_build(ExposeType.ROUTE, lambda: create_route(owner, settings))]

    if networking.expose_as == ExposeType.INGRESS:
        if not capabilities.ingress_available:
            raise UnavailableResourceError(ExposeType.INGRESS)
        logger.debug(f"Creating Ingress ({owner.name})")
        return [_build(ExposeType.INGRESS, lambda: create_ingress(owner, settings))]

    logger.warning(
        f"Exposure enabled for {owner.namespace}/{owner.name} "
        "but no known resource kind was requested; nothing will be created"
    )
    return []


def _build(
    expose_type: ExposeType, build: Callable[[], NetworkObject]
) -> NetworkObject:
    try:
        return build()
    except BuildError as e:
        kind = expose_type.value.lower()
        logger.error(f"Could not create {expose_type.value}: {e}")
        raise BuildError(e.field, f"could not create {kind}: {e}", expose_type) from e
