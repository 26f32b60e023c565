"""Builders for the networking resources exposing an owner."""

import logging
from functools import lru_cache
from typing import Any, Optional

from kubernetes.client import ApiClient
from kubernetes.client import V1HTTPIngressPath, V1HTTPIngressRuleValue
from kubernetes.client import V1IngressBackend, V1IngressRule, V1IngressServiceBackend
from kubernetes.client import V1IngressSpec, V1IngressTLS, V1ServiceBackendPort

from .config import NetworkingSettings, get_settings
from .errors import BuildError
from .models import ExposeType, Ingress, Owner, Route

logger = logging.getLogger(__name__)

REWRITE_TARGET_ANNOTATION = "nginx.ingress.kubernetes.io/rewrite-target"


@lru_cache
def _serializer() -> ApiClient:
    return ApiClient()


def _to_api_dict(model: Any) -> dict[str, Any]:
    """Serialize a kubernetes client model to its camelCase API form."""
    return _serializer().sanitize_for_serialization(model)


def default_labels(owner: Owner) -> dict[str, str]:
    return {"app": owner.name, **owner.labels}


def _validate_identity(owner: Owner, expose_type: ExposeType) -> None:
    if not owner.name:
        raise BuildError("name", "owner name is required", expose_type)
    if not owner.namespace:
        raise BuildError("namespace", "owner namespace is required", expose_type)


class RouteBuilder:
    """Builds the OpenShift Route for an owner."""

    def __init__(self, owner: Owner, settings: Optional[NetworkingSettings] = None):
        self.owner = owner
        self.settings = settings or get_settings()
        self._redirect = False

    def with_redirect(self) -> "RouteBuilder":
        """Terminate TLS at the edge and redirect insecure traffic."""
        self._redirect = True
        return self

    def build(self) -> Route:
        """
        Build the route.

        Returns:
            Route for the owner's service

        Raises:
            BuildError: If the owner has no name or namespace
        """
        _validate_identity(self.owner, ExposeType.ROUTE)

        spec: dict[str, Any] = {
            "to": {"kind": "Service", "name": self.owner.name, "weight": 100},
            "port": {"targetPort": self.settings.route_target_port},
            "wildcardPolicy": "None",
        }
        host = self.owner.networking.host
        if host:
            spec["host"] = host
        if self._redirect:
            spec["tls"] = {
                "termination": "edge",
                "insecureEdgeTerminationPolicy": "Redirect",
            }

        return Route(
            name=self.owner.name,
            namespace=self.owner.namespace,
            labels=default_labels(self.owner),
            spec=spec,
        )


class IngressBuilder:
    """Builds the Kubernetes Ingress for an owner."""

    def __init__(self, owner: Owner, settings: Optional[NetworkingSettings] = None):
        self.owner = owner
        self.settings = settings or get_settings()
        self._custom_tls = False

    def with_custom_tls(self) -> "IngressBuilder":
        """Terminate TLS with the owner's certificate secret."""
        self._custom_tls = True
        return self

    def build(self) -> Ingress:
        """
        Build the ingress.

        Returns:
            Ingress routing the owner's host to its service

        Raises:
            BuildError: If name, namespace, host or TLS secret are missing
        """
        _validate_identity(self.owner, ExposeType.INGRESS)

        networking = self.owner.networking
        if not networking.host:
            raise BuildError(
                "host", "a host is required to expose through an ingress",
                ExposeType.INGRESS,
            )

        ingress_spec = V1IngressSpec(
            ingress_class_name=self.settings.ingress_class_name,
            rules=[
                V1IngressRule(
                    host=networking.host,
                    http=V1HTTPIngressRuleValue(
                        paths=[
                            V1HTTPIngressPath(
                                path=self.settings.ingress_path,
                                path_type=self.settings.ingress_path_type,
                                backend=V1IngressBackend(
                                    service=V1IngressServiceBackend(
                                        name=self.owner.name,
                                        port=V1ServiceBackendPort(
                                            number=self.owner.service_port
                                        ),
                                    )
                                ),
                            )
                        ]
                    ),
                )
            ],
        )

        if self._custom_tls:
            if not networking.tls_secret_name:
                raise BuildError(
                    "tls.secret_name",
                    "a TLS secret name is required for custom TLS",
                    ExposeType.INGRESS,
                )
            ingress_spec.tls = [
                V1IngressTLS(
                    hosts=[networking.host],
                    secret_name=networking.tls_secret_name,
                )
            ]

        annotations = {}
        if self.settings.ingress_rewrite_target:
            annotations[REWRITE_TARGET_ANNOTATION] = self.settings.ingress_rewrite_target

        return Ingress(
            name=self.owner.name,
            namespace=self.owner.namespace,
            labels=default_labels(self.owner),
            annotations=annotations,
            spec=_to_api_dict(ingress_spec),
        )


def create_route(owner: Owner, settings: Optional[NetworkingSettings] = None) -> Route:
    """Build the owner's route, redirecting insecure traffic when TLS is mandatory."""
    builder = RouteBuilder(owner, settings)
    if owner.networking.tls_mandatory:
        builder = builder.with_redirect()
    return builder.build()


def create_ingress(
    owner: Owner, settings: Optional[NetworkingSettings] = None
) -> Ingress:
    """Build the owner's ingress, with custom TLS when a secret is named."""
    builder = IngressBuilder(owner, settings)
    if len(owner.networking.tls_secret_name) > 0:
        builder = builder.with_custom_tls()
    return builder.build()
