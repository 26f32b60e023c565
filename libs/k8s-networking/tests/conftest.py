"""Pytest configuration and fixtures for networking manager tests."""

import pytest
from unittest.mock import MagicMock
from kubernetes import client

from nexus_networking import (
    CapabilityFlags,
    ClientPort,
    ExposeType,
    ExposureConfig,
    NetworkingSettings,
    Owner,
    ResourceNotFoundError,
    TLSConfig,
)


class FakeNetworkingClient(ClientPort):
    """In-memory client recording every lookup."""

    def __init__(self, objects=None, errors=None):
        self.objects = objects or {}
        self.errors = errors or {}
        self.calls = []

    def get(self, key, kind):
        self.calls.append((key, kind))
        if kind in self.errors:
            raise self.errors[kind]
        if kind not in self.objects:
            raise ResourceNotFoundError(kind, key)
        return self.objects[kind]


@pytest.fixture
def mock_cluster_connection():
    """Mock cluster connection for testing."""
    mock_conn = MagicMock()
    mock_conn.apis = MagicMock(spec=client.ApisApi)
    mock_conn.networking_v1 = MagicMock(spec=client.NetworkingV1Api)
    mock_conn.custom_objects = MagicMock(spec=client.CustomObjectsApi)
    mock_conn.api_client = client.ApiClient()
    return mock_conn


@pytest.fixture
def settings():
    """Settings isolated from the environment."""
    return NetworkingSettings(_env_file=None, request_timeout_seconds=None)


@pytest.fixture
def route_owner():
    """Owner exposed through a route with mandatory TLS."""
    return Owner(
        name="nexus3",
        namespace="nexus",
        networking=ExposureConfig(
            expose=True,
            expose_as=ExposeType.ROUTE,
            tls=TLSConfig(mandatory=True),
        ),
    )


@pytest.fixture
def ingress_owner():
    """Owner exposed through an ingress with a custom certificate."""
    return Owner(
        name="nexus3",
        namespace="nexus",
        networking=ExposureConfig(
            expose=True,
            expose_as=ExposeType.INGRESS,
            host="nexus.example.com",
            tls=TLSConfig(secret_name="custom-cert"),
        ),
    )


@pytest.fixture
def all_capabilities():
    return CapabilityFlags(route_available=True, ingress_available=True)


@pytest.fixture
def no_capabilities():
    return CapabilityFlags(route_available=False, ingress_available=False)


@pytest.fixture
def fake_client():
    """Client with nothing deployed."""
    return FakeNetworkingClient()


@pytest.fixture
def route_payload():
    """Route as returned by the API server."""
    return {
        "apiVersion": "route.openshift.io/v1",
        "kind": "Route",
        "metadata": {
            "name": "nexus3",
            "namespace": "nexus",
            "labels": {"app": "nexus3"},
            "resourceVersion": "48213",
            "generation": 2,
            "annotations": {"openshift.io/host.generated": "true"},
        },
        "spec": {
            "host": "nexus3-nexus.apps.example.com",
            "to": {"kind": "Service", "name": "nexus3", "weight": 100},
            "port": {"targetPort": "http"},
            "wildcardPolicy": "None",
            "tls": {
                "termination": "edge",
                "insecureEdgeTerminationPolicy": "Redirect",
            },
        },
        "status": {"ingress": [{"host": "nexus3-nexus.apps.example.com"}]},
    }


@pytest.fixture
def make_client():
    """Factory for in-memory clients with deployed objects and failures."""
    return FakeNetworkingClient
