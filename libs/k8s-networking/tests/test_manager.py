"""Tests for NetworkingManager."""

import pytest
from unittest.mock import Mock
from kubernetes.client.exceptions import ApiException

from nexus_networking import (
    CapabilityFlags,
    DiscoveryError,
    ExposeType,
    ExposureConfig,
    Ingress,
    NetworkingManager,
    NotInitializedError,
    Owner,
    Route,
    TLSConfig,
)


def discovery_for(route_available, ingress_available):
    discovery = Mock()
    discovery.is_route_available.return_value = route_available
    discovery.is_ingress_available.return_value = ingress_available
    return discovery


class TestNetworkingManager:
    """Test cases for NetworkingManager."""

    def test_from_cluster(self, route_owner, fake_client):
        manager = NetworkingManager.from_cluster(
            route_owner, fake_client, discovery_for(True, False)
        )

        assert manager.owner == route_owner
        assert manager.client is fake_client
        assert manager.capabilities == CapabilityFlags(
            route_available=True, ingress_available=False
        )

    def test_from_cluster_missing_client(self, route_owner):
        discovery = discovery_for(True, True)

        with pytest.raises(NotInitializedError):
            NetworkingManager.from_cluster(route_owner, None, discovery)

        discovery.is_route_available.assert_not_called()

    def test_from_cluster_missing_owner(self, fake_client):
        with pytest.raises(NotInitializedError) as exc_info:
            NetworkingManager.from_cluster(None, fake_client, discovery_for(True, True))

        assert exc_info.value.missing == "owner"

    def test_from_cluster_discovery_failure(self, route_owner, fake_client):
        discovery = Mock()
        discovery.is_route_available.return_value = True
        discovery.is_ingress_available.side_effect = ApiException(status=500)

        with pytest.raises(DiscoveryError) as exc_info:
            NetworkingManager.from_cluster(route_owner, fake_client, discovery)

        assert exc_info.value.capability == "ingresses"

    def test_deployed_without_client(self, route_owner, all_capabilities):
        """A manager built for desired state only cannot fetch."""
        manager = NetworkingManager(route_owner, all_capabilities)

        with pytest.raises(NotInitializedError):
            manager.get_deployed_resources()

    def test_get_comparator(self, route_owner, all_capabilities):
        manager = NetworkingManager(route_owner, all_capabilities)

        assert manager.get_comparator(ExposeType.ROUTE).kind == ExposeType.ROUTE
        assert manager.get_comparator("Ingress").kind == ExposeType.INGRESS

    def test_get_comparators(self, route_owner, all_capabilities):
        manager = NetworkingManager(route_owner, all_capabilities)

        comparators = manager.get_comparators()

        assert set(comparators) == {ExposeType.ROUTE, ExposeType.INGRESS}
        comparators.clear()
        assert len(manager.get_comparators()) == 2

    def test_custom_sink(self, route_owner, all_capabilities):
        received = []
        manager = NetworkingManager(route_owner, all_capabilities, sink=received.append)
        requested = Route(name="nexus3", namespace="nexus")
        deployed = Route(name="nexus3", namespace="other")

        assert manager.get_comparator(ExposeType.ROUTE)(deployed, requested) is False
        assert len(received) == 1


class TestNetworkingScenarios:
    """End-to-end reconcile scenarios."""

    def test_route_with_mandatory_tls(self, route_owner, make_client, settings):
        manager = NetworkingManager.from_cluster(
            route_owner, make_client(), discovery_for(True, False), settings=settings
        )

        required = manager.get_required_resources()

        assert len(required) == 1
        route = required[0]
        assert isinstance(route, Route)
        assert route.tls_redirect is True

        deployed = route.model_copy(update={"resource_version": "5521"})
        assert manager.get_comparator(ExposeType.ROUTE)(deployed, route) is True

    def test_ingress_with_custom_cert_not_yet_deployed(self, make_client, settings):
        owner = Owner(
            name="nexus3",
            namespace="nexus",
            networking=ExposureConfig(
                expose=True,
                expose_as=ExposeType.INGRESS,
                host="nexus.example.com",
                tls=TLSConfig(secret_name="custom-cert"),
            ),
        )
        networking_client = make_client()
        manager = NetworkingManager.from_cluster(
            owner, networking_client, discovery_for(True, True), settings=settings
        )

        required = manager.get_required_resources()
        deployed = manager.get_deployed_resources()

        assert len(required) == 1
        assert isinstance(required[0], Ingress)
        assert required[0].custom_tls is True
        assert deployed == []
        assert [kind for _, kind in networking_client.calls] == [
            ExposeType.ROUTE,
            ExposeType.INGRESS,
        ]

    def test_drift_detected_after_host_change(self, ingress_owner, make_client, settings):
        manager = NetworkingManager(
            ingress_owner, CapabilityFlags(ingress_available=True), settings=settings
        )
        requested = manager.get_required_resources()[0]
        deployed = requested.model_copy(
            update={"spec": {**requested.spec, "rules": [{"host": "old.example.com"}]}}
        )
        manager.client = make_client(objects={ExposeType.INGRESS: deployed})

        [fetched] = manager.get_deployed_resources()

        assert manager.get_comparator(fetched.kind)(fetched, requested) is False
