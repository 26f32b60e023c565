"""Kubernetes client connection used by discovery and lookups."""

import base64
import tempfile
from pathlib import Path
from typing import Optional

from kubernetes import config
from kubernetes.client import ApiClient, ApisApi, CustomObjectsApi, NetworkingV1Api

from .models import ClusterConfig


class ClusterConnection:
    """Represents a connection to a single Kubernetes cluster."""

    def __init__(self, cluster_config: Optional[ClusterConfig] = None):
        """
        Initialize cluster connection.

        Args:
            cluster_config: Cluster configuration, in-cluster config when omitted

        Raises:
            ValueError: If kubeconfig is invalid
        """
        self.config = cluster_config or ClusterConfig()
        self._api_client: Optional[ApiClient] = None
        self._apis: Optional[ApisApi] = None
        self._networking_v1: Optional[NetworkingV1Api] = None
        self._custom_objects: Optional[CustomObjectsApi] = None
        self._temp_kubeconfig: Optional[Path] = None

        self._initialize_client()

    def _initialize_client(self):
        """Initialize Kubernetes API client."""
        try:
            if self.config.kubeconfig_data:
                # Decode base64 kubeconfig and write to temp file
                kubeconfig_content = base64.b64decode(self.config.kubeconfig_data)
                with tempfile.NamedTemporaryFile(mode="wb", delete=False) as f:
                    f.write(kubeconfig_content)
                    self._temp_kubeconfig = Path(f.name)
                config.load_kube_config(
                    config_file=str(self._temp_kubeconfig),
                    context=self.config.context,
                )
            elif self.config.kubeconfig_path:
                config.load_kube_config(
                    config_file=self.config.kubeconfig_path,
                    context=self.config.context,
                )
            else:
                # Operator running inside the cluster
                config.load_incluster_config()

            self._api_client = ApiClient()
            self._apis = ApisApi(self._api_client)
            self._networking_v1 = NetworkingV1Api(self._api_client)
            self._custom_objects = CustomObjectsApi(self._api_client)

        except Exception as e:
            raise ValueError(f"Failed to initialize cluster connection: {e}") from e

    @property
    def api_client(self) -> ApiClient:
        """Get ApiClient instance."""
        if not self._api_client:
            raise RuntimeError("Cluster connection not initialized")
        return self._api_client

    @property
    def apis(self) -> ApisApi:
        """Get ApisApi instance (API group discovery)."""
        if not self._apis:
            raise RuntimeError("Cluster connection not initialized")
        return self._apis

    @property
    def networking_v1(self) -> NetworkingV1Api:
        """Get NetworkingV1Api instance."""
        if not self._networking_v1:
            raise RuntimeError("Cluster connection not initialized")
        return self._networking_v1

    @property
    def custom_objects(self) -> CustomObjectsApi:
        """Get CustomObjectsApi instance."""
        if not self._custom_objects:
            raise RuntimeError("Cluster connection not initialized")
        return self._custom_objects

    def close(self):
        """Close the cluster connection and clean up resources."""
        if self._api_client:
            self._api_client.close()
            self._api_client = None

        if self._temp_kubeconfig and self._temp_kubeconfig.exists():
            self._temp_kubeconfig.unlink()
            self._temp_kubeconfig = None

        self._apis = None
        self._networking_v1 = None
        self._custom_objects = None

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
