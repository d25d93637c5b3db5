"""Kubernetes API wrapper."""

from __future__ import annotations

from kubernetes import client, config
from kubernetes.client import ApiException


class K8sClient:
    """Thin wrapper around the Kubernetes Python client."""

    def __init__(self, context: str | None = None):
        self.context = context
        self._core_v1: client.CoreV1Api | None = None
        self._api_client: client.ApiClient | None = None

    def _load_config(self) -> client.ApiClient:
        if self._api_client is not None:
            return self._api_client
        try:
            cfg = client.Configuration()
            config.load_kube_config(
                context=self.context,
                client_configuration=cfg,
            )
            # Prevent indefinite hangs on unreachable clusters
            cfg.retries = 1
            self._api_client = client.ApiClient(configuration=cfg)
        except config.ConfigException:
            config.load_incluster_config()
            self._api_client = client.ApiClient()
        return self._api_client

    @property
    def core_v1(self) -> client.CoreV1Api:
        if self._core_v1 is None:
            self._core_v1 = client.CoreV1Api(api_client=self._load_config())
        return self._core_v1

    @property
    def active_context_name(self) -> str:
        if self.context:
            return self.context
        try:
            _, ctx = config.list_kube_config_contexts()
            return ctx.get("name", "unknown") if ctx else "unknown"
        except Exception:
            return "in-cluster"

    def get_replication_controller(self, name: str, namespace: str) -> dict | None:
        """Read a replication controller, returning None if it does not exist."""
        try:
            result = self.core_v1.read_namespaced_replication_controller(
                name=name,
                namespace=namespace,
                _request_timeout=30,
            )
        except ApiException as e:
            if e.status == 404:
                return None
            raise
        return self._load_config().sanitize_for_serialization(result) if result else None
