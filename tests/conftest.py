"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from deploy_commander.core.k8s_client import K8sClient
from deploy_commander.core.kubectl import KubectlRunner

SERVICE_INPUT = """
  kind: "Service"
  apiVersion: "v1"
  metadata:
    name: "mock"
    labels:
      app: "mock"
  spec:
    ports:
      -
        protocol: "TCP"
        port: 99
        targetPort: 9949
    selector:
      app: "mock"
"""

RC_INPUT = """
  kind: "ReplicationController"
  apiVersion: "v1"
  metadata:
    name: "mockname"
    labels:
      app: "mockapp"
      foo: "bar"
  spec:
    replicas: 1
    selector:
      app: "mockapp"
    template:
      metadata:
        labels:
          app: "mocklabel"
      spec:
        containers:
          -
            name: "mock-container"
            image: "kubernetes/pause"
            ports:
              -
                containerPort: 9949
                protocol: "TCP"
"""


@pytest.fixture
def service_input():
    return SERVICE_INPUT


@pytest.fixture
def rc_input():
    return RC_INPUT


@pytest.fixture
def mock_k8s():
    """A K8sClient stand-in with an installed, healthy manager."""
    k8s = Mock(spec=K8sClient)
    k8s.active_context_name = "test-cluster"
    k8s.get_replication_controller.return_value = {
        "metadata": {"name": "manager-rc", "namespace": "helm"},
        "spec": {"replicas": 1},
        "status": {"replicas": 1, "readyReplicas": 1},
    }
    return k8s


@pytest.fixture
def mock_runner():
    """A KubectlRunner stand-in reporting a recent kubectl."""
    runner = Mock(spec=KubectlRunner)
    runner.binary = "kubectl"
    runner.available.return_value = True
    runner.client_version.return_value = "v1.29.2"
    return runner
