"""Prerequisite checks for the deployment server-side components."""

from __future__ import annotations

import logging

from deploy_commander.config.settings import settings
from deploy_commander.core.k8s_client import K8sClient
from deploy_commander.core.kubectl import KubectlError, KubectlRunner
from deploy_commander.models.doctor import DiagnosticResult, Severity
from deploy_commander.utils.version_compare import meets_minimum

logger = logging.getLogger(__name__)


def is_installed(k8s: K8sClient) -> bool:
    """Return True if the manager replication controller exists in the server namespace.

    The check is all-or-nothing: finding the controller means both the
    namespace and the manager are present.
    """
    try:
        return k8s.get_replication_controller(settings.manager_rc, settings.server_namespace) is not None
    except Exception:
        logger.debug("Installation check failed", exc_info=True)
        return False


def run_diagnostics(k8s: K8sClient, runner: KubectlRunner) -> list[DiagnosticResult]:
    """Run all diagnostic checks and return results."""
    results: list[DiagnosticResult] = []
    results.extend(_check_kubectl(runner))
    results.extend(_check_server_components(k8s))
    return results


def _check_kubectl(runner: KubectlRunner) -> list[DiagnosticResult]:
    if not runner.available():
        return [DiagnosticResult(
            check_name="kubectl",
            severity=Severity.ERROR,
            message=f"'{runner.binary}' was not found on PATH",
            suggestion="Install kubectl or point DCOM_KUBECTL at it.",
            component="kubectl",
        )]

    try:
        version = runner.client_version()
    except KubectlError as e:
        logger.debug("kubectl version failed", exc_info=True)
        return [DiagnosticResult(
            check_name="kubectl",
            severity=Severity.WARNING,
            message=f"Could not determine kubectl version: {e}",
            component="kubectl",
        )]

    ok = meets_minimum(version, settings.min_kubectl_version)
    if ok is None:
        return [DiagnosticResult(
            check_name="kubectl",
            severity=Severity.WARNING,
            message=f"Unrecognized kubectl version '{version}'",
            component="kubectl",
        )]
    if not ok:
        return [DiagnosticResult(
            check_name="kubectl",
            severity=Severity.WARNING,
            message=f"kubectl {version} is older than the required {settings.min_kubectl_version}",
            suggestion="Upgrade kubectl.",
            component="kubectl",
        )]
    return [DiagnosticResult(
        check_name="kubectl",
        severity=Severity.INFO,
        message=f"kubectl {version}",
        component="kubectl",
    )]


def _check_server_components(k8s: K8sClient) -> list[DiagnosticResult]:
    """Look for the manager replication controller."""
    ns = settings.server_namespace
    try:
        rc = k8s.get_replication_controller(settings.manager_rc, ns)
    except Exception as e:
        logger.debug("Failed server component check", exc_info=True)
        return [DiagnosticResult(
            check_name="server_components",
            severity=Severity.ERROR,
            message=f"Could not query namespace '{ns}' in context '{k8s.active_context_name}': {e}",
            suggestion="Check cluster connectivity and RBAC permissions.",
            component=settings.manager_rc,
        )]

    if rc is None:
        return [DiagnosticResult(
            check_name="server_components",
            severity=Severity.WARNING,
            message=f"Replication controller '{settings.manager_rc}' not found in namespace '{ns}'",
            suggestion=settings.install_hint,
            component=settings.manager_rc,
        )]

    desired = (rc.get("spec") or {}).get("replicas", 0) or 0
    ready = (rc.get("status") or {}).get("readyReplicas", 0) or 0
    if desired and ready < desired:
        return [DiagnosticResult(
            check_name="server_components",
            severity=Severity.WARNING,
            message=f"'{settings.manager_rc}' in '{ns}' has {ready}/{desired} replicas ready",
            suggestion=f"Inspect the pods in namespace '{ns}'.",
            component=settings.manager_rc,
        )]
    return [DiagnosticResult(
        check_name="server_components",
        severity=Severity.INFO,
        message=f"'{settings.manager_rc}' installed in '{ns}' ({ready}/{desired} replicas ready)",
        component=settings.manager_rc,
    )]
