"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_str(name: str, default: str) -> str:
    return os.environ.get(name, "") or default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _default_kubectl() -> str:
    """Return the kubectl binary to run.

    DCOM_KUBECTL wins over KUBECTL, matching how wrapper scripts usually
    point tools at a specific kubectl build.
    """
    return _env_str("DCOM_KUBECTL", _env_str("KUBECTL", "kubectl"))


@dataclass
class Settings:
    server_namespace: str = field(default_factory=lambda: _env_str("DCOM_SERVER_NAMESPACE", "helm"))
    manager_rc: str = field(default_factory=lambda: _env_str("DCOM_MANAGER_RC", "manager-rc"))
    kubectl_binary: str = field(default_factory=_default_kubectl)
    min_kubectl_version: str = field(default_factory=lambda: _env_str("DCOM_MIN_KUBECTL_VERSION", "1.1.0"))
    kubectl_timeout: float = field(default_factory=lambda: _env_float("DCOM_KUBECTL_TIMEOUT", 30.0))
    default_output: str = field(default_factory=lambda: _env_str("DCOM_OUTPUT", "table"))

    @property
    def install_hint(self) -> str:
        return f"Install the server-side components into the '{self.server_namespace}' namespace."


# Global singleton
settings = Settings()
