"""Data models for Deploy Commander."""

from __future__ import annotations

from deploy_commander.models.resource import Configuration, KubernetesObject, Resource

__all__ = ["Configuration", "KubernetesObject", "Resource"]
