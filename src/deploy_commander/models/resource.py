"""Resource and configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def _or_default(value: Any, default: Any) -> Any:
    return default if value is None else value


@dataclass
class KubernetesObject:
    """The handful of fields needed from a raw Kubernetes API object."""

    api_version: str = ""
    kind: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, d: dict | None) -> KubernetesObject:
        """Build from a decoded document.

        Raises TypeError when a field is present with the wrong type.
        """
        if not d:
            return cls()
        api_version = _or_default(d.get("apiVersion"), "")
        kind = _or_default(d.get("kind"), "")
        metadata = _or_default(d.get("metadata"), {})
        if not isinstance(api_version, str):
            raise TypeError(f"apiVersion is not a string: {api_version!r}")
        if not isinstance(kind, str):
            raise TypeError(f"kind is not a string: {kind!r}")
        if not isinstance(metadata, dict):
            raise TypeError(f"metadata is not a mapping: {metadata!r}")
        return cls(api_version=api_version, kind=kind, metadata=metadata)


@dataclass
class Resource:
    name: str = ""
    type: str = ""
    properties: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "properties": self.properties,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Resource:
        return cls(
            name=d.get("name", "") or "",
            type=d.get("type", "") or "",
            properties=d.get("properties", {}) or {},
        )


@dataclass
class Configuration:
    resources: list[Resource] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"resources": [r.to_dict() for r in self.resources]}

    @classmethod
    def from_dict(cls, d: dict | None) -> Configuration:
        if not d:
            return cls()
        return cls(resources=[Resource.from_dict(r) for r in d.get("resources", []) or []])
