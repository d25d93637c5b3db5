"""Parse multi-document manifests and configuration files."""

from __future__ import annotations

import yaml

from deploy_commander.models.resource import Configuration
from deploy_commander.utils.kubernetes_util import DecodeError, _YamlLoader, parse_kubernetes_object


def split_documents(manifest: str) -> list[str]:
    """Split a YAML stream into one YAML text per non-empty document."""
    try:
        docs = list(yaml.load_all(manifest or "", Loader=_YamlLoader))
    except yaml.YAMLError as e:
        raise DecodeError(e) from e
    return [
        yaml.safe_dump(doc, default_flow_style=False, sort_keys=False)
        for doc in docs
        if doc is not None
    ]


def parse_manifest(manifest: str) -> Configuration:
    """Parse every Kubernetes object in a multi-document manifest."""
    return Configuration(
        resources=[parse_kubernetes_object(doc) for doc in split_documents(manifest)]
    )


def load_configuration(text: str) -> Configuration:
    """Decode a ``{resources: [...]}`` configuration document."""
    try:
        doc = yaml.load(text, Loader=_YamlLoader)
    except yaml.YAMLError as e:
        raise DecodeError(e) from e

    if doc is None:
        return Configuration()
    if not isinstance(doc, dict):
        raise DecodeError(f"configuration is not a mapping: {type(doc).__name__}")

    entries = doc.get("resources") or []
    if not isinstance(entries, list):
        raise DecodeError(f"resources is not a list: {type(entries).__name__}")
    for entry in entries:
        if not isinstance(entry, dict):
            raise DecodeError(f"resource is not a mapping: {entry!r}")
        if not isinstance(entry.get("properties") or {}, dict):
            raise DecodeError(f"properties of {entry.get('name')!r} is not a mapping")
        if not isinstance(entry.get("type") or "", str):
            raise DecodeError(f"type of {entry.get('name')!r} is not a string")
    return Configuration.from_dict(doc)


def type_counts(config: Configuration) -> dict[str, int]:
    """Count resources by type in a configuration."""
    counts: dict[str, int] = {}
    for res in config.resources:
        counts[res.type] = counts.get(res.type, 0) + 1
    return counts
