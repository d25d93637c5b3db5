"""Parse native Kubernetes objects and qualify their resource types."""

from __future__ import annotations

import logging
import time
from typing import Any

import yaml

from deploy_commander.models.resource import Configuration, KubernetesObject, Resource

logger = logging.getLogger(__name__)

_YamlLoader = getattr(yaml, "CSafeLoader", yaml.SafeLoader)

# Primitive API object kinds as of Kubernetes 1.1.
KUBERNETES_KINDS: frozenset[str] = frozenset({
    "binding",
    "componentstatus",
    "componentstatuslist",
    "deleteoptions",
    "endpoints",
    "endpointslist",
    "event",
    "eventlist",
    "limitrange",
    "limitrangelist",
    "namespace",
    "namespacelist",
    "node",
    "nodelist",
    "persistentvolume",
    "persistentvolumeclaim",
    "persistentvolumeclaimlist",
    "persistentvolumelist",
    "pod",
    "podlist",
    "podtemplate",
    "podtemplatelist",
    "replicationcontroller",
    "replicationcontrollerlist",
    "resourcequota",
    "resourcequotalist",
    "secret",
    "secretlist",
    "service",
    "serviceaccount",
    "serviceaccountlist",
    "servicelist",
})


class KubernetesObjectError(Exception):
    """A native Kubernetes object could not be turned into a Resource."""

    def __init__(self, reason: Any):
        self.reason = reason
        super().__init__(f"cannot unmarshal native kubernetes object: {reason!r}")


class DecodeError(KubernetesObjectError):
    """The input is not YAML of the expected shape."""


class FieldTypeError(KubernetesObjectError):
    """A field that must be a string holds something else."""

    def __init__(self, field_name: str, value: Any):
        self.field = field_name
        self.value = value
        super().__init__(f"{field_name} is not a string: {value!r}")


def parse_kubernetes_object(data: bytes | str) -> Resource:
    """Parse a Kubernetes API object in YAML format into a Resource."""
    try:
        obj = KubernetesObject.from_dict(_decode_mapping(data))
    except (yaml.YAMLError, TypeError) as e:
        raise DecodeError(e) from e

    name = obj.metadata.get("name", "")
    if not isinstance(name, str):
        raise FieldTypeError("name", name)

    resource = Resource(
        name=_unique_name(name),
        type=get_type_for_kubernetes_version_and_kind(obj.api_version, obj.kind),
    )

    # The property bag is looser than the metadata shape; decode again.
    try:
        resource.properties = _decode_mapping(data) or {}
    except (yaml.YAMLError, TypeError) as e:
        raise DecodeError(e) from e

    logger.debug("Parsed %s object as %s (%s)", obj.kind or "<no kind>", resource.name, resource.type)
    return resource


def _decode_mapping(data: bytes | str) -> dict | None:
    doc = yaml.load(data, Loader=_YamlLoader)
    if doc is not None and not isinstance(doc, dict):
        raise TypeError(f"expected a mapping, got {type(doc).__name__}")
    return doc


def _unique_name(prefix: str) -> str:
    return f"{prefix}-{time.time_ns()}"


def convert_kubernetes_resource_types(config: Configuration) -> None:
    """Qualify the type of every resource in config whose type is a Kubernetes kind.

    Resources without string ``apiVersion`` and ``kind`` properties are left alone.
    """
    for r in config.resources:
        if not is_kubernetes_kind(r.type.lower()):
            continue
        version = r.properties.get("apiVersion")
        kind = r.properties.get("kind")
        if isinstance(version, str) and isinstance(kind, str):
            r.type = get_type_for_kubernetes_version_and_kind(version, kind)


def get_type_for_kubernetes_version_and_kind(version: str, kind: str) -> str:
    """Convert a Kubernetes API version and kind to a qualified resource type name.

    Qualified names keep types handled by kubectl apart from other classes of
    resource types in the same configuration.
    """
    return f"kubernetes.{version.lower()}.{kind.lower()}"


def is_kubernetes_kind(type_name: str) -> bool:
    """Return True if a (lowercase) type name is a Kubernetes kind."""
    return type_name in KUBERNETES_KINDS


def to_yaml_or_error(obj: Any) -> str:
    """Dump a model or plain data as YAML, returning the error text on failure."""
    data = obj.to_dict() if hasattr(obj, "to_dict") else obj
    try:
        return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
    except yaml.YAMLError as e:
        return f"cannot marshal {type(obj).__name__}: {e}"
