"""Tests for manifest and configuration parsing."""

import pytest

from deploy_commander.utils.kubernetes_util import DecodeError, FieldTypeError
from deploy_commander.utils.manifest_parser import (
    load_configuration,
    parse_manifest,
    split_documents,
    type_counts,
)

MANIFEST = """\
# leading comment
apiVersion: v1
kind: Service
metadata:
  name: web
---
apiVersion: v1
kind: ReplicationController
metadata:
  name: web-rc
---
# only a comment
---
apiVersion: v1
kind: Service
metadata:
  name: api
"""


class TestSplitDocuments:
    def test_drops_empty_documents(self):
        docs = split_documents(MANIFEST)
        assert len(docs) == 3
        assert "name: web-rc" in docs[1]

    def test_empty_input(self):
        assert split_documents("") == []
        assert split_documents("---\n---\n") == []


class TestParseManifest:
    def test_parses_each_object_in_order(self):
        config = parse_manifest(MANIFEST)

        assert [r.type for r in config.resources] == [
            "kubernetes.v1.service",
            "kubernetes.v1.replicationcontroller",
            "kubernetes.v1.service",
        ]
        assert config.resources[0].name.startswith("web-")
        assert config.resources[1].properties["metadata"]["name"] == "web-rc"

    def test_propagates_field_errors(self):
        with pytest.raises(FieldTypeError):
            parse_manifest("kind: Pod\napiVersion: v1\nmetadata:\n  name: 7\n")

    def test_type_counts(self):
        counts = type_counts(parse_manifest(MANIFEST))
        assert counts == {"kubernetes.v1.service": 2, "kubernetes.v1.replicationcontroller": 1}


class TestLoadConfiguration:
    def test_loads_resources(self):
        config = load_configuration(
            "resources:\n"
            "- name: svc\n"
            "  type: Service\n"
            "  properties:\n"
            "    apiVersion: v1\n"
            "    kind: Service\n"
            "- name: db\n"
            "  type: cloudsql.instance\n"
        )

        assert [r.name for r in config.resources] == ["svc", "db"]
        assert config.resources[0].properties == {"apiVersion": "v1", "kind": "Service"}
        assert config.resources[1].properties == {}

    def test_empty_document(self):
        assert load_configuration("").resources == []

    @pytest.mark.parametrize("bad", [
        "resources: [unterminated\n",
        "- a\n- b\n",
        "resources: nope\n",
        "resources:\n- just-a-string\n",
        "resources:\n- name: x\n  properties: [1, 2]\n",
        "resources:\n- name: x\n  type: {a: b}\n",
    ])
    def test_malformed(self, bad):
        with pytest.raises(DecodeError):
            load_configuration(bad)


class TestDocumentMarkers:
    """YAML streams that use the less common document markers."""

    def test_separator_with_trailing_comment(self):
        config = parse_manifest("apiVersion: v1\nkind: Service\n--- # second\napiVersion: v1\nkind: Pod\n")
        assert [r.type for r in config.resources] == ["kubernetes.v1.service", "kubernetes.v1.pod"]

    def test_inline_document_after_separator(self):
        config = parse_manifest(
            "apiVersion: v1\nkind: Service\nmetadata:\n  name: web\n"
            "--- {apiVersion: v1, kind: Pod, metadata: {name: inline}}\n"
        )

        assert [r.type for r in config.resources] == ["kubernetes.v1.service", "kubernetes.v1.pod"]
        assert config.resources[1].properties == {
            "apiVersion": "v1",
            "kind": "Pod",
            "metadata": {"name": "inline"},
        }

    def test_document_end_markers(self):
        config = parse_manifest(
            "apiVersion: v1\nkind: Service\n...\n"
            "---\napiVersion: v1\nkind: Secret\n...\n"
        )
        assert [r.type for r in config.resources] == ["kubernetes.v1.service", "kubernetes.v1.secret"]

    def test_malformed_stream(self):
        with pytest.raises(DecodeError):
            parse_manifest("apiVersion: v1\nkind: 'Service\n---\nkind: Pod\n")


def test_uses_the_shared_yaml_loader():
    from deploy_commander.utils import kubernetes_util, manifest_parser

    assert manifest_parser._YamlLoader is kubernetes_util._YamlLoader
