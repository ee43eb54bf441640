"""Tests for DocumentBuilder.

Covers the fluent put/delete interface, supplier values, the concrete build
scenarios, materialization (build, build_as_map, to_json), idempotence,
custom codecs, the silent_* adapters and their logging.
"""

from __future__ import annotations

import logging
from typing import Any

import pytest

from json_path_builder.codecs.stdlib import JsonCodec
from json_path_builder.document import DocumentBuilder
from json_path_builder.engine.config import BuilderConfig
from json_path_builder.errors import (
    BuildError,
    DecodeError,
    EncodeError,
    PathConflictError,
)
from json_path_builder.tree.nodes import Node, NodeType

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _SpyCodec(JsonCodec):
    """JsonCodec that counts encode() and decode() calls."""

    def __init__(self) -> None:
        super().__init__()
        self.encoded = 0
        self.decoded = 0

    def encode(self, node: Node) -> str:
        self.encoded += 1
        return super().encode(node)

    def decode(self, text: str) -> Node:
        self.decoded += 1
        return super().decode(text)


class _BrokenCodec(JsonCodec):
    """JsonCodec whose encode() always fails."""

    def encode(self, node: Node) -> str:
        raise EncodeError("encoder unavailable")


@pytest.fixture
def builder() -> DocumentBuilder:
    return DocumentBuilder()


# ---------------------------------------------------------------------------
# Concrete scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_sibling_keys(self, builder: DocumentBuilder) -> None:
        doc = (
            builder.put("$.user.firstName", "John")
            .put("$.user.lastName", "Doe")
            .build_as_map()
        )
        assert doc == {"user": {"firstName": "John", "lastName": "Doe"}}

    def test_array_appends(self, builder: DocumentBuilder) -> None:
        doc = (
            builder.put("$.user.friends[*]", "Marco")
            .put("$.user.friends[*]", "Polo")
            .build_as_map()
        )
        assert doc == {"user": {"friends": ["Marco", "Polo"]}}

    def test_delete_leaves_empty_parent(self, builder: DocumentBuilder) -> None:
        doc = (
            builder.put("$.user.firstName", "John")
            .delete("$.user.firstName")
            .build_as_map()
        )
        assert doc == {"user": {}}

    def test_missing_root_marker(self) -> None:
        without = DocumentBuilder().put("user.lastName", "Doe").build()
        with_root = DocumentBuilder().put("$.user.lastName", "Doe").build()
        assert without == with_root
        assert DocumentBuilder().put("user.lastName", "Doe").build_as_map() == {
            "user": {"lastName": "Doe"}
        }

    def test_embedded_json_element(self, builder: DocumentBuilder) -> None:
        doc = builder.put("$.details.social[*]", '{"facebook":"url"}').build_as_map()
        assert doc == {"details": {"social": [{"facebook": "url"}]}}

    def test_full_user_document(self, builder: DocumentBuilder) -> None:
        node = (
            builder.put("$.user.firstName", "John")
            .put("$.user.lastName", "Doe")
            .put("$.user.friends[*]", "Marco")
            .put("$.user.friends[*]", "Polo")
            .put("$.user.details.social[*]", '{"facebook": "url"}')
            .build()
        )
        user = node.get("user")
        assert user is not None
        assert user["firstName"].value == "John"
        assert user["lastName"].value == "Doe"
        assert user["friends"][0].value == "Marco"
        assert user["friends"][1].value == "Polo"
        assert user["details"]["social"][0]["facebook"].value == "url"


# ---------------------------------------------------------------------------
# put()
# ---------------------------------------------------------------------------


class TestPut:
    def test_returns_same_builder(self, builder: DocumentBuilder) -> None:
        assert builder.put("a", 1) is builder

    @pytest.mark.parametrize(
        "value", ["text", 0, -3, 2.5, True, False, None, ["a", 1], []]
    )
    def test_value_reads_back_unchanged(
        self, builder: DocumentBuilder, value: Any
    ) -> None:
        doc = builder.put("$.x.y", value).build_as_map()
        assert doc["x"]["y"] == value
        assert type(doc["x"]["y"]) is type(value)

    def test_supplier_called_once(self, builder: DocumentBuilder) -> None:
        calls: list[int] = []

        def supplier() -> str:
            calls.append(1)
            return "John"

        builder.put("$.user.name", supplier)
        assert calls == [1]
        assert builder.build_as_map() == {"user": {"name": "John"}}

    def test_supplier_result_is_classified(self, builder: DocumentBuilder) -> None:
        builder.put("$.social[*]", lambda: '{"facebook": "url"}')
        assert builder.build_as_map() == {"social": [{"facebook": "url"}]}

    def test_build_as_map_output_can_be_put_back(self) -> None:
        nested = (
            DocumentBuilder()
            .put("$.user.firstName", "John")
            .put("$.user.lastName", "Doe")
            .build_as_map()
        )
        node = DocumentBuilder().put("$.nested", nested).build()
        user = node["nested"]["user"]
        assert user["firstName"].value == "John"
        assert user["lastName"].value == "Doe"

    def test_built_node_can_be_put_back(self) -> None:
        built = DocumentBuilder().put("$.a.b", 1).build()
        doc = DocumentBuilder().put("$.copy", built).put("$.copy.a.c", 2).build_as_map()
        assert doc == {"copy": {"a": {"b": 1, "c": 2}}}
        assert built["a"].get("c") is None

    def test_put_value_is_not_aliased(self, builder: DocumentBuilder) -> None:
        value = {"tags": ["a"]}
        builder.put("$.item", value)
        value["tags"].append("b")
        assert builder.build_as_map() == {"item": {"tags": ["a"]}}

    def test_malformed_embedded_json_raises(self, builder: DocumentBuilder) -> None:
        with pytest.raises(DecodeError):
            builder.put("$.greeting", "hello {name}")

    def test_unsupported_value_raises(self, builder: DocumentBuilder) -> None:
        with pytest.raises(EncodeError):
            builder.put("$.when", {1, 2})

    def test_conflict_raises_build_error(self, builder: DocumentBuilder) -> None:
        builder.put("$.user", "John")
        with pytest.raises(BuildError):
            builder.put("$.user.name", "John")

    def test_key_under_array_raises(self, builder: DocumentBuilder) -> None:
        builder.put("$.tags[*]", "a")
        with pytest.raises(PathConflictError):
            builder.put("$.tags.color", "red")
        assert builder.build_as_map() == {"tags": ["a"]}

    def test_failed_put_leaves_document_unchanged(
        self, builder: DocumentBuilder
    ) -> None:
        builder.put("$.user.name", "John")
        with pytest.raises(DecodeError):
            builder.put("$.user.bio", "{broken")
        assert builder.build_as_map() == {"user": {"name": "John"}}

    def test_invalid_path_raises_value_error(self, builder: DocumentBuilder) -> None:
        with pytest.raises(ValueError):
            builder.put("$.", 1)


# ---------------------------------------------------------------------------
# delete()
# ---------------------------------------------------------------------------


class TestDelete:
    def test_returns_same_builder(self, builder: DocumentBuilder) -> None:
        assert builder.put("a", 1).delete("a") is builder

    def test_sibling_unaffected(self, builder: DocumentBuilder) -> None:
        builder.put("$.user.firstName", "John").put("$.user.lastName", "Doe")
        first = builder.build()
        assert "firstName" in first["user"]
        builder.delete("$.user.firstName")
        node = builder.build()
        assert "firstName" not in node["user"]
        assert "lastName" in node["user"]

    def test_without_root_marker(self, builder: DocumentBuilder) -> None:
        builder.put("$.user.firstName", "John").put("$.user.lastName", "Doe")
        builder.delete("user.firstName")
        assert builder.build_as_map() == {"user": {"lastName": "Doe"}}

    def test_missing_path_is_ignored(
        self, builder: DocumentBuilder, caplog: pytest.LogCaptureFixture
    ) -> None:
        builder.put("$.a", 1)
        with caplog.at_level(logging.DEBUG, logger="json_path_builder"):
            assert builder.delete("$.missing.key") is builder
        assert builder.build_as_map() == {"a": 1}
        assert "path not found" in caplog.text

    def test_array_marker_empties_array(self, builder: DocumentBuilder) -> None:
        builder.put("$.tags[*]", "a").put("$.tags[*]", "b").delete("$.tags[*]")
        assert builder.build_as_map() == {"tags": []}


# ---------------------------------------------------------------------------
# Materialization
# ---------------------------------------------------------------------------


class TestBuild:
    def test_fresh_builder_is_empty(self, builder: DocumentBuilder) -> None:
        node = builder.build()
        assert node.node_type == NodeType.OBJECT
        assert node.is_empty()
        assert builder.build_as_map() == {}

    def test_build_is_idempotent(self, builder: DocumentBuilder) -> None:
        builder.put("$.a.b[*]", 1)
        assert builder.build() == builder.build()
        assert builder.build_as_map() == builder.build_as_map()

    def test_build_returns_independent_tree(self, builder: DocumentBuilder) -> None:
        builder.put("$.a", 1)
        node = builder.build()
        node.members["b"] = Node.scalar(2)
        assert builder.build_as_map() == {"a": 1}

    def test_builder_usable_after_build(self, builder: DocumentBuilder) -> None:
        builder.put("$.a", 1).build()
        builder.put("$.b", 2)
        assert builder.build_as_map() == {"a": 1, "b": 2}

    def test_build_as_map_has_no_nodes(self, builder: DocumentBuilder) -> None:
        doc = builder.put("$.a[*]", {"b": None}).build_as_map()
        assert type(doc) is dict
        assert type(doc["a"]) is list
        assert type(doc["a"][0]) is dict

    def test_to_json(self, builder: DocumentBuilder) -> None:
        builder.put("$.user.name", "John").put("$.user.tags[*]", "x")
        assert builder.to_json() == '{"user": {"name": "John", "tags": ["x"]}}'

    def test_build_empty(self) -> None:
        empty = DocumentBuilder.build_empty()
        assert empty == Node.object()
        assert DocumentBuilder.build_empty() is not empty

    def test_non_finite_number_fails_at_build(self, builder: DocumentBuilder) -> None:
        builder.put("$.x", float("nan"))
        with pytest.raises(EncodeError):
            builder.build()


# ---------------------------------------------------------------------------
# Codec and config
# ---------------------------------------------------------------------------


class TestCodec:
    def test_default_codec_is_shared(self) -> None:
        assert DocumentBuilder().codec is DocumentBuilder().codec

    def test_custom_codec_used_for_build(self) -> None:
        spy = _SpyCodec()
        DocumentBuilder().put("$.user.firstName", "John").build()
        assert spy.decoded == 0

        DocumentBuilder(spy).put("$.user.firstName", "John").build()
        assert spy.encoded == 1
        assert spy.decoded == 1

    def test_custom_codec_used_for_embedded_json(self) -> None:
        spy = _SpyCodec()
        DocumentBuilder(spy).put("$.social[*]", '{"a": 1}')
        assert spy.decoded == 1
        assert spy.encoded == 0

    def test_codec_options_apply_to_to_json(self) -> None:
        builder = DocumentBuilder(JsonCodec(sort_keys=True))
        builder.put("b", 1).put("a", 2)
        assert builder.to_json() == '{"a": 2, "b": 1}'

    def test_custom_path_syntax(self) -> None:
        config = BuilderConfig(root_marker="#/", separator="/", array_marker="[]")
        doc = (
            DocumentBuilder(config=config)
            .put("#/user/friends[]", "Marco")
            .put("user/name", "John")
            .build_as_map()
        )
        assert doc == {"user": {"friends": ["Marco"], "name": "John"}}

    def test_repr(self) -> None:
        builder = DocumentBuilder().put("a", 1)
        assert "keys=1" in repr(builder)


# ---------------------------------------------------------------------------
# Silent variants
# ---------------------------------------------------------------------------


class TestSilent:
    def test_silent_put_swallows_decode_error(
        self, builder: DocumentBuilder, caplog: pytest.LogCaptureFixture
    ) -> None:
        builder.put("$.a", 1)
        with caplog.at_level(logging.WARNING, logger="json_path_builder"):
            assert builder.silent_put("$.b", "{broken") is builder
        assert builder.build_as_map() == {"a": 1}
        assert "json document build failed" in caplog.text
        assert caplog.records[-1].exc_info is not None

    def test_silent_put_swallows_conflict(self, builder: DocumentBuilder) -> None:
        builder.put("$.user", "John")
        assert builder.silent_put("$.user.name", "John") is builder

    def test_silent_put_success(self, builder: DocumentBuilder) -> None:
        builder.silent_put("$.a", lambda: 1)
        assert builder.build_as_map() == {"a": 1}

    def test_silent_put_does_not_swallow_other_errors(
        self, builder: DocumentBuilder
    ) -> None:
        with pytest.raises(ValueError):
            builder.silent_put("", 1)

    def test_silent_build_success(self, builder: DocumentBuilder) -> None:
        builder.put("$.a", 1)
        assert builder.silent_build() == builder.build()
        assert builder.silent_build_as_map() == {"a": 1}

    def test_silent_build_returns_empty_document(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        builder = DocumentBuilder(_BrokenCodec()).put("$.a", 1)
        with caplog.at_level(logging.WARNING, logger="json_path_builder"):
            node = builder.silent_build()
        assert node == Node.object()
        assert "encoder unavailable" in caplog.text

    def test_silent_build_as_map_returns_empty_dict(self) -> None:
        builder = DocumentBuilder(_BrokenCodec()).put("$.a", 1)
        assert builder.silent_build_as_map() == {}

    def test_silent_defaults_are_fresh(self) -> None:
        builder = DocumentBuilder(_BrokenCodec())
        first = builder.silent_build_as_map()
        first["x"] = 1
        assert builder.silent_build_as_map() == {}

    def test_non_silent_build_raises(self) -> None:
        builder = DocumentBuilder(_BrokenCodec()).put("$.a", 1)
        with pytest.raises(EncodeError):
            builder.build()
        with pytest.raises(BuildError):
            builder.build_as_map()

    def test_conflict_error_type(self, builder: DocumentBuilder) -> None:
        builder.put("$.user", None)
        with pytest.raises(PathConflictError):
            builder.put("$.user.name", "x")
