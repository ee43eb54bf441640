"""JsonCodec: the default codec, built on the standard-library ``json`` module.

Parsing and serialization are delegated to ``json``; the conversion between
plain Python values and Node trees goes through ``TreeBuilder``. NaN and
infinities are rejected on encode because they are not valid JSON.
"""

from __future__ import annotations

import json

from json_path_builder.errors import DecodeError, EncodeError
from json_path_builder.tree.builder import JsonValue, TreeBuilder
from json_path_builder.tree.nodes import Node


class JsonCodec:
    """Standard-library JSON codec.

    Satisfies the ``Codec`` Protocol structurally (no inheritance).

    Args:
        indent: Indentation passed to ``json.dumps``. ``None`` (default)
            produces compact single-line output.
        sort_keys: Sort object keys on encode. Defaults to False, which keeps
            insertion order.
        ensure_ascii: Escape non-ASCII characters on encode. Defaults to False.
    """

    def __init__(
        self,
        indent: int | None = None,
        sort_keys: bool = False,
        ensure_ascii: bool = False,
    ) -> None:
        self.indent = indent
        self.sort_keys = sort_keys
        self.ensure_ascii = ensure_ascii
        self._trees = TreeBuilder()

    def decode(self, text: str) -> Node:
        try:
            value = json.loads(text)
        except (json.JSONDecodeError, TypeError) as exc:
            msg = f"invalid JSON text: {exc}"
            raise DecodeError(msg) from exc
        return self._trees.build(value)

    def encode(self, node: Node) -> str:
        try:
            return json.dumps(
                self._trees.to_python(node),
                indent=self.indent,
                sort_keys=self.sort_keys,
                ensure_ascii=self.ensure_ascii,
                allow_nan=False,
            )
        except (TypeError, ValueError) as exc:
            msg = f"document cannot be encoded as JSON: {exc}"
            raise EncodeError(msg) from exc

    def to_mapping(self, node: Node) -> JsonValue:
        return self._trees.to_python(node)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(indent={self.indent!r}, "
            f"sort_keys={self.sort_keys!r}, ensure_ascii={self.ensure_ascii!r})"
        )


# Process-wide default codec, shared by every builder created without one.
DEFAULT_CODEC = JsonCodec()
