"""OrjsonCodec: JSON codec backed by the orjson library.

Wraps ``orjson.loads``/``orjson.dumps`` with a lazy import so that the base
install (no orjson installed) never triggers an ``ImportError`` at module
level. The ``orjson`` package is only required when ``OrjsonCodec`` is
*instantiated*.

Install the optional dependency with::

    pip install json-path-builder[orjson]

Example::

    from json_path_builder import builder
    from json_path_builder.codecs.orjson import OrjsonCodec

    doc = builder(OrjsonCodec()).put("$.user.name", "John").build()
"""

from __future__ import annotations

import math
from typing import Any

from json_path_builder.errors import DecodeError, EncodeError
from json_path_builder.tree.builder import JsonValue, TreeBuilder
from json_path_builder.tree.nodes import Node


class OrjsonCodec:
    """JSON codec wrapping ``orjson``.

    Performs a lazy import of ``orjson`` inside ``__init__``, so importing
    this module on a base install does not raise ``ImportError``. The error
    is deferred until the class is *instantiated*.

    orjson serializes NaN and infinities as ``null``. This codec raises
    ``EncodeError`` for them instead, the same as ``JsonCodec``.

    Args:
        indent: Pretty-print with two-space indentation when True.
        sort_keys: Sort object keys on encode. Defaults to False.

    Raises:
        ImportError: If ``orjson`` is not installed. The message includes the
            install command.
    """

    def __init__(self, indent: bool = False, sort_keys: bool = False) -> None:
        try:
            import orjson
        except ImportError as exc:
            raise ImportError(
                "orjson is required for OrjsonCodec. "
                "Install it with: pip install json-path-builder[orjson]"
            ) from exc

        self._orjson: Any = orjson
        self._option = 0
        if indent:
            self._option |= orjson.OPT_INDENT_2
        if sort_keys:
            self._option |= orjson.OPT_SORT_KEYS
        self._trees = TreeBuilder()

    def decode(self, text: str) -> Node:
        try:
            value = self._orjson.loads(text)
        except (self._orjson.JSONDecodeError, TypeError) as exc:
            msg = f"invalid JSON text: {exc}"
            raise DecodeError(msg) from exc
        return self._trees.build(value)

    def encode(self, node: Node) -> str:
        value = self._trees.to_python(node)
        _reject_non_finite(value)
        try:
            return str(self._orjson.dumps(value, option=self._option), "utf-8")
        except self._orjson.JSONEncodeError as exc:
            msg = f"document cannot be encoded as JSON: {exc}"
            raise EncodeError(msg) from exc

    def to_mapping(self, node: Node) -> JsonValue:
        return self._trees.to_python(node)


def _reject_non_finite(value: Any) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        msg = f"document cannot be encoded as JSON: {value!r} is not a finite number"
        raise EncodeError(msg)
    if isinstance(value, dict):
        for child in value.values():
            _reject_non_finite(child)
    elif isinstance(value, list):
        for child in value:
            _reject_non_finite(child)
