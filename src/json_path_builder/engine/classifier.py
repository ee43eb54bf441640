"""ValueClassifier: decides how a value handed to ``put`` is stored.

Every leaf value is classified into one of four kinds and turned into the
Node subtree the mutator writes:

- NULL:          ``None``, stored as an explicit NULL node (never omitted).
- NESTED:        a mapping or Node (typically a previously built document),
                 re-encoded as an OBJECT subtree so later paths can reach in.
- EMBEDDED_JSON: a string whose stripped content contains the JSON marker
                 (``"{"`` by default); decoded by the codec.
- LITERAL:       anything else, stored as given (lists become ARRAY nodes).

The embedded-JSON check is a plain substring test. A literal string such as
``"a {b}"`` is indistinguishable from intended JSON text and will fail to
decode; pass such strings wrapped as a JSON string (or split them) instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import TYPE_CHECKING, Any

from json_path_builder.engine.config import DEFAULT_CONFIG, BuilderConfig
from json_path_builder.errors import EncodeError
from json_path_builder.tree.builder import TreeBuilder
from json_path_builder.tree.nodes import Node

if TYPE_CHECKING:
    from json_path_builder.protocols import Codec


class ValueKind(StrEnum):
    """How a leaf value must be stored."""

    NULL = auto()
    EMBEDDED_JSON = auto()
    NESTED = auto()
    LITERAL = auto()


@dataclass(frozen=True, slots=True)
class LeafValue:
    """A classified leaf value.

    Attributes:
        kind: The classification decision.
        node: Subtree ready to be written into the document. The mutator
              copies it when writing to more than one location.
    """

    kind: ValueKind
    node: Node


class ValueClassifier:
    """Classifies leaf values and builds their Node subtrees.

    Args:
        codec:  Codec used to decode embedded JSON text.
        config: Supplies the embedded-JSON marker. Defaults to
                ``BuilderConfig()``.
    """

    def __init__(self, codec: Codec, config: BuilderConfig | None = None) -> None:
        self._codec = codec
        self._config = config if config is not None else DEFAULT_CONFIG
        self._trees = TreeBuilder()

    def kind_of(self, value: Any) -> ValueKind:
        """Return the classification of ``value`` without building anything."""
        if value is None:
            return ValueKind.NULL
        if isinstance(value, (Mapping, Node)):
            return ValueKind.NESTED
        if isinstance(value, str) and self._config.json_marker in value.strip():
            return ValueKind.EMBEDDED_JSON
        return ValueKind.LITERAL

    def classify(self, value: Any) -> LeafValue:
        """Classify ``value`` and build the subtree to store.

        Raises:
            DecodeError: Embedded JSON text is malformed (raised by the codec).
            EncodeError: The value, or something nested in it, has no JSON
                representation.
        """
        kind = self.kind_of(value)
        if kind is ValueKind.NULL:
            return LeafValue(kind, Node.null())
        if kind is ValueKind.EMBEDDED_JSON:
            return LeafValue(kind, self._codec.decode(value.strip()))
        try:
            node = self._trees.build(value)
        except TypeError as exc:
            msg = f"value of type {type(value).__name__} cannot be stored: {exc}"
            raise EncodeError(msg) from exc
        return LeafValue(kind, node)
