"""Codec Protocol: the text <-> tree extension point of json-path-builder.

A codec turns JSON text into a Node tree, a Node tree into JSON text, and a
Node tree into plain Python containers. The mutation engine never looks at
text; only the builder's materialization and the embedded-JSON leaf values
go through the codec.

Users can plug in custom codecs without inheriting from any base class; any
class with conformant methods passes ``isinstance`` checks.

Example::

    from json_path_builder.protocols import Codec
    from json_path_builder.tree.builder import TreeBuilder

    class MyCodec:
        def decode(self, text: str) -> Node: ...
        def encode(self, node: Node) -> str: ...
        def to_mapping(self, node: Node) -> Any:
            return TreeBuilder().to_python(node)

    assert isinstance(MyCodec(), Codec)  # True, structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_path_builder.tree.nodes import Node


@runtime_checkable
class Codec(Protocol):
    """Structural protocol for JSON codecs.

    The methods must:
    - ``decode``: parse JSON text into a Node tree, raising
      ``json_path_builder.errors.DecodeError`` on malformed input.
    - ``encode``: serialize a Node tree to JSON text, raising
      ``json_path_builder.errors.EncodeError`` when that is impossible.
    - ``to_mapping``: convert a Node tree into dicts, lists and scalars.

    Codecs are expected to be pure and reentrant: no shared mutable state
    beyond their own configuration.
    """

    def decode(self, text: str) -> Node: ...

    def encode(self, node: Node) -> str: ...

    def to_mapping(self, node: Node) -> Any: ...
