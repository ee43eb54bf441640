"""TreeBuilder: converts Python JSON values to Node trees and back.

Uses recursive dispatch to convert dicts, lists and scalar values into
OBJECT, ARRAY, SCALAR and NULL nodes. ``to_python`` is the inverse and
produces plain dicts, lists and scalars with no Node types left in them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from json_path_builder.tree.nodes import Node, NodeType

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into a Node tree.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Mappings of any kind are accepted (not only dict) and tuples are treated
    as arrays. Object keys must be strings.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"user": {"name": "John"}})
        # tree: OBJECT -> "user": OBJECT -> "name": SCALAR("John")
        builder.to_python(tree) == {"user": {"name": "John"}}
    """

    def build(self, value: Any) -> Node:
        """Convert a JSON value to a Node tree.

        Args:
            value: Any valid JSON value (mapping, list, tuple, str, int,
                   float, bool, None) or an existing Node, which is copied.

        Returns:
            A Node tree rooted at the appropriate node type.

        Raises:
            TypeError: If value (or anything nested in it) is not a valid
                JSON type, or an object key is not a string.
        """
        if isinstance(value, Node):
            return value.copy()

        # CRITICAL: bool MUST be checked before int, bool subclasses int in Python
        if isinstance(value, bool):
            return Node.scalar(value)

        if isinstance(value, Mapping):
            return self._build_object(value)

        if isinstance(value, (list, tuple)):
            return Node.array([self.build(item) for item in value])

        if isinstance(value, (str, int, float)):
            return Node.scalar(value)

        if value is None:
            return Node.null()

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _build_object(self, obj: Mapping[Any, Any]) -> Node:
        members: dict[str, Node] = {}
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"Object keys must be str, got {type(key)!r}")
            members[key] = self.build(val)
        return Node.object(members)

    def to_python(self, node: Node) -> JsonValue:
        """Convert a Node tree into plain dicts, lists and scalars.

        Args:
            node: Root of the subtree to convert.

        Returns:
            The equivalent Python JSON value. OBJECT nodes become dicts that
            keep member order; ARRAY nodes become lists.
        """
        if node.node_type is NodeType.OBJECT:
            return {key: self.to_python(child) for key, child in node.members.items()}
        if node.node_type is NodeType.ARRAY:
            return [self.to_python(child) for child in node.items]
        if node.node_type is NodeType.SCALAR:
            return node.value
        return None
