"""Node dataclass and NodeType StrEnum for the mutable JSON document tree.

A document is a tree of tagged nodes. Containers own their children directly
(no parent pointers, no arena) since the structure is strictly hierarchical.
"""

from __future__ import annotations

from collections.abc import Iterator
from copy import deepcopy
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any


class NodeType(StrEnum):
    """Enumeration of the four JSON node kinds.

    StrEnum values are the lowercased member names (Python 3.11+):
    - OBJECT -> "object" : JSON object {}
    - ARRAY  -> "array"  : JSON array []
    - SCALAR -> "scalar" : string, number or boolean literal
    - NULL   -> "null"   : JSON null
    """

    OBJECT = auto()
    ARRAY = auto()
    SCALAR = auto()
    NULL = auto()


@dataclass(slots=True)
class Node:
    """A node in the JSON document tree.

    Attributes:
        node_type: Which kind of node this is (see NodeType).
        value:     The literal for SCALAR nodes; None for every other kind.
        members:   Key -> child mapping for OBJECT nodes, in insertion order.
                   Empty for every other kind.
        items:     Ordered children of ARRAY nodes. Empty for every other kind.

    Use the ``object``, ``array``, ``scalar`` and ``null`` constructors rather
    than building nodes field by field.
    """

    node_type: NodeType
    value: Any = None
    members: dict[str, Node] = field(default_factory=dict)
    items: list[Node] = field(default_factory=list)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def object(cls, members: dict[str, Node] | None = None) -> Node:
        return cls(NodeType.OBJECT, members=dict(members or {}))

    @classmethod
    def array(cls, items: list[Node] | None = None) -> Node:
        return cls(NodeType.ARRAY, items=list(items or []))

    @classmethod
    def scalar(cls, value: str | int | float | bool) -> Node:
        return cls(NodeType.SCALAR, value=value)

    @classmethod
    def null(cls) -> Node:
        return cls(NodeType.NULL)

    # ------------------------------------------------------------------
    # Kind checks
    # ------------------------------------------------------------------

    @property
    def is_object(self) -> bool:
        return self.node_type is NodeType.OBJECT

    @property
    def is_array(self) -> bool:
        return self.node_type is NodeType.ARRAY

    @property
    def is_container(self) -> bool:
        return self.node_type in (NodeType.OBJECT, NodeType.ARRAY)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def get(self, key: str, default: Node | None = None) -> Node | None:
        """Return the member named ``key`` of an OBJECT node, or ``default``."""
        if not self.is_object:
            return default
        return self.members.get(key, default)

    def is_empty(self) -> bool:
        """True for an OBJECT or ARRAY without children; False for leaves."""
        if self.is_object:
            return not self.members
        if self.is_array:
            return not self.items
        return False

    def copy(self) -> Node:
        """Return an independent deep copy of this subtree."""
        return deepcopy(self)

    def __getitem__(self, key: str | int) -> Node:
        if self.is_object and isinstance(key, str):
            return self.members[key]
        if self.is_array and isinstance(key, int):
            return self.items[key]
        msg = f"{self.node_type} node cannot be indexed by {key!r}"
        raise TypeError(msg)

    def __contains__(self, key: Any) -> bool:
        return self.is_object and key in self.members

    def __len__(self) -> int:
        if self.is_object:
            return len(self.members)
        if self.is_array:
            return len(self.items)
        return 0

    def __iter__(self) -> Iterator[Any]:
        # Objects iterate their keys, arrays their children, like dict/list.
        if self.is_object:
            return iter(self.members)
        return iter(self.items)
