"""TreeMutator: applies put and delete operations to a document tree.

The walk keeps a *frontier*: the list of OBJECT nodes the next segment is
resolved against. It starts as ``[root]``. Resolving a segment under each
frontier object yields the next frontier:

- a missing key is created as an ARRAY when the segment carries the array
  marker, otherwise as an OBJECT;
- an existing OBJECT is descended into as is, whatever the segment's marker
  says (existing containers are never coerced to another kind);
- an ARRAY reached through a ``[*]`` segment fans out to its OBJECT
  elements;
- anything else blocks the walk: a SCALAR or NULL, an ARRAY reached through
  a plain segment, or an ARRAY with no OBJECT elements (including one the
  walk has just created). ``put`` raises PathConflictError for a blocked
  walk, ``delete`` treats the branch as unresolved.

Containers created before a conflict is detected stay in the document.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from json_path_builder.engine.classifier import LeafValue
from json_path_builder.engine.paths import Segment
from json_path_builder.errors import PathConflictError, PathResolutionError
from json_path_builder.tree.nodes import Node

logger = logging.getLogger(__name__)


class TreeMutator:
    """Stateless put/delete operations over a document tree.

    All methods mutate the given root in place and never replace it.
    """

    def put(
        self,
        doc: Node,
        segments: Sequence[Segment],
        leaf: LeafValue,
        path: str = "",
    ) -> int:
        """Write ``leaf`` at the location addressed by ``segments``.

        Without the array marker on the last segment the key is set,
        overwriting any previous value (last write wins). With it, an ARRAY
        is ensured at the key and one element is appended.

        Args:
            doc:      Document root (an OBJECT node).
            segments: Parsed path, at least one segment.
            leaf:     Classified value to store.
            path:     Original path expression, used in error messages.

        Returns:
            The number of locations written: 1 for plain paths, the number of
            fanned-out array elements for paths crossing an array through a
            ``[*]`` segment. Never 0.

        Raises:
            PathConflictError: A SCALAR or NULL node sits where a container
                is needed, a plain segment meets an ARRAY, a ``[*]`` segment
                meets an ARRAY with no OBJECT elements, or the append target
                exists and is not an ARRAY.
        """
        *parents, last = segments
        frontier = [doc]
        for segment in parents:
            frontier = list(self._descend(frontier, segment, path, create=True))

        for written, parent in enumerate(frontier):
            node = leaf.node if written == 0 else leaf.node.copy()
            if last.appends_to_array:
                self._ensure_array(parent, last, path).items.append(node)
            else:
                parent.members[last.name] = node

        logger.debug("put %r wrote %d location(s)", path, len(frontier))
        return len(frontier)

    def delete(self, doc: Node, segments: Sequence[Segment], path: str = "") -> int:
        """Remove the node addressed by ``segments``.

        The key is removed from every resolved parent object. When the last
        segment carries the array marker the addressed ARRAY is emptied
        instead, keeping its key.

        Returns:
            The number of locations removed (always at least 1).

        Raises:
            PathResolutionError: Nothing resolves: an intermediate segment or
                the leaf is absent.
        """
        *parents, last = segments
        frontier = [doc]
        for segment in parents:
            frontier = list(self._descend(frontier, segment, path, create=False))

        removed = 0
        for parent in frontier:
            child = parent.members.get(last.name)
            if child is None:
                continue
            if last.appends_to_array:
                if not child.is_array:
                    continue
                child.items.clear()
            else:
                del parent.members[last.name]
            removed += 1

        if not removed:
            raise PathResolutionError(path)
        return removed

    def _descend(
        self,
        frontier: list[Node],
        segment: Segment,
        path: str,
        *,
        create: bool,
    ) -> Iterator[Node]:
        for parent in frontier:
            child = parent.members.get(segment.name)
            if child is None:
                if not create:
                    continue
                child = Node.array() if segment.appends_to_array else Node.object()
                parent.members[segment.name] = child

            if child.is_object:
                yield child
            elif child.is_array and segment.appends_to_array:
                elements = [item for item in child.items if item.is_object]
                if create and not elements:
                    raise PathConflictError(
                        path, segment.name, child.node_type, "object elements"
                    )
                yield from elements
            elif create:
                expected = "an object" if child.is_container else "a container"
                raise PathConflictError(path, segment.name, child.node_type, expected)

    @staticmethod
    def _ensure_array(parent: Node, segment: Segment, path: str) -> Node:
        target = parent.members.get(segment.name)
        if target is None:
            target = Node.array()
            parent.members[segment.name] = target
        elif not target.is_array:
            raise PathConflictError(path, segment.name, target.node_type, "an array")
        return target
