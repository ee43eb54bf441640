"""Exception hierarchy for json-path-builder.

``BuildError`` is the single failure kind that ``put`` and ``build`` surface to
callers; the ``silent_*`` builder methods catch exactly this family.
``PathResolutionError`` is not part of it: a delete that misses is
absorbed by the builder, never reported as a build failure.
"""

from __future__ import annotations

__all__ = [
    "BuildError",
    "DecodeError",
    "EncodeError",
    "PathConflictError",
    "PathResolutionError",
]


class BuildError(Exception):
    """A put or build could not be completed."""


class DecodeError(BuildError):
    """JSON text (an embedded value or the document itself) could not be parsed."""


class EncodeError(BuildError):
    """A value or the document could not be encoded as JSON."""


class PathConflictError(BuildError):
    """An existing node of the wrong kind blocks the walk.

    Attributes:
        path:    The path expression being written.
        segment: Name of the segment whose existing node has the wrong kind.
    """

    def __init__(self, path: str, segment: str, found: str, expected: str) -> None:
        self.path = path
        self.segment = segment
        super().__init__(
            f"cannot write {path!r}: found {found} at {segment!r}, "
            f"expected {expected}"
        )


class PathResolutionError(LookupError):
    """A path does not resolve to any existing node.

    Attributes:
        path: The path expression that failed to resolve.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"path {path!r} does not resolve to an existing node")
