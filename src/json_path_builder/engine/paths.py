"""PathNormalizer: parses dotted path expressions into ordered segments.

Grammar::

    path    = [root_marker] segment (separator segment)*
    segment = name [array_marker]

With the default BuilderConfig that is ``["$."] name ["[*]"] ("." name ["[*]"])*``.
The root marker is optional; ``"user.name"`` and ``"$.user.name"`` produce
identical segments. Malformed paths (``"a..b"``, ``"a."``) never raise: the
empty tokens become segments with an empty name.
"""

from __future__ import annotations

from dataclasses import dataclass

from cachetools import LRUCache

from json_path_builder.engine.config import DEFAULT_CONFIG, BuilderConfig


@dataclass(frozen=True, slots=True)
class Segment:
    """One separator-delimited component of a path.

    Attributes:
        name:             Key addressed by this segment, array marker removed.
        appends_to_array: True when the raw token carried the array marker.
    """

    name: str
    appends_to_array: bool = False


class PathNormalizer:
    """Parses path strings into tuples of Segments.

    Each instance keeps its own ``LRUCache`` of parsed paths: builders tend
    to write the same handful of paths over and over (every ``[*]`` append
    reparses the same string). Results are immutable tuples of frozen
    Segments, so handing out the cached object is safe.

    Example usage:
        normalizer = PathNormalizer()
        normalizer.normalize("$.user.friends[*]")
        # (Segment("user"), Segment("friends", appends_to_array=True))
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self._config = config if config is not None else DEFAULT_CONFIG
        self._cache: LRUCache[str, tuple[Segment, ...]] | None = (
            LRUCache(maxsize=self._config.path_cache_size)
            if self._config.path_cache_size > 0
            else None
        )

    @property
    def config(self) -> BuilderConfig:
        return self._config

    def canonical(self, raw: str) -> str:
        """Return ``raw`` with the root marker removed."""
        if raw == self._config.root:
            return ""
        return raw.removeprefix(self._config.root_marker)

    def normalize(self, raw: str) -> tuple[Segment, ...]:
        """Parse a path expression into its ordered segments.

        Args:
            raw: Path such as ``"$.user.friends[*]"`` or ``"user.name"``.

        Returns:
            Tuple of Segments in the order written.

        Raises:
            TypeError:  If ``raw`` is not a string.
            ValueError: If the path addresses the root itself (empty path or
                the bare root marker); there is no key to write.
        """
        if not isinstance(raw, str):
            msg = f"path must be a string, got {type(raw)!r}"
            raise TypeError(msg)

        if self._cache is not None:
            cached = self._cache.get(raw)
            if cached is not None:
                return cached

        path = self.canonical(raw)
        if not path:
            msg = f"path {raw!r} does not address a key below the document root"
            raise ValueError(msg)

        tokens = path.split(self._config.separator)
        segments = tuple(self._segment(token) for token in tokens)
        if self._cache is not None:
            self._cache[raw] = segments
        return segments

    def _segment(self, token: str) -> Segment:
        marker = self._config.array_marker
        if marker in token:
            return Segment(token.replace(marker, ""), appends_to_array=True)
        return Segment(token)

    @property
    def cache_size(self) -> int:
        """Number of parsed paths currently cached."""
        return 0 if self._cache is None else int(self._cache.currsize)
