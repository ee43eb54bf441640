"""BuilderConfig: path syntax and classification settings.

BuilderConfig is a frozen (immutable) dataclass holding the markers that
define the path grammar and the embedded-JSON heuristic, plus the size of
the parsed-path cache.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BuilderConfig:
    """Immutable configuration for path parsing and value classification.

    Attributes:
        root_marker: Prefix stripped from every path before splitting.
            ``"user.name"`` and ``"$.user.name"`` address the same location.
        separator: Child separator between path segments.
        array_marker: Token suffix marking an array-append segment.
        json_marker: Substring that flags a string value as embedded JSON
            text. The check is plain containment on the stripped string, so
            a literal that happens to contain it is decoded too.
        path_cache_size: Number of parsed paths kept per normalizer (LRU).
            ``0`` disables caching.
    """

    root_marker: str = "$."
    separator: str = "."
    array_marker: str = "[*]"
    json_marker: str = "{"
    path_cache_size: int = 256

    def __post_init__(self) -> None:
        for name in ("root_marker", "separator", "array_marker", "json_marker"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value:
                msg = f"{name} must be a non-empty string, got {value!r}"
                raise ValueError(msg)
        if self.separator in self.array_marker:
            msg = (
                f"separator {self.separator!r} must not occur in "
                f"array_marker {self.array_marker!r}"
            )
            raise ValueError(msg)
        if self.path_cache_size < 0:
            msg = f"path_cache_size must be >= 0, got {self.path_cache_size}"
            raise ValueError(msg)

    @property
    def root(self) -> str:
        """The bare root token: ``root_marker`` without its trailing separator."""
        return self.root_marker.removesuffix(self.separator)


DEFAULT_CONFIG = BuilderConfig()
