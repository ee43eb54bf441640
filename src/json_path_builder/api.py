"""Public factory functions for json-path-builder.

``builder`` creates a fresh ``DocumentBuilder`` per call, so no state is ever
shared between documents; ``build_empty`` needs no builder at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from json_path_builder.document import DocumentBuilder
from json_path_builder.engine.config import BuilderConfig
from json_path_builder.tree.nodes import Node

if TYPE_CHECKING:
    from json_path_builder.protocols import Codec

__all__ = ["build_empty", "builder"]


def builder(
    codec: Codec | None = None,
    config: BuilderConfig | None = None,
) -> DocumentBuilder:
    """Return a new, empty DocumentBuilder.

    Args:
        codec:  Codec used for embedded JSON values and materialization.
                Defaults to the process-wide ``JsonCodec`` when None.
        config: Path syntax and classification settings. Defaults to
                ``BuilderConfig()`` when None.

    Returns:
        A ``DocumentBuilder`` owning a fresh empty document.
    """
    return DocumentBuilder(codec=codec, config=config)


def build_empty() -> Node:
    """Return a fresh empty document (an OBJECT node with no members)."""
    return DocumentBuilder.build_empty()
