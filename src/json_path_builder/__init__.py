"""json-path-builder - build JSON documents from path-addressed mutations."""

from __future__ import annotations

from json_path_builder.api import build_empty, builder
from json_path_builder.codecs import JsonCodec
from json_path_builder.document import DocumentBuilder
from json_path_builder.engine import BuilderConfig, Segment
from json_path_builder.errors import (
    BuildError,
    DecodeError,
    EncodeError,
    PathConflictError,
    PathResolutionError,
)
from json_path_builder.protocols import Codec
from json_path_builder.tree import Node, NodeType

__version__: str = "0.1.0"
__all__: list[str] = [
    "BuildError",
    "BuilderConfig",
    "Codec",
    "DecodeError",
    "DocumentBuilder",
    "EncodeError",
    "JsonCodec",
    "Node",
    "NodeType",
    "PathConflictError",
    "PathResolutionError",
    "Segment",
    "build_empty",
    "builder",
]
