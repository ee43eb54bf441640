"""engine subpackage: path parsing, value classification and tree mutation.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from json_path_builder.codecs import JsonCodec
    from json_path_builder.engine import PathNormalizer, TreeMutator, ValueClassifier
    from json_path_builder.tree import Node

    doc = Node.object()
    segments = PathNormalizer().normalize("$.user.friends[*]")
    leaf = ValueClassifier(JsonCodec()).classify("Marco")
    TreeMutator().put(doc, segments, leaf)
    # doc: {"user": {"friends": ["Marco"]}}
"""

from __future__ import annotations

from json_path_builder.engine.classifier import LeafValue, ValueClassifier, ValueKind
from json_path_builder.engine.config import BuilderConfig
from json_path_builder.engine.mutator import TreeMutator
from json_path_builder.engine.paths import PathNormalizer, Segment

__all__ = [
    "BuilderConfig",
    "LeafValue",
    "PathNormalizer",
    "Segment",
    "TreeMutator",
    "ValueClassifier",
    "ValueKind",
]
