"""DocumentBuilder: the stateful facade that owns a document and mutates it by path.

Wires ``PathNormalizer``, ``ValueClassifier`` and ``TreeMutator`` together
behind a fluent ``put``/``delete`` interface, and materializes the document
through a ``Codec``.

Architecture:
- put() parses the path, classifies the value (decoding embedded JSON text
  through the codec) and hands both to the mutator. The root OBJECT node is
  created once per builder and only ever mutated in place.
- build() encodes the document to text and decodes it back, so every call
  returns a fresh tree that shares nothing with the builder's document.
- The silent_* methods are thin adapters over the raising ones: they catch
  ``BuildError``, log it with its traceback and return a fixed default.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from json_path_builder.codecs.stdlib import DEFAULT_CODEC
from json_path_builder.engine.classifier import ValueClassifier
from json_path_builder.engine.config import DEFAULT_CONFIG, BuilderConfig
from json_path_builder.engine.mutator import TreeMutator
from json_path_builder.engine.paths import PathNormalizer
from json_path_builder.errors import BuildError, PathResolutionError
from json_path_builder.tree.nodes import Node

if TYPE_CHECKING:
    from json_path_builder.protocols import Codec

__all__ = ["DocumentBuilder"]

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class DocumentBuilder:
    """Builds one JSON document from path-addressed mutations.

    Every mutating method returns the builder itself so calls can be chained.
    A builder owns its document exclusively; it is not safe to share one
    between concurrent writers.

    Example::

        from json_path_builder import builder

        doc = (
            builder()
            .put("$.user.firstName", "John")
            .put("$.user.friends[*]", "Marco")
            .put("$.user.friends[*]", "Polo")
            .build_as_map()
        )
        # {"user": {"firstName": "John", "friends": ["Marco", "Polo"]}}
    """

    def __init__(
        self,
        codec: Codec | None = None,
        config: BuilderConfig | None = None,
    ) -> None:
        """Initialise an empty builder.

        Args:
            codec:  A Codec-conformant object used for embedded JSON values
                and materialization. Defaults to the process-wide
                ``JsonCodec`` when None.
            config: Path syntax and classification settings. Defaults to
                ``BuilderConfig()``.
        """
        self._codec: Any = codec if codec is not None else DEFAULT_CODEC
        config = config if config is not None else DEFAULT_CONFIG
        self._paths = PathNormalizer(config)
        self._classifier = ValueClassifier(self._codec, config)
        self._mutator = TreeMutator()
        self._document = Node.object()

    @property
    def codec(self) -> Codec:
        return self._codec

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def put(self, path: str, value: Any) -> DocumentBuilder:
        """Store ``value`` at ``path``.

        A callable ``value`` is treated as a supplier: it is called exactly
        once and its result is stored.

        Args:
            path:  Path expression such as ``"$.user.name"``. The ``"$."``
                root marker is optional. A segment ending in ``[*]`` appends
                to an array instead of overwriting.
            value: None, a mapping or Node (stored as a nested object), a
                string containing ``"{"`` (decoded as JSON text), or any
                other JSON-compatible value.

        Returns:
            This builder.

        Raises:
            DecodeError: ``value`` looks like JSON text but does not parse.
            EncodeError: ``value`` has no JSON representation.
            PathConflictError: An existing scalar or null blocks the path.
        """
        if callable(value):
            value = value()
        segments = self._paths.normalize(path)
        leaf = self._classifier.classify(value)
        self._mutator.put(self._document, segments, leaf, path)
        logger.debug("put %r (%s)", path, leaf.kind)
        return self

    def silent_put(self, path: str, value: Any) -> DocumentBuilder:
        """Same as ``put`` but logs and swallows ``BuildError``."""
        return self._silently(lambda: self.put(path, value), self)

    def delete(self, path: str) -> DocumentBuilder:
        """Remove the value at ``path``. Missing paths are ignored.

        A last segment ending in ``[*]`` empties the array at that key
        instead of removing the key.
        """
        segments = self._paths.normalize(path)
        try:
            self._mutator.delete(self._document, segments, path)
        except PathResolutionError:
            logger.debug("delete %r: path not found, ignored", path)
        else:
            logger.debug("delete %r", path)
        return self

    # ------------------------------------------------------------------
    # Materialization
    # ------------------------------------------------------------------

    def to_json(self) -> str:
        """Return the document encoded as JSON text by the codec.

        Raises:
            EncodeError: The codec cannot encode the document.
        """
        return self._codec.encode(self._document)

    def build(self) -> Node:
        """Materialize the document as a fresh Node tree.

        The document is encoded to text and decoded back through the codec;
        the result shares no nodes with the builder, and the builder's state
        is unchanged.

        Raises:
            BuildError: The codec failed to encode or decode the document.
        """
        return self._codec.decode(self.to_json())

    def build_as_map(self) -> Any:
        """Materialize the document as plain dicts, lists and scalars.

        Raises:
            BuildError: The codec failed to encode or decode the document.
        """
        return self._codec.to_mapping(self.build())

    def silent_build(self) -> Node:
        """Same as ``build`` but returns an empty document on ``BuildError``."""
        return self._silently(self.build, Node.object())

    def silent_build_as_map(self) -> Any:
        """Same as ``build_as_map`` but returns ``{}`` on ``BuildError``."""
        return self._silently(self.build_as_map, {})

    @staticmethod
    def build_empty() -> Node:
        """Return a fresh, empty document independent of any builder."""
        return Node.object()

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _silently(operation: Callable[[], _T], default: _T) -> _T:
        try:
            return operation()
        except BuildError:
            logger.warning("json document build failed, using default", exc_info=True)
            return default

    def __repr__(self) -> str:
        keys = len(self._document)
        return f"{type(self).__name__}(codec={self._codec!r}, keys={keys})"
