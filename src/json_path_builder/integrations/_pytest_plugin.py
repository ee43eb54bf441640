"""Fixtures for tests that build JSON documents by path.

Installing json-path-builder registers this module under the ``pytest11``
entry point, so ``json_builder`` and ``assert_json_at`` are available in any
test session without a conftest.py import.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from json_path_builder import DocumentBuilder, Node, builder
from json_path_builder.engine import PathNormalizer
from json_path_builder.tree import TreeBuilder

_MISSING = object()


def read_path(document: Any, path: str) -> Any:
    """Return the value stored at ``path`` in a built document.

    ``document`` may be a Node (as returned by ``build()``) or a plain mapping
    (as returned by ``build_as_map()``). Path segments are object keys; a
    segment made of digits indexes into an array. The array marker is not
    meaningful when reading and must not be used.

    Raises:
        KeyError: The path does not resolve.
    """
    if isinstance(document, Node):
        document = TreeBuilder().to_python(document)

    current = document
    for segment in PathNormalizer().normalize(path):
        if isinstance(current, list) and segment.name.isdigit():
            index = int(segment.name)
            current = current[index] if index < len(current) else _MISSING
        elif isinstance(current, dict):
            current = current.get(segment.name, _MISSING)
        else:
            current = _MISSING
        if current is _MISSING:
            raise KeyError(path)
    return current


@pytest.fixture
def json_builder() -> Callable[..., DocumentBuilder]:
    """Fixture that returns a factory for fresh DocumentBuilders.

    Usage in tests::

        def test_payload(json_builder):
            doc = json_builder().put("$.user.name", "John").build_as_map()
            assert doc == {"user": {"name": "John"}}

    The factory accepts the same ``codec`` and ``config`` arguments as
    ``json_path_builder.builder``.
    """
    return builder


@pytest.fixture(scope="session")
def assert_json_at() -> Any:
    """Fixture that returns a callable path-value asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_name(assert_json_at):
            doc = builder().put("$.user.name", "John").build()
            assert_json_at(doc, "$.user.name", "John")

        def test_missing(assert_json_at):
            with pytest.raises(AssertionError, match=r"not found"):
                assert_json_at({}, "user.name", "John")

    Returns:
        A callable ``_assert(document, path, expected) -> None`` that raises
        ``AssertionError`` when ``path`` is missing or holds another value.
        Values are compared by type as well as equality, so ``1`` does not
        match ``True`` or ``1.0``.
    """

    def _assert(document: Any, path: str, expected: Any) -> None:
        try:
            actual = read_path(document, path)
        except KeyError:
            raise AssertionError(f"path {path!r} not found in {document!r}") from None
        if actual != expected or type(actual) is not type(expected):
            raise AssertionError(
                f"value at {path!r} differs:\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {expected!r}"
            )

    return _assert
