"""Codecs subpackage for json-path-builder.

The base install provides ``JsonCodec``, built on the standard-library
``json`` module. The orjson codec needs an extra:

    pip install json-path-builder[orjson]   # orjson-backed codec

``OrjsonCodec`` is always importable; it imports orjson lazily and raises
``ImportError`` on instantiation when the extra is missing.

All codecs satisfy the ``Codec`` Protocol structurally.
"""

from json_path_builder.codecs.orjson import OrjsonCodec
from json_path_builder.codecs.stdlib import DEFAULT_CODEC, JsonCodec

__all__ = ["DEFAULT_CODEC", "JsonCodec", "OrjsonCodec"]
