"""Serialization adapter - JSON text round-trips via orjson.

Contents:
    * :func:`.json_codec.serialize` - value to compact JSON text
    * :func:`.json_codec.deserialize` - JSON text to an instance of a given class
"""

from __future__ import annotations

from .json_codec import deserialize, serialize

__all__ = ["deserialize", "serialize"]
