"""JSON round-trip helpers built on orjson.

``serialize`` turns plain data, dataclasses and pydantic models into compact
JSON text. ``deserialize`` parses that text and binds the fields to a
class, so the class's methods work on the parsed data.

Contents:
    * :func:`serialize` - value to JSON text.
    * :func:`deserialize` - JSON text to an instance of ``cls``.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, TypeVar, cast

import orjson
from pydantic import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default(value: object) -> Any:
    """Fallback hook for types orjson does not serialize natively."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    raise TypeError(f"Type is not JSON serializable: {type(value).__name__}")


def serialize(value: object) -> str:
    """Return the compact JSON representation of ``value``.

    Args:
        value: JSON-compatible data, a dataclass instance, or a pydantic model.

    Returns:
        JSON text without insignificant whitespace.

    Raises:
        TypeError: If ``value`` contains something JSON cannot represent.

    Examples:
        >>> serialize([1, 2, 3])
        '[1,2,3]'
        >>> from cssel.domain.shapes import Rectangle
        >>> serialize(Rectangle(10, 20))
        '{"width":10,"height":20}'
    """
    return orjson.dumps(value, default=_default).decode("utf-8")


def deserialize(cls: type[T], text: str | bytes) -> T:
    """Parse JSON ``text`` and bind its fields to an instance of ``cls``.

    Pydantic models are validated with ``model_validate``. Dataclasses are
    constructed with the parsed fields as keyword arguments. Any other class
    gets an instance created without running ``__init__``, with each field
    assigned as an attribute.

    Args:
        cls: Class whose behaviour the result should expose.
        text: JSON object text.

    Returns:
        Instance of ``cls`` carrying the parsed fields.

    Raises:
        orjson.JSONDecodeError: If ``text`` is not valid JSON.
        TypeError: If the payload is not a JSON object, the fields do not
            fit a dataclass constructor, or a plain class cannot hold a field
            (``__slots__`` without a matching slot).
        pydantic.ValidationError: If an object payload fails model validation.

    Examples:
        >>> from cssel.domain.shapes import Rectangle
        >>> r = deserialize(Rectangle, '{"width":10, "height":20}')
        >>> r.get_area()
        200
    """
    data: object = orjson.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Cannot bind a JSON {type(data).__name__} to {cls.__name__}; expected an object")
    fields = cast("dict[str, Any]", data)
    logger.debug("Deserializing %d field(s) into %s", len(fields), cls.__name__)
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return cast("T", cls.model_validate(fields))
    if dataclasses.is_dataclass(cls):
        return cls(**fields)
    instance = cls.__new__(cls)
    for name, value in fields.items():
        try:
            setattr(instance, name, value)
        except AttributeError as exc:
            raise TypeError(f"{cls.__name__} cannot hold field {name!r}") from exc
    return instance


__all__ = ["deserialize", "serialize"]
