"""Geometric value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-aligned rectangle with a width and a height.

    Example:
        >>> r = Rectangle(10, 20)
        >>> r.width, r.height
        (10, 20)
        >>> r.get_area()
        200
    """

    width: float
    height: float

    def get_area(self) -> float:
        return self.width * self.height


__all__ = ["Rectangle"]
