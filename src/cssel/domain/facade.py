"""Stateless entry points that start a new selector builder per call."""

from __future__ import annotations

from .enums import Combinator
from .selector import SelectorBuilder


class CssSelectorBuilder:
    """Facade handing out fresh :class:`SelectorBuilder` instances.

    Holds no state between calls beyond the ``strict`` flag passed on to
    every builder it creates, so two calls never share a builder.

    Example:
        >>> builder = CssSelectorBuilder()
        >>> builder.combine(
        ...     builder.element("div").id("main").class_("container").class_("draggable"),
        ...     "+",
        ...     builder.combine(
        ...         builder.element("table").id("data"),
        ...         "~",
        ...         builder.combine(
        ...             builder.element("tr").pseudo_class("nth-of-type(even)"),
        ...             " ",
        ...             builder.element("td").pseudo_class("nth-of-type(even)"),
        ...         ),
        ...     ),
        ... ).stringify()
        'div#main.container.draggable + table#data ~ tr:nth-of-type(even)   td:nth-of-type(even)'
    """

    __slots__ = ("strict",)

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(strict=self.strict)

    def element(self, value: str) -> SelectorBuilder:
        return self._new().element(value)

    def id(self, value: str) -> SelectorBuilder:
        return self._new().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._new().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._new().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    def combine(self, left: SelectorBuilder, operator: Combinator | str, right: SelectorBuilder) -> SelectorBuilder:
        return self._new().combine(left, operator, right)


css_selector_builder = CssSelectorBuilder()
"""Shared lenient facade; safe to reuse because it keeps no state."""


__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
]
