"""Fluent CSS selector builder.

A builder records typed fragments in call order and renders them on
demand::

    element#id.class[attr]:pseudoClass::pseudoElement
              \\----/\\----/\\----------/
              may occur several times

Element, id and pseudo-element occur at most once, and fragments must be
appended in that left-to-right order. Two finished builders can be joined
with a combinator (``' '``, ``'+'``, ``'~'``, ``'>'``).

Contents:
    * :class:`Fragment` - one typed piece of a selector.
    * :class:`Combination` - payload of a combinator fragment.
    * :class:`SelectorBuilder` - the mutable accumulator.
"""

from __future__ import annotations

from dataclasses import dataclass

from .enums import Category, Combinator
from .errors import DuplicateCategoryError, InvalidCombinatorError, OrderViolationError

_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: "
    "element, id, class, attribute, pseudo-class, pseudo-element"
)
_DUPLICATE_MESSAGE = "Element, id and pseudo-element should not occur more than one time inside the selector"
_MIXED_MESSAGE = "A combined selector cannot share a builder with other selector parts"


@dataclass(frozen=True, slots=True)
class Combination:
    """Two finished selectors joined by a combinator token."""

    left: SelectorBuilder
    operator: str
    right: SelectorBuilder

    def render(self) -> str:
        return f"{self.left.stringify()} {self.operator} {self.right.stringify()}"


@dataclass(frozen=True, slots=True)
class Fragment:
    """A tagged ``(category, payload)`` pair.

    Example:
        >>> Fragment(Category.CLASS, "container").render()
        '.container'
    """

    category: Category
    payload: str | Combination

    def render(self) -> str:
        if isinstance(self.payload, Combination):
            return self.payload.render()
        return self.category.render(self.payload)


class SelectorBuilder:
    """Accumulate selector fragments and render them as CSS text.

    Every fragment method returns the builder itself so calls chain. A call
    that breaks the ordering or uniqueness rules raises and leaves the
    builder untouched.

    Args:
        strict: When true, :meth:`combine` only accepts the four CSS
            combinator tokens.

    Example:
        >>> SelectorBuilder().id("main").class_("container").class_("editable").stringify()
        '#main.container.editable'
        >>> SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus").stringify()
        'a[href$=".png"]:focus'
        >>> SelectorBuilder().class_("a").element("x")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        OrderViolationError: Selector parts should be arranged in the following order...
    """

    __slots__ = ("_fragments", "_max_rank", "_seen", "strict")

    def __init__(self, *, strict: bool = False) -> None:
        self.strict = strict
        self._fragments: list[Fragment] = []
        self._seen: set[Category] = set()
        self._max_rank = -1

    def element(self, value: str) -> SelectorBuilder:
        return self._append(Category.ELEMENT, value)

    def id(self, value: str) -> SelectorBuilder:
        return self._append(Category.ID, value)

    def class_(self, value: str) -> SelectorBuilder:
        return self._append(Category.CLASS, value)

    def attr(self, value: str) -> SelectorBuilder:
        return self._append(Category.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        return self._append(Category.PSEUDO_ELEMENT, value)

    def add(self, category: Category | str, value: str) -> SelectorBuilder:
        """Append a token fragment by category name.

        Args:
            category: A :class:`Category` or its string value
                (``"pseudo-class"``). Combinators go through :meth:`combine`.
            value: Raw token to render.

        Raises:
            ValueError: If ``category`` is unknown or names a combinator.

        Example:
            >>> SelectorBuilder().add("element", "li").add("pseudo-class", "hover").stringify()
            'li:hover'
        """
        kind = Category(category)
        if kind is Category.COMBINATOR:
            raise ValueError("Use combine() to join selectors")
        return self._append(kind, value)

    def combine(self, left: SelectorBuilder, operator: Combinator | str, right: SelectorBuilder) -> SelectorBuilder:
        """Append a combinator fragment joining ``left`` and ``right``.

        The sub-builders are kept by reference and only read when rendering.

        Raises:
            OrderViolationError: If this builder already holds fragments.
            InvalidCombinatorError: In strict mode, for an unknown operator.

        Example:
            >>> b = SelectorBuilder()
            >>> b.combine(SelectorBuilder().element("div").id("main"), "+", SelectorBuilder().element("table")).stringify()
            'div#main + table'
        """
        token = operator.value if isinstance(operator, Combinator) else operator
        if self.strict and token not in _COMBINATOR_TOKENS:
            raise InvalidCombinatorError(f"{token!r} is not a CSS combinator")
        if self._fragments:
            raise OrderViolationError(_MIXED_MESSAGE, category=Category.COMBINATOR)
        self._push(Fragment(Category.COMBINATOR, Combination(left, token, right)))
        return self

    def stringify(self) -> str:
        """Render the fragments in call order with no separators."""
        return "".join(fragment.render() for fragment in self._fragments)

    @property
    def fragments(self) -> tuple[Fragment, ...]:
        return tuple(self._fragments)

    def copy(self) -> SelectorBuilder:
        """Return an independent builder holding the same fragments.

        Example:
            >>> base = SelectorBuilder().element("ul")
            >>> base.copy().class_("menu").stringify(), base.stringify()
            ('ul.menu', 'ul')
        """
        clone = SelectorBuilder(strict=self.strict)
        for fragment in self._fragments:
            clone._push(fragment)
        return clone

    def _append(self, category: Category, value: str) -> SelectorBuilder:
        if Category.COMBINATOR in self._seen:
            raise OrderViolationError(_MIXED_MESSAGE, category=category)
        if category.rank < self._max_rank:
            raise OrderViolationError(_ORDER_MESSAGE, category=category)
        if category.single and category in self._seen:
            raise DuplicateCategoryError(_DUPLICATE_MESSAGE, category=category)
        self._push(Fragment(category, value))
        return self

    def _push(self, fragment: Fragment) -> None:
        self._fragments.append(fragment)
        self._seen.add(fragment.category)
        self._max_rank = max(self._max_rank, fragment.category.rank)

    def __len__(self) -> int:
        return len(self._fragments)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.stringify()!r})"


_COMBINATOR_TOKENS = frozenset(member.value for member in Combinator)


__all__ = [
    "Combination",
    "Fragment",
    "SelectorBuilder",
]
