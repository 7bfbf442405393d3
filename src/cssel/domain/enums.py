"""Type-safe domain enums for selector fragments, combinators, and output formats."""

from __future__ import annotations

from enum import Enum


class Category(str, Enum):
    """Kinds of fragment a selector builder records.

    Each member knows its precedence rank, how it renders a token, and
    whether it may appear more than once in a single compound selector.
    Inherits from str so members compare equal to their CLI spelling.

    Attributes:
        ELEMENT: Type selector (``div``).
        ID: Id selector (``#main``).
        CLASS: Class selector (``.container``).
        ATTRIBUTE: Attribute selector (``[href$=".png"]``).
        PSEUDO_CLASS: Pseudo-class (``:focus``).
        PSEUDO_ELEMENT: Pseudo-element (``::before``).
        COMBINATOR: Two sub-selectors joined by a combinator token.

    Example:
        >>> Category.ID.render("main")
        '#main'
        >>> Category.ELEMENT.rank < Category.CLASS.rank
        True
        >>> Category.CLASS.single
        False
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"
    COMBINATOR = "combinator"

    @property
    def rank(self) -> int:
        """Position in the required ordering, lowest first."""
        return _RANKS[self]

    @property
    def single(self) -> bool:
        """Whether the category may occur at most once per builder."""
        return self in _SINGLE

    def render(self, token: str) -> str:
        """Wrap ``token`` in this category's CSS punctuation."""
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{token}{suffix}"


_RANKS: dict[Category, int] = {
    Category.ELEMENT: 0,
    Category.ID: 1,
    Category.CLASS: 2,
    Category.ATTRIBUTE: 3,
    Category.PSEUDO_CLASS: 4,
    Category.PSEUDO_ELEMENT: 5,
    # Combinator fragments sit outside the compound ordering; see SelectorBuilder.
    Category.COMBINATOR: 6,
}

_SINGLE = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
    Category.COMBINATOR: ("", ""),
}


class Combinator(str, Enum):
    """CSS combinators that join two selectors.

    Example:
        >>> Combinator("+") is Combinator.ADJACENT
        True
        >>> Combinator.CHILD == ">"
        True
    """

    DESCENDANT = " "
    ADJACENT = "+"
    SIBLING = "~"
    CHILD = ">"


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


__all__ = [
    "Category",
    "Combinator",
    "OutputFormat",
]
