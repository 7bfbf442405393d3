"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .enums import Category


class SelectorError(Exception):
    """A selector builder rejected a fragment.

    The builder is left exactly as it was before the offending call; the
    caller should discard it and start a new chain.

    Attributes:
        category: The fragment category whose append was refused.

    Example:
        >>> from cssel.domain.enums import Category
        >>> err = SelectorError("bad selector", category=Category.ID)
        >>> err.category.value
        'id'
    """

    def __init__(self, message: str, *, category: Category | None = None) -> None:
        super().__init__(message)
        self.category = category


class DuplicateCategoryError(SelectorError):
    """Element, id, or pseudo-element appended a second time.

    Example:
        >>> from cssel.domain.enums import Category
        >>> str(DuplicateCategoryError("twice", category=Category.ID))
        'twice'
    """


class OrderViolationError(SelectorError):
    """Fragment appended after a fragment of higher precedence.

    Also raised when a combinator fragment would share a builder with any
    other fragment.
    """


class InvalidCombinatorError(ValueError):
    """Combinator token outside ``' '``, ``'+'``, ``'~'`` and ``'>'``.

    Only raised by builders running in strict mode.

    Example:
        >>> isinstance(InvalidCombinatorError("'|' is not a CSS combinator"), ValueError)
        True
    """


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when a configuration section cannot be validated. Typically
    caught at CLI boundaries to provide user-friendly error messages.

    Example:
        >>> str(ConfigurationError("selector.strict_combinators must be a boolean"))
        'selector.strict_combinators must be a boolean'
    """


__all__ = [
    "ConfigurationError",
    "DuplicateCategoryError",
    "InvalidCombinatorError",
    "OrderViolationError",
    "SelectorError",
]
