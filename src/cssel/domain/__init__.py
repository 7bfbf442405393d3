"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.selector` - Fluent CSS selector builder
    * :mod:`.facade` - Stateless builder entry points
    * :mod:`.shapes` - Geometric value objects (Rectangle)
    * :mod:`.enums` - Domain enumerations (Category, Combinator, OutputFormat)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .enums import Category, Combinator, OutputFormat
from .errors import (
    ConfigurationError,
    DuplicateCategoryError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorError,
)
from .facade import CssSelectorBuilder, css_selector_builder
from .selector import Combination, Fragment, SelectorBuilder
from .shapes import Rectangle

__all__ = [
    # Selectors
    "Combination",
    "CssSelectorBuilder",
    "Fragment",
    "SelectorBuilder",
    "css_selector_builder",
    # Shapes
    "Rectangle",
    # Enums
    "Category",
    "Combinator",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "DuplicateCategoryError",
    "InvalidCombinatorError",
    "OrderViolationError",
    "SelectorError",
]
