"""Public package surface: selector builder, shapes, JSON helpers, config.

Imports are routed through the architectural layers:
- Domain exports: selector builder, facade, Rectangle, error types
- Adapter exports: JSON serialization
- Composition exports: wired configuration loading
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.serialization import deserialize, serialize

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    Category,
    Combinator,
    CssSelectorBuilder,
    DuplicateCategoryError,
    InvalidCombinatorError,
    OrderViolationError,
    Rectangle,
    SelectorBuilder,
    SelectorError,
    css_selector_builder,
)

__all__ = [
    "Category",
    "Combinator",
    "CssSelectorBuilder",
    "DuplicateCategoryError",
    "InvalidCombinatorError",
    "OrderViolationError",
    "Rectangle",
    "SelectorBuilder",
    "SelectorError",
    "css_selector_builder",
    "deserialize",
    "get_config",
    "print_info",
    "serialize",
]
