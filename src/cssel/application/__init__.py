"""Application layer - port definitions for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import DisplayConfig, GetConfig, InitLogging

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
]
