"""CLI command implementations.

Contents:
    * Selector commands from :mod:`.selector_cmd`
    * Rectangle command from :mod:`.area_cmd`
    * Config command from :mod:`.config`
    * Info command from :mod:`.info`
"""

from __future__ import annotations

from .area_cmd import cli_area
from .config import cli_config
from .info import cli_info
from .selector_cmd import cli_build, cli_combine

__all__ = [
    "cli_area",
    "cli_build",
    "cli_combine",
    "cli_config",
    "cli_info",
]
