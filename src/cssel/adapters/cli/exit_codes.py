"""POSIX-conventional exit codes for CLI error paths.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno where applicable.

    * 0-1: generic success / failure
    * 22: EINVAL, a bad command-line value
    * 65: EX_DATAERR, a rejected selector
    * 78: EX_CONFIG, invalid configuration

    Example:
        >>> int(ExitCode.DATA_ERROR)
        65
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    DATA_ERROR = 65
    CONFIG_ERROR = 78


__all__ = ["ExitCode"]
