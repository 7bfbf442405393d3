"""CLI entry point shared by the console script and ``python -m cssel``.

Contents:
    * :func:`main` - run the CLI and return its exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from cssel import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)
from .exit_codes import ExitCode

if TYPE_CHECKING:
    from cssel.composition import AppServices


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group, translating every outcome into an exit code.

    Click runs with ``standalone_mode=False`` so the services factory can ride
    along in ``obj``; the exit handling Click would normally do happens here.
    """
    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        cli.main(
            args=args,
            prog_name=__init__conf__.shell_command,
            obj=services_factory,
            standalone_mode=False,
        )
        return 0
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Commands print their own error line before exiting with an ExitCode.
        return exc.code if isinstance(exc.code, int) else ExitCode.GENERAL_ERROR
    except BaseException as exc:
        # KeyboardInterrupt included: lib_cli_exit_tools owns formatting and signal codes.
        tracebacks_enabled = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
        apply_traceback_preferences(tracebacks_enabled)
        length_limit = TRACEBACK_VERBOSE_LIMIT if tracebacks_enabled else TRACEBACK_SUMMARY_LIMIT
        lib_cli_exit_tools.print_exception_message(trace_back=tracebacks_enabled, length_limit=length_limit)
        return lib_cli_exit_tools.get_system_exit_code(exc)


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI and return its exit code.

    Args:
        argv: Arguments without the program name; ``None`` reads ``sys.argv``.
        restore_traceback: Put the traceback flags back as they were afterwards.
        services_factory: Returns the wired :class:`AppServices`. Callers
            outside the adapters layer pass ``build_production``.

    Raises:
        ValueError: If ``services_factory`` is missing.

    Example:
        >>> from cssel.composition import build_production
        >>> main(["build", "id=main", "class=container"], services_factory=build_production)  # doctest: +SKIP
        #main.container
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        # Worker threads must not tear down the shared logging runtime.
        if threading.current_thread() is threading.main_thread() and lib_log_rich.runtime.is_initialised():
            lib_log_rich.runtime.shutdown()


__all__ = ["main"]
