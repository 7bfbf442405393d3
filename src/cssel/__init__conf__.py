"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` at release time so the CLI
can report them without importing ``importlib.metadata``.

Contents:
    * Module-level constants describing the published package.
    * :func:`print_info` rendering the constants for the CLI ``info`` command.
"""

from __future__ import annotations

#: Distribution name declared in ``pyproject.toml``.
name = "cssel"
#: Human-readable summary shown in CLI help output.
title = "Fluent CSS selector builder with shape and JSON helpers"
#: Current release version pulled from ``pyproject.toml``.
version = "1.0.0"
#: Repository homepage.
homepage = "https://github.com/cssel/cssel"
#: Author attribution surfaced in CLI output.
author = "cssel contributors"
#: Contact email surfaced in CLI output.
author_email = "cssel@example.org"
#: Console-script name published by the package.
shell_command = "cssel"

#: Vendor, application and slug identifiers used by lib_layered_config
#: to derive platform-specific configuration directories.
LAYEREDCONF_VENDOR: str = "cssel"
LAYEREDCONF_APP: str = "cssel"
LAYEREDCONF_SLUG: str = "cssel"


def print_info() -> None:
    """Print the summarised metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for cssel:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))
