"""Apply ``--set SECTION.KEY=VALUE`` command-line overrides to a Config."""

from __future__ import annotations

from dataclasses import dataclass
from typing import cast

import orjson
from lib_layered_config import Config

OverrideValue = str | int | float | bool | None | list[object] | dict[str, object]
"""Python values an override string can coerce to."""


@dataclass(frozen=True, slots=True)
class ConfigOverride:
    """One parsed ``--set`` entry."""

    section: str
    key_path: tuple[str, ...]
    value: OverrideValue


def parse_override(raw: str) -> ConfigOverride:
    """Split ``SECTION.KEY[.SUBKEY...]=VALUE`` into a :class:`ConfigOverride`.

    Everything before the first ``=`` is the dotted path; its first segment
    is the section. The value is coerced with :func:`coerce_value`.

    Raises:
        ValueError: If ``=`` is missing, the path has no dot, or any path
            segment is empty.

    Examples:
        >>> override = parse_override("selector.strict_combinators=true")
        >>> override.section, override.key_path, override.value
        ('selector', ('strict_combinators',), True)

        >>> parse_override("lib_log_rich.payload_limits.max_chars=8192").key_path
        ('payload_limits', 'max_chars')
    """
    if "=" not in raw:
        raise ValueError(f"Invalid override {raw!r}: must contain '='")

    path_part, value_str = raw.split("=", maxsplit=1)
    if "." not in path_part:
        raise ValueError(f"Invalid override {raw!r}: key must contain at least one dot (SECTION.KEY)")

    section, *key_parts = path_part.split(".")
    if not section:
        raise ValueError(f"Invalid override {raw!r}: section name is empty")
    if not all(key_parts):
        raise ValueError(f"Invalid override {raw!r}: key path contains empty component")

    return ConfigOverride(section=section, key_path=tuple(key_parts), value=coerce_value(value_str))


def coerce_value(raw: str) -> OverrideValue:
    """Read ``raw`` as JSON, keeping it as a plain string when that fails.

    Examples:
        >>> coerce_value("false")
        False
        >>> coerce_value("42")
        42
        >>> coerce_value("null")
        >>> coerce_value('["a","b"]')
        ['a', 'b']
        >>> coerce_value("DEBUG")
        'DEBUG'
        >>> coerce_value("")
        ''
    """
    if raw == "":
        return ""
    try:
        return orjson.loads(raw)
    except orjson.JSONDecodeError:
        return raw


def _nest_override(target: dict[str, dict[str, object]], override: ConfigOverride) -> None:
    """Write ``override`` into ``target``, creating intermediate tables.

    Raises:
        TypeError: If a non-table value already sits on the key path.

    Example:
        >>> d: dict[str, dict[str, object]] = {}
        >>> _nest_override(d, ConfigOverride(section="s", key_path=("x", "y"), value=3))
        >>> d["s"]["x"]["y"]
        3
    """
    node: dict[str, object] = target.setdefault(override.section, {})
    for part in override.key_path[:-1]:
        existing = node.setdefault(part, {})
        if not isinstance(existing, dict):
            raise TypeError(f"Expected dict at key {part!r}, got {type(existing).__name__}")
        node = cast("dict[str, object]", existing)
    node[override.key_path[-1]] = override.value


def apply_overrides(config: Config, raw_overrides: tuple[str, ...]) -> Config:
    """Return ``config`` with every ``--set`` entry deep-merged on top.

    Returns the same instance when there is nothing to apply.

    Raises:
        ValueError: If any override string is malformed.

    Examples:
        >>> cfg = Config({"selector": {"strict_combinators": False}}, {})
        >>> apply_overrides(cfg, ("selector.strict_combinators=true",))["selector"]["strict_combinators"]
        True
        >>> apply_overrides(cfg, ()) is cfg
        True
    """
    if not raw_overrides:
        return config

    overrides: dict[str, dict[str, object]] = {}
    for raw in raw_overrides:
        _nest_override(overrides, parse_override(raw))
    return config.with_overrides(overrides)


__all__ = [
    "ConfigOverride",
    "OverrideValue",
    "apply_overrides",
    "coerce_value",
    "parse_override",
]
