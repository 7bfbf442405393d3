"""Shared pytest fixtures for domain, adapter and CLI tests.

Fixtures live here so tests pick them up through conftest discovery and
read as plain English at the call site.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import fields
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner
from lib_layered_config import Config

if TYPE_CHECKING:
    from cssel.composition import AppServices

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))


def _snapshot_cli_config() -> dict[str, object]:
    """Capture every attribute from ``lib_cli_exit_tools.config``."""
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    """Reapply a snapshot captured by ``_snapshot_cli_config``."""
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    Use ``result.stdout`` when comparing command output so log records on
    stderr never leak into the assertion.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the production services factory for CLI invocations."""
    from cssel.composition import build_production

    return build_production


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset traceback flags to a known baseline and restore them afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the ``get_config`` cache before the test runs."""
    from cssel.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from plain dicts, without provenance."""

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory


@pytest.fixture
def config_cli_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any]], Callable[[], AppServices]]:
    """Return a function turning a config dict into a services factory.

    Only the configuration loader is replaced; display and logging stay on
    the production adapters.

    Example:
        def test_strict(cli_runner, config_cli_context) -> None:
            factory = config_cli_context({"selector": {"strict_combinators": True}})
            result = cli_runner.invoke(cli, ["combine", "element=a", "|", "element=b"], obj=factory)
            assert result.exit_code == 22
    """
    from cssel.composition import AppServices, build_production

    def _create(config_data: dict[str, Any]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _fake_get_config(**_kwargs: Any) -> Config:
            return config

        test_services = AppServices(
            get_config=_fake_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create


@pytest.fixture
def profile_capturing_context(
    clear_config_cache: None,
) -> Callable[[dict[str, Any], list[str | None]], Callable[[], AppServices]]:
    """Like ``config_cli_context`` but records every profile passed to ``get_config``."""
    from cssel.composition import AppServices, build_production

    def _create(config_data: dict[str, Any], captured: list[str | None]) -> Callable[[], AppServices]:
        config = Config(config_data, {})
        prod = build_production()

        def _capturing_get_config(*, profile: str | None = None, **_kwargs: Any) -> Config:
            captured.append(profile)
            return config

        test_services = AppServices(
            get_config=_capturing_get_config,
            display_config=prod.display_config,
            init_logging=prod.init_logging,
        )
        return lambda: test_services

    return _create
