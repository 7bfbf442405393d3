"""Composition and in-memory adapter contract tests."""

from __future__ import annotations

import pytest
from lib_layered_config import Config

from cssel.adapters.memory import display_config_in_memory, get_config_in_memory, init_logging_in_memory
from cssel.composition import AppServices, build_production, build_testing
from cssel.domain.enums import OutputFormat


@pytest.mark.os_agnostic
def test_in_memory_config_is_empty() -> None:
    config = get_config_in_memory(profile="anything")

    assert isinstance(config, Config)
    assert config.as_dict() == {}


@pytest.mark.os_agnostic
def test_in_memory_display_prints_nothing(capsys: pytest.CaptureFixture[str]) -> None:
    display_config_in_memory(Config({"a": {"b": 1}}, {}), output_format=OutputFormat.JSON)

    assert capsys.readouterr().out == ""


@pytest.mark.os_agnostic
def test_in_memory_logging_returns_none() -> None:
    assert init_logging_in_memory(Config({}, {})) is None


@pytest.mark.os_agnostic
def test_build_testing_wires_in_memory_adapters() -> None:
    services = build_testing()

    assert services.get_config is get_config_in_memory
    assert services.display_config is display_config_in_memory
    assert services.init_logging is init_logging_in_memory


@pytest.mark.os_agnostic
def test_build_production_wires_real_adapters() -> None:
    from cssel.adapters.config.display import display_config
    from cssel.adapters.config.loader import get_config
    from cssel.adapters.logging.setup import init_logging

    services = build_production()

    assert isinstance(services, AppServices)
    assert services.get_config is get_config
    assert services.display_config is display_config
    assert services.init_logging is init_logging
