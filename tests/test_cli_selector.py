"""CLI selector stories: build and combine commands, strict mode, error exits."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click
import pytest
from click.testing import CliRunner, Result

from cssel.adapters import cli as cli_mod
from cssel.adapters.cli.commands.selector_cmd import build_selector, parse_step, split_steps
from cssel.adapters.cli.exit_codes import ExitCode
from cssel.domain.enums import Category
from cssel.domain.facade import CssSelectorBuilder

# ======================== parse_step / build_selector ========================


@pytest.mark.os_agnostic
def test_parse_step_splits_at_first_equals() -> None:
    assert parse_step('attr=href$=".png"') == (Category.ATTRIBUTE, 'href$=".png"')


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("raw", "message"),
    [
        ("element", "expected CATEGORY=VALUE"),
        ("tag=div", "category must be one of"),
        ("combinator=+", "category must be one of"),
        ("class=", "value is empty"),
    ],
)
def test_parse_step_rejects_malformed_steps(raw: str, message: str) -> None:
    with pytest.raises(ValueError, match=message):
        parse_step(raw)


@pytest.mark.os_agnostic
def test_build_selector_replays_steps_in_order() -> None:
    selector = build_selector(CssSelectorBuilder(), ["element=div", "class=a", "class=b", "pseudo-element=after"])

    assert selector.stringify() == "div.a.b::after"


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("step", "expected"),
    [
        ("element=div", "div"),
        ("id=main", "#main"),
        ("class=menu", ".menu"),
        ("attr=href", "[href]"),
        ("pseudo-class=hover", ":hover"),
        ("pseudo-element=before", "::before"),
    ],
)
def test_build_selector_starts_from_any_category(step: str, expected: str) -> None:
    assert build_selector(CssSelectorBuilder(), [step]).stringify() == expected


@pytest.mark.os_agnostic
def test_build_selector_first_step_inherits_strict_mode() -> None:
    selector = build_selector(CssSelectorBuilder(strict=True), ["class=a"])

    assert selector.strict is True


@pytest.mark.os_agnostic
def test_split_steps_keeps_quoted_spaces() -> None:
    assert split_steps("""element=a attr='title="a b"'""") == ["element=a", 'attr=title="a b"']


@pytest.mark.os_agnostic
def test_split_steps_rejects_open_quote() -> None:
    with pytest.raises(click.BadParameter, match="Cannot split"):
        split_steps("element=a 'attr=title")


# ======================== build ========================


@pytest.mark.os_agnostic
def test_build_prints_selector(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["build", "id=main", "class=container", "class=editable"], obj=production_factory
    )

    assert result.exit_code == 0
    assert result.stdout.strip().splitlines()[-1] == "#main.container.editable"


@pytest.mark.os_agnostic
def test_build_with_out_of_order_steps_exits_with_data_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["build", "class=a", "element=x"], obj=production_factory)

    assert result.exit_code == ExitCode.DATA_ERROR
    assert "should be arranged" in result.stderr


@pytest.mark.os_agnostic
def test_build_with_duplicate_id_exits_with_data_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["build", "id=a", "id=b"], obj=production_factory)

    assert result.exit_code == ExitCode.DATA_ERROR
    assert "more than one time" in result.stderr


@pytest.mark.os_agnostic
def test_build_with_malformed_step_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["build", "div"], obj=production_factory)

    assert result.exit_code == 2
    assert "CATEGORY=VALUE" in result.output


@pytest.mark.os_agnostic
def test_build_without_steps_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(cli_mod.cli, ["build"], obj=production_factory)

    assert result.exit_code == 2


# ======================== combine ========================


@pytest.mark.os_agnostic
def test_combine_prints_joined_selector(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["combine", "element=div id=main", "+", "element=table"], obj=production_factory
    )

    assert result.exit_code == 0
    assert result.stdout.strip().splitlines()[-1] == "div#main + table"


@pytest.mark.os_agnostic
def test_combine_reports_errors_from_either_side(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["combine", "element=div", ">", "pseudo-element=a pseudo-element=b"], obj=production_factory
    )

    assert result.exit_code == ExitCode.DATA_ERROR


@pytest.mark.os_agnostic
def test_combine_keeps_spaces_inside_quoted_steps(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["combine", "element=div", ">", """element=a attr='title="a b"'"""],
        obj=production_factory,
    )

    assert result.exit_code == 0
    assert result.stdout.strip().splitlines()[-1] == 'div > a[title="a b"]'


@pytest.mark.os_agnostic
def test_combine_with_open_quote_is_a_usage_error(
    cli_runner: CliRunner,
    production_factory: Callable[[], Any],
) -> None:
    result: Result = cli_runner.invoke(
        cli_mod.cli, ["combine", "element=div", "+", "element=a 'attr=title"], obj=production_factory
    )

    assert result.exit_code == 2
    assert "Cannot split" in result.output


@pytest.mark.os_agnostic
def test_lenient_config_accepts_unknown_combinator(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"selector": {"strict_combinators": False}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["combine", "element=a", "|", "element=b"], obj=factory)

    assert result.exit_code == 0
    assert "a | b" in result.stdout


@pytest.mark.os_agnostic
def test_strict_config_rejects_unknown_combinator(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"selector": {"strict_combinators": True}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["combine", "element=a", "|", "element=b"], obj=factory)

    assert result.exit_code == ExitCode.INVALID_ARGUMENT
    assert "not a CSS combinator" in result.stderr


@pytest.mark.os_agnostic
def test_set_override_switches_on_strict_mode(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({})

    result: Result = cli_runner.invoke(
        cli_mod.cli,
        ["--set", "selector.strict_combinators=true", "combine", "element=a", "|", "element=b"],
        obj=factory,
    )

    assert result.exit_code == ExitCode.INVALID_ARGUMENT


@pytest.mark.os_agnostic
def test_invalid_selector_config_exits_with_config_error(
    cli_runner: CliRunner,
    config_cli_context: Callable[[dict[str, Any]], Callable[[], Any]],
) -> None:
    factory = config_cli_context({"selector": {"strict_combinators": "sometimes"}})

    result: Result = cli_runner.invoke(cli_mod.cli, ["build", "element=a"], obj=factory)

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Invalid [selector] configuration" in result.stderr
