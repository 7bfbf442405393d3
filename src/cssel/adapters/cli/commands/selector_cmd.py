"""Selector building commands.

Contents:
    * :func:`parse_step` - Split a ``CATEGORY=VALUE`` step.
    * :func:`split_steps` - Split a quoted step list.
    * :func:`cli_build` - Build one compound selector from ordered steps.
    * :func:`cli_combine` - Join two compound selectors with a combinator.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager

import lib_log_rich.runtime
import rich_click as click

from cssel.domain.enums import Category
from cssel.domain.errors import ConfigurationError, InvalidCombinatorError, SelectorError
from cssel.domain.facade import CssSelectorBuilder
from cssel.domain.selector import SelectorBuilder

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)

_STEP_CATEGORIES = tuple(c.value for c in Category if c is not Category.COMBINATOR)

_FACADE_ENTRY: dict[Category, Callable[[CssSelectorBuilder, str], SelectorBuilder]] = {
    Category.ELEMENT: CssSelectorBuilder.element,
    Category.ID: CssSelectorBuilder.id,
    Category.CLASS: CssSelectorBuilder.class_,
    Category.ATTRIBUTE: CssSelectorBuilder.attr,
    Category.PSEUDO_CLASS: CssSelectorBuilder.pseudo_class,
    Category.PSEUDO_ELEMENT: CssSelectorBuilder.pseudo_element,
}


def parse_step(raw: str) -> tuple[Category, str]:
    """Split ``CATEGORY=VALUE`` at the first ``=``.

    Raises:
        ValueError: If ``=`` is missing, the category is unknown, or the
            value is empty.

    Examples:
        >>> parse_step("pseudo-class=nth-of-type(even)")
        (<Category.PSEUDO_CLASS: 'pseudo-class'>, 'nth-of-type(even)')
        >>> parse_step('attr=href$=".png"')[1]
        'href$=".png"'
    """
    name, sep, value = raw.partition("=")
    if not sep:
        raise ValueError(f"Invalid step {raw!r}: expected CATEGORY=VALUE")
    if name not in _STEP_CATEGORIES:
        raise ValueError(f"Invalid step {raw!r}: category must be one of {', '.join(_STEP_CATEGORIES)}")
    if not value:
        raise ValueError(f"Invalid step {raw!r}: value is empty")
    return Category(name), value


def split_steps(text: str) -> list[str]:
    """Split a step list with shell quoting rules.

    Quote a step to keep a space inside its value.

    Raises:
        click.BadParameter: If a quote is left open.

    Example:
        >>> split_steps("element=a 'attr=title=a b'")
        ['element=a', 'attr=title=a b']
    """
    try:
        return shlex.split(text)
    except ValueError as exc:
        raise click.BadParameter(f"Cannot split {text!r}: {exc}") from exc


def build_selector(facade: CssSelectorBuilder, steps: Iterable[str]) -> SelectorBuilder:
    """Replay ``steps`` in order, starting from the matching facade entry point.

    Raises:
        click.BadParameter: If a step is malformed or there are no steps.
        SelectorError: If the steps break ordering or uniqueness rules.

    Example:
        >>> build_selector(CssSelectorBuilder(), ["element=a", "pseudo-class=focus"]).stringify()
        'a:focus'
    """
    try:
        parsed = [parse_step(raw) for raw in steps]
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    if not parsed:
        raise click.BadParameter("at least one CATEGORY=VALUE step is required")

    (first_category, first_value), *rest = parsed
    builder: SelectorBuilder = _FACADE_ENTRY[first_category](facade, first_value)
    for category, value in rest:
        builder.add(category, value)
    return builder


@contextmanager
def _selector_errors() -> Iterator[None]:
    """Turn domain failures into an error line and a meaningful exit code."""
    try:
        yield
    except SelectorError as exc:
        logger.warning("Selector rejected: %s", exc)
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.DATA_ERROR) from exc
    except InvalidCombinatorError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.CONFIG_ERROR) from exc


@click.command("build", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("steps", nargs=-1, required=True, metavar="CATEGORY=VALUE...")
@click.pass_context
def cli_build(ctx: click.Context, steps: tuple[str, ...]) -> None:
    """Build a compound selector from ordered CATEGORY=VALUE steps.

    CATEGORY is one of element, id, class, attr, pseudo-class and
    pseudo-element, given in that order. Example:

        cssel build element=div id=main class=container
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-build", extra={"command": "build", "steps": len(steps)}):
        with _selector_errors():
            selector = build_selector(cli_ctx.selector_facade(), steps)
        logger.info("Built selector", extra={"fragments": len(selector)})
        click.echo(selector.stringify())


@click.command("combine", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("left")
@click.argument("operator")
@click.argument("right")
@click.pass_context
def cli_combine(ctx: click.Context, left: str, operator: str, right: str) -> None:
    """Join two selectors with a combinator.

    LEFT and RIGHT are CATEGORY=VALUE step lists split with shell quoting
    rules, so a quoted step keeps its spaces:

        cssel combine "element=div id=main" + "element=a attr='title=\\"a b\\"'"
    """
    cli_ctx = get_cli_context(ctx)
    with lib_log_rich.runtime.bind(job_id="cli-combine", extra={"command": "combine", "operator": operator}):
        with _selector_errors():
            facade = cli_ctx.selector_facade()
            combined = facade.combine(
                build_selector(facade, split_steps(left)),
                operator,
                build_selector(facade, split_steps(right)),
            )
        logger.info("Combined selectors", extra={"strict": facade.strict})
        click.echo(combined.stringify())


__all__ = [
    "build_selector",
    "cli_build",
    "cli_combine",
    "parse_step",
    "split_steps",
]
