"""Rectangle area command.

Contents:
    * :func:`cli_area` - Print the area of a rectangle, or its JSON form.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from cssel.adapters.serialization import serialize
from cssel.domain.shapes import Rectangle

from ..constants import CLICK_CONTEXT_SETTINGS

logger = logging.getLogger(__name__)


def _as_number(value: float) -> int | float:
    """Drop a zero fractional part so ``10.0`` prints as ``10``."""
    return int(value) if value.is_integer() else value


@click.command("area", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("width", type=click.FloatRange(min=0))
@click.argument("height", type=click.FloatRange(min=0))
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the rectangle and its area as JSON")
def cli_area(width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rectangle = Rectangle(_as_number(width), _as_number(height))
    with lib_log_rich.runtime.bind(job_id="cli-area", extra={"command": "area"}):
        logger.info("Computing rectangle area", extra={"width": rectangle.width, "height": rectangle.height})
        area = rectangle.get_area()
        if as_json:
            click.echo(serialize({"rectangle": rectangle, "area": area}))
        else:
            click.echo(area)


__all__ = ["cli_area"]
