"""Command: derive an input mask from a date-format pattern."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timemask.commands._base import TmCommand

if TYPE_CHECKING:
    from timemask.commands._context import AppContext


@click.command(
    "mask",
    cls=TmCommand,
    examples="""\
  timemask mask "MM/DD/YYYY"
  timemask mask "HH:mm:ss" --regex
  timemask -q mask "Do MMM YYYY\"""",
)
@click.argument("fmt", metavar="FORMAT")
@click.option(
    "--regex/--no-regex",
    default=None,
    help="Include the anchored regex for the mask (default from [mask] regex).",
)
@click.pass_obj
def mask(app: AppContext, fmt: str, regex: bool | None) -> None:
    """Derive the input mask for FORMAT."""
    app.emit(app.service.mask(fmt, regex=regex))
