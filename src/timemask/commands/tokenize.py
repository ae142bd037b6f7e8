"""Command: split a date-format pattern into literal and token segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from timemask.commands._base import TmCommand

if TYPE_CHECKING:
    from timemask.commands._context import AppContext


@click.command(
    "tokenize",
    cls=TmCommand,
    examples="""\
  timemask tokenize "YYYY-MM-DD"
  timemask tokenize "[Week] ww, gggg"
  timemask --json tokenize "h:mm A"
  timemask -q tokenize "DD/MM/YYYY HH:mm\"""",
)
@click.argument("fmt", metavar="FORMAT")
@click.pass_obj
def tokenize(app: AppContext, fmt: str) -> None:
    """Tokenize FORMAT into literal and token segments."""
    app.emit(app.service.tokenize(fmt))
