"""Command: render a millisecond count as a duration string."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from timemask.commands._base import TmCommand, display_option

if TYPE_CHECKING:
    from timemask.commands._context import AppContext


@click.command(
    "duration",
    cls=TmCommand,
    examples="""\
  timemask duration 90061000
  timemask duration 5000 --pad-seconds
  timemask duration 1234 --show-ms always
  timemask duration -- -3600000
  timemask duration 90061000000 --no-group""",
)
@click.argument("milliseconds")
@display_option("days")
@display_option("hours")
@display_option("minutes")
@display_option("seconds")
@display_option("milliseconds", "--show-ms", "--show-milliseconds")
@click.option("--pad-days/--no-pad-days", default=None, help="Zero-pad leading days.")
@click.option("--pad-hours/--no-pad-hours", default=None, help="Zero-pad leading hours.")
@click.option("--pad-minutes/--no-pad-minutes", default=None, help="Zero-pad leading minutes.")
@click.option("--pad-seconds/--no-pad-seconds", default=None, help="Zero-pad leading seconds.")
@click.option(
    "--group/--no-group",
    "format_number",
    default=None,
    help="Group thousands in the leading unit.",
)
@click.pass_obj
def duration(app: AppContext, milliseconds: str, **policy: Any) -> None:
    """Format MILLISECONDS as d:hh:mm:ss.mmm.

    Options left unset fall back to the [duration] section of timemask.toml,
    then to the built-in defaults.
    """
    overrides = {key: value for key, value in policy.items() if value is not None}
    app.emit(app.service.duration(milliseconds, overrides))
