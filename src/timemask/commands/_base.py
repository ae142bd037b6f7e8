"""Custom Click base class and shared options.

TmCommand accepts an ``examples`` parameter; passing ``--examples`` prints
them and exits, keeping ``--help`` concise.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from timemask.domain.types import DisplayPolicy

DISPLAY_CHOICE = click.Choice([p.value for p in DisplayPolicy], case_sensitive=False)


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class TmCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def display_option(unit: str, *flags: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """``--show-<unit>`` option taking a display policy; unset means "use config"."""
    return click.option(
        *(flags or (f"--show-{unit}",)),
        f"show_{unit}",
        type=DISPLAY_CHOICE,
        default=None,
        help=f"When to show {unit}: always, non_zero, or never.",
    )
