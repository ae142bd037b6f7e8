"""Subcommand modules for timemask.

Provides register_commands() which uses deferred imports to keep
``timemask --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from timemask.commands.duration import duration
    from timemask.commands.mask import mask
    from timemask.commands.tokenize import tokenize

    cli.add_command(tokenize)
    cli.add_command(mask)
    cli.add_command(duration)
