"""Root CLI group for timemask with global flags and command registration."""

from __future__ import annotations

import click

from timemask import __version__
from timemask.commands import register_commands
from timemask.commands._context import AppContext
from timemask.config.settings import TmSettings


@click.group(
    invoke_without_command=True,
    epilog="Config: timemask.toml ([duration], [mask]) found by walking up from the CWD.",
)
@click.version_option(version=__version__, prog_name="timemask")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Print only the result value.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Use this timemask.toml instead of discovering one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Tokenize date formats, derive input masks, and format durations."""
    ctx.ensure_object(dict)
    settings = TmSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
