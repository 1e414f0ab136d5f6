"""selectorkit CLI entry point: Click group with subcommands."""

import logging
import sys

import click

from selectorkit import __version__
from selectorkit.config import LOG_LEVELS, SelectorkitConfig


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Logging level (default: $SELECTORKIT_LOG_LEVEL or WARNING)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """selectorkit - build CSS selectors and convert objects to and from JSON."""
    try:
        config = SelectorkitConfig.from_env()
    except ValueError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(1)
    level = (log_level or config.log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.selector import build  # noqa: E402
from selectorkit.cli.shapes import area  # noqa: E402
from selectorkit.cli.json_cmd import json_cmd  # noqa: E402

cli.add_command(build)
cli.add_command(area)
cli.add_command(json_cmd)
