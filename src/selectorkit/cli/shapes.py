"""CLI command: selectorkit area -- rectangle area."""

from __future__ import annotations

import sys

import click

from selectorkit.serialization import to_json
from selectorkit.shapes import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def area(config, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width=_number(width), height=_number(height))
    if as_json:
        try:
            output = to_json(rect, indent=config.json_indent if config else None)
        except ValueError as exc:
            click.echo(f"JSON error: {exc}", err=True)
            sys.exit(1)
        click.echo(output)
    else:
        click.echo(_number(rect.get_area()))


def _number(value: float) -> float | int:
    """Drop the fractional part of whole numbers so 10.0 prints as 10."""
    return int(value) if float(value).is_integer() else value
