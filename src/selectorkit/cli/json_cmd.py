"""CLI command: selectorkit json -- load JSON into a registered type and re-emit it."""

from __future__ import annotations

import sys

import click

from selectorkit.serialization import SerializationError, from_json, to_json
from selectorkit.shapes import Rectangle

# Types that JSON text can be loaded into, by CLI name.
TYPES: dict[str, type] = {
    "rectangle": Rectangle,
}


@click.command("json")
@click.argument("type_name", type=click.Choice(sorted(TYPES), case_sensitive=False))
@click.argument("text")
@click.option("--area", "show_area", is_flag=True, help="Print get_area() of the loaded object")
@click.pass_obj
def json_cmd(config, type_name: str, text: str, show_area: bool) -> None:
    """Load TEXT as an instance of TYPE_NAME and print it back as JSON."""
    cls = TYPES[type_name.lower()]
    try:
        obj = from_json(cls, text)
    except SerializationError as exc:
        click.echo(f"JSON error: {exc}", err=True)
        sys.exit(1)

    if show_area:
        try:
            click.echo(obj.get_area())
        except (AttributeError, TypeError) as exc:
            click.echo(f"JSON error: cannot compute area: {exc}", err=True)
            sys.exit(1)
        return

    try:
        output = to_json(obj, indent=config.json_indent if config else None)
    except (TypeError, ValueError) as exc:
        click.echo(f"JSON error: {exc}", err=True)
        sys.exit(1)
    click.echo(output)
