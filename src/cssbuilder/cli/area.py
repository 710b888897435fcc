"""CLI command: cssbuilder area -- print the area of a rectangle."""

from __future__ import annotations

import click

from cssbuilder.objects import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    result = Rectangle(width, height).get_area()
    click.echo(f"{result:g}")
