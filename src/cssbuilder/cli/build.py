"""CLI command: cssbuilder build -- assemble and print a selector."""

from __future__ import annotations

import logging
import sys

import click

from cssbuilder.selector import SelectorError, build_chain


@click.command()
@click.argument("tokens", nargs=-1, required=True)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def build(tokens: tuple[str, ...], verbose: bool) -> None:
    """Build a selector from TOKENS and print it.

    Tokens are fragments written as kind=value (element, id, class, attr,
    pseudo-class, pseudo-element) separated by the combinators +, ~, > or
    the word "descendant". Example:

        cssbuilder build element=a 'attr=href$=".png"' pseudo-class=focus
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        selector = build_chain(tokens)
    except SelectorError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
