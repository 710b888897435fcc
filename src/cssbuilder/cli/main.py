"""cssbuilder CLI entry point: Click group with subcommands."""

import click

from cssbuilder import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
def cli() -> None:
    """cssbuilder - build CSS selector strings from fragments."""


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.area import area  # noqa: E402

cli.add_command(build)
cli.add_command(area)
