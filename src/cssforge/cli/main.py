"""The `cssforge` command group."""

import click

from cssforge import __version__


@click.group()
@click.version_option(version=__version__, prog_name="cssforge")
def cli() -> None:
    """cssforge - compose CSS selectors from typed parts."""


# Commands are defined in sibling modules.
from cssforge.cli.build import build  # noqa: E402

cli.add_command(build)
