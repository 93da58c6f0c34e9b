"""Command-line interface for dkwci using Click command groups."""

from __future__ import annotations

from typing import NoReturn
import logging

import click
from dkwci import __version__


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """dkwci: distribution-free confidence intervals for the mean of a histogram."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Register subcommands
from dkwci.commands.interval import interval  # noqa: E402
from dkwci.commands.cdf import cdf  # noqa: E402

cli.add_command(interval)
cli.add_command(cdf)


def main() -> NoReturn:
    """Entry point for the CLI."""
    cli()
