"""Print the empirical CDF of a histogram, optionally shifted.

Examples
--------
  dkwci cdf --value 0=1 --value 3=0 --value 5=1 --value 7=2
  dkwci cdf --data ratings.json --shift -0.1 --format csv
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from dkwci.cdf import CDF
from dkwci.commands.interval import read_histogram
from dkwci.config import Config, OUTPUT_FORMATS
from dkwci.formatting import format_cdf


@click.command(name="cdf")
@click.option("data", "--data", type=click.Path(exists=True, dir_okay=False, path_type=Path), required=False, help="JSON histogram file")
@click.option("values", "--value", multiple=True, metavar="VALUE=COUNT", help="Histogram entry; may be repeated")
@click.option("offset", "--shift", type=float, default=0.0, show_default=True, help="Offset added to every cumulative probability before clamping")
@click.option("fmt", "--format", type=click.Choice(OUTPUT_FORMATS, case_sensitive=False), default=Config.DEFAULT_OUTPUT_FORMAT, show_default=True, help="Output format")
def cdf(data: Optional[Path], values: tuple[str, ...], offset: float, fmt: str) -> None:
    """Print support values and cumulative probabilities."""

    try:
        result = CDF(read_histogram(data, values))
        if offset:
            result = result.shift(offset)
        click.echo(format_cdf(result, fmt))
        ev = result.expected_value()
        if fmt.lower() in {"table", "markdown"}:
            shown = "undefined" if ev is None else f"{ev:.{Config.FLOAT_PRECISION}f}"
            click.echo(f"\nExpected value: {shown}")
    except ValueError as e:
        click.secho(str(e), fg="red", err=True)
        raise SystemExit(1)
