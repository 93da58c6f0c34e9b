"""Compute a DKW confidence interval for the mean of a histogram.

Examples
--------
  dkwci interval --value 1=0 --value 2=3 --value 3=9 --value 4=53 --value 5=144
  dkwci interval --data ratings.json --confidence 0.99 --format json
  dkwci interval --data ratings.json --plot figs/ratings_band.png
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from dkwci.cdf import CDF
from dkwci.config import Config, OUTPUT_FORMATS
from dkwci.formatting import format_interval
from dkwci.histogram import load_histogram, normalize_histogram, parse_histogram_items
from dkwci.interval import dkw_epsilon, summarize_interval


def read_histogram(data: Optional[Path], values: tuple[str, ...]) -> list[tuple[float, int]]:
    """Combine a JSON histogram file and ``VALUE=COUNT`` options."""

    if data is None and not values:
        raise click.UsageError("Provide --data FILE or at least one --value VALUE=COUNT")
    pairs: list[tuple[float, int]] = load_histogram(data) if data is not None else []
    if values:
        pairs = normalize_histogram(pairs + parse_histogram_items(values))
    return pairs


@click.command(name="interval")
@click.option("data", "--data", type=click.Path(exists=True, dir_okay=False, path_type=Path), required=False, help="JSON histogram file: an object of value -> count, or a list of [value, count] pairs")
@click.option("values", "--value", multiple=True, metavar="VALUE=COUNT", help="Histogram entry; may be repeated")
@click.option("confidence", "--confidence", type=float, default=Config.DEFAULT_CONFIDENCE_LEVEL, show_default=True, help="Confidence level between 0.5 and 1.0")
@click.option("fmt", "--format", type=click.Choice(OUTPUT_FORMATS, case_sensitive=False), default=Config.DEFAULT_OUTPUT_FORMAT, show_default=True, help="Output format")
@click.option("plot", "--plot", type=click.Path(dir_okay=False, path_type=Path), required=False, help="Save a figure of the CDF and its confidence band to this path")
def interval(data: Optional[Path], values: tuple[str, ...], confidence: float, fmt: str, plot: Optional[Path]) -> None:
    """Print lower and upper bounds on the expected value of a histogram.

    The histogram must include the smallest and largest possible values,
    with a count of 0 if they were never observed.
    """

    try:
        histogram = read_histogram(data, values)
        summary = summarize_interval(histogram, confidence)
        click.echo(format_interval(summary, fmt))
        if plot is not None:
            if summary["n"] == 0:
                click.secho("No observations; skipping plot.", fg="yellow", err=True)
            else:
                from dkwci.plotting import plot_cdf_band

                cdf = CDF(histogram)
                plot_cdf_band(
                    cdf,
                    dkw_epsilon(cdf.n, summary["confidence_level"]),
                    plot,
                    bounds=(summary["lower"], summary["upper"]),
                )
                click.echo(f"Saved plot: {plot}")
    except ValueError as e:
        click.secho(str(e), fg="red", err=True)
        raise SystemExit(1)
