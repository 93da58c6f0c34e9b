"""Text rendering of CDFs and interval summaries.

Supports the output formats listed in `dkwci.config.OUTPUT_FORMATS`:
aligned ASCII tables, Markdown tables, CSV and JSON.
"""

from __future__ import annotations

from typing import Any
import json

from dkwci.cdf import CDF
from dkwci.config import Config, OUTPUT_FORMATS


def _fmt_number(value: Any, precision: int) -> str:
    if value is None:
        return "undefined"
    if isinstance(value, int):
        return str(value)
    return f"{float(value):.{precision}f}"


def format_table_ascii(headers: list[str], rows: list[list[str]]) -> str:
    widths = [max(len(h), *(len(r[i]) for r in rows)) if rows else len(h) for i, h in enumerate(headers)]

    def fmt_row(cols: list[str]) -> str:
        return " | ".join(col.ljust(widths[i]) for i, col in enumerate(cols))

    sep = "-+-".join("-" * w for w in widths)
    lines = [fmt_row(headers), sep]
    lines.extend(fmt_row(r) for r in rows)
    return "\n".join(lines)


def format_table_markdown(headers: list[str], rows: list[list[str]]) -> str:
    lines = ["| " + " | ".join(headers) + " |"]
    lines.append("| " + " | ".join(["---"] * len(headers)) + " |")
    lines.extend("| " + " | ".join(r) + " |" for r in rows)
    return "\n".join(lines)


def format_table_csv(headers: list[str], rows: list[list[str]]) -> str:
    out_lines = [",".join(headers)]
    out_lines.extend(",".join(r) for r in rows)
    return "\n".join(out_lines)


def _render(headers: list[str], rows: list[list[str]], output_format: str) -> str:
    if output_format == "markdown":
        return format_table_markdown(headers, rows)
    if output_format == "csv":
        return format_table_csv(headers, rows)
    return format_table_ascii(headers, rows)


_SUMMARY_LABELS = [
    ("confidence_level", "Confidence level"),
    ("n", "Observations"),
    ("support_min", "Support min"),
    ("support_max", "Support max"),
    ("mean", "Sample mean"),
    ("epsilon", "DKW epsilon"),
    ("lower", "Lower bound"),
    ("upper", "Upper bound"),
    ("width", "Width"),
]


def format_interval(
    summary: dict[str, Any],
    output_format: str = Config.DEFAULT_OUTPUT_FORMAT,
    precision: int = Config.FLOAT_PRECISION,
) -> str:
    """Render an interval summary from `dkwci.interval.summarize_interval`."""

    fmt = output_format.lower()
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {output_format}")
    if fmt == "json":
        return json.dumps(summary, indent=2)
    if fmt == "csv":
        headers = [key for key, _ in _SUMMARY_LABELS]
        row = ["" if summary.get(key) is None else str(summary.get(key)) for key in headers]
        return format_table_csv(headers, [row])
    rows = [[label, _fmt_number(summary.get(key), precision)] for key, label in _SUMMARY_LABELS]
    return _render(["Quantity", "Value"], rows, fmt)


def format_cdf(
    cdf: CDF,
    output_format: str = Config.DEFAULT_OUTPUT_FORMAT,
    precision: int = Config.FLOAT_PRECISION,
) -> str:
    """Render a CDF as a two-column table of values and cumulative probabilities."""

    fmt = output_format.lower()
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format: {output_format}")
    if fmt == "json":
        return json.dumps(cdf.to_dict(), indent=2)
    if fmt == "csv":
        rows = [[repr(float(x)), repr(float(y))] for x, y in zip(cdf.xs, cdf.ys)]
        return format_table_csv(["x", "F(x)"], rows)
    rows = [[f"{float(x):g}", _fmt_number(float(y), precision)] for x, y in zip(cdf.xs, cdf.ys)]
    return _render(["x", "F(x)"], rows, fmt)


__all__ = [
    "format_interval",
    "format_cdf",
    "format_table_ascii",
    "format_table_markdown",
    "format_table_csv",
]
