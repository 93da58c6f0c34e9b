"""
dkwci: Distribution-free confidence intervals for the mean of a histogram.

Builds the empirical CDF of a bounded discrete variable and uses the
Dvoretzky–Kiefer–Wolfowitz inequality to bound its expected value.
"""

__all__ = [
    "CDF",
    "Config",
    "ConfidenceIntervalError",
    "InvalidConfidenceLevel",
    "InvalidDataValue",
    "InvalidFrequency",
    "__version__",
    "calculate_confidence_interval",
    "count",
    "dkw_epsilon",
    "histogram_from_samples",
    "load_histogram",
    "normalize_histogram",
    "parse_histogram",
    "summarize_interval",
    # Plotting (lazy-imported via __getattr__)
    "plot_cdf_band",
]

__version__ = "0.1.0"

from typing import Any

from dkwci.cdf import CDF
from dkwci.config import Config
from dkwci.errors import (
    ConfidenceIntervalError,
    InvalidConfidenceLevel,
    InvalidDataValue,
    InvalidFrequency,
)
from dkwci.histogram import (
    count,
    histogram_from_samples,
    load_histogram,
    normalize_histogram,
    parse_histogram,
)
from dkwci.interval import calculate_confidence_interval, dkw_epsilon, summarize_interval


def __getattr__(name: str) -> Any:  # matplotlib is only imported when plotting is requested
    if name == "plot_cdf_band":
        from dkwci.plotting import plot_cdf_band as _p

        return _p
    raise AttributeError(f"module 'dkwci' has no attribute {name!r}")
