"""Figure generation for an empirical CDF and its DKW confidence band."""

from __future__ import annotations

from pathlib import Path
import logging
import math

import matplotlib.pyplot as plt
import numpy as np

from dkwci.cdf import CDF
from dkwci.config import get_config
from dkwci.utils import ensure_dir


_LOGGER = logging.getLogger(__name__)


def plot_cdf_band(
    cdf: CDF,
    epsilon: float,
    output_path: Path,
    *,
    bounds: tuple[float | None, float | None] | None = None,
    title: str | None = None,
) -> Path:
    """Save a step plot of ``cdf`` with its ``±epsilon`` band to ``output_path``.

    When ``bounds`` is given, the lower and upper mean bounds are drawn as
    vertical lines. The file format follows the suffix of ``output_path``.
    """

    if len(cdf) == 0:
        raise ValueError("Cannot plot an empty CDF")
    ensure_dir(output_path.parent)

    eps = epsilon if math.isfinite(epsilon) else 1.0
    upper = cdf.shift(eps)
    lower = cdf.shift(-eps)
    xs = np.asarray(cdf.xs)

    fig, ax = plt.subplots(figsize=(7.0, 4.0))
    ax.step(xs, cdf.ys, where="post", color="#1f77b4", label="Empirical CDF")
    ax.fill_between(xs, lower.ys, upper.ys, step="post", color="#1f77b4", alpha=0.2, label=f"DKW band (eps={eps:.3f})")
    if bounds is not None:
        lo, hi = bounds
        if lo is not None:
            ax.axvline(lo, color="#d62728", linestyle="--", label=f"Lower mean {lo:.3f}")
        if hi is not None:
            ax.axvline(hi, color="#2ca02c", linestyle="--", label=f"Upper mean {hi:.3f}")
    ax.set_xlabel("Value")
    ax.set_ylabel("Cumulative probability")
    ax.set_ylim(-0.02, 1.02)
    ax.set_title(title or f"Empirical CDF (n={cdf.n})")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="best")
    fig.tight_layout()
    fig.savefig(output_path, dpi=get_config().FIGURE_DPI)
    plt.close(fig)
    _LOGGER.debug("Saved CDF band figure to %s", output_path)
    return output_path


__all__ = ["plot_cdf_band"]
