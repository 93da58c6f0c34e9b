"""Distribution-free confidence intervals for the mean of a bounded variable.

The Dvoretzky–Kiefer–Wolfowitz inequality bounds how far an empirical CDF can
stray from the true CDF:

    P(sup_x |F_n(x) - F(x)| > eps) <= 2 exp(-2 n eps^2)

Solving for ``eps`` at confidence level ``p = 1 - alpha`` gives

    eps = sqrt(ln(2 / alpha) / (2 n))

With probability at least ``p`` the true CDF lies inside the band
``F_n ± eps``. Shifting the empirical CDF up moves probability mass towards
smaller values and yields the smallest mean consistent with the band; shifting
it down yields the largest.

References
----------
- Dvoretzky, A., Kiefer, J., & Wolfowitz, J. (1956). Asymptotic minimax
  character of the sample distribution function. Ann. Math. Statist.
- Massart, P. (1990). The tight constant in the DKW inequality. Ann. Probab.

Examples
--------
>>> lower, upper = calculate_confidence_interval({1: 0, 2: 3, 3: 9, 4: 53, 5: 144}, 0.95)
>>> round(lower, 2), round(upper, 2)
(4.24, 4.78)
"""

from __future__ import annotations

from typing import Any
import logging
import math
import numbers

from dkwci.cdf import CDF
from dkwci.config import get_config
from dkwci.errors import InvalidConfidenceLevel
from dkwci.histogram import HistogramLike


_LOGGER = logging.getLogger(__name__)


def validate_confidence_level(confidence_level: Any) -> float:
    """Return ``confidence_level`` as a float in [0.5, 1.0].

    Numeric strings are accepted. Raises `InvalidConfidenceLevel` otherwise.
    """

    if isinstance(confidence_level, str):
        try:
            level = float(confidence_level.strip())
        except ValueError:
            raise InvalidConfidenceLevel(
                f"The confidence level must be a number, got {confidence_level!r}"
            ) from None
    elif isinstance(confidence_level, numbers.Real) and not isinstance(confidence_level, bool):
        level = float(confidence_level)
    else:
        raise InvalidConfidenceLevel(
            f"The confidence level must be a number, got {confidence_level!r}"
        )

    config = get_config()
    lo, hi = config.MIN_CONFIDENCE_LEVEL, config.MAX_CONFIDENCE_LEVEL
    if not math.isfinite(level) or not (lo <= level <= hi):
        raise InvalidConfidenceLevel(
            f"The confidence level must be between {lo} and {hi}, got {confidence_level!r}"
        )
    return level


def dkw_epsilon(n: int, confidence_level: float) -> float:
    """Return the DKW band half-width for ``n`` observations.

    Returns ``inf`` when ``n`` is zero or the confidence level is 1.0; the
    band then spans [0, 1] everywhere.
    """

    alpha = 1.0 - float(confidence_level)
    if n <= 0 or alpha <= 0.0:
        return math.inf
    return math.sqrt(math.log(2.0 / alpha) / (2.0 * n))


def _shifted_bounds(cdf: CDF, epsilon: float) -> tuple[float | None, float | None]:
    upper_cdf = cdf.shift(epsilon)
    lower_cdf = cdf.shift(-epsilon)
    # Raising the CDF lowers the mean, so the upward shift gives the lower bound.
    return upper_cdf.expected_value(), lower_cdf.expected_value()


def calculate_confidence_interval(
    data: HistogramLike,
    confidence_level: Any,
) -> tuple[float | None, float | None]:
    """Calculate a confidence interval for the expected value.

    Parameters
    ----------
    data:
        Histogram mapping each possible value to its observed frequency. It
        must include the smallest and largest possible values even if their
        frequencies are zero.
    confidence_level:
        Confidence level between 0.5 and 1.0.

    Returns
    -------
    tuple
        ``(lower, upper)`` bounds, or ``(None, None)`` when the histogram
        holds no observations.

    Raises
    ------
    InvalidConfidenceLevel
        If ``confidence_level`` is not a number in [0.5, 1.0].
    InvalidDataValue, InvalidFrequency
        If the histogram is malformed.
    """

    level = validate_confidence_level(confidence_level)
    cdf = CDF(data)
    epsilon = dkw_epsilon(cdf.n, level)
    lower, upper = _shifted_bounds(cdf, epsilon)
    _LOGGER.debug(
        "n=%d confidence=%.4f epsilon=%.6g bounds=(%s, %s)",
        cdf.n,
        level,
        epsilon,
        lower,
        upper,
    )
    return lower, upper


def summarize_interval(
    data: HistogramLike,
    confidence_level: Any,
) -> dict[str, Any]:
    """Return the interval together with the quantities used to derive it.

    Keys: ``lower``, ``upper``, ``width``, ``mean``, ``epsilon``, ``n``,
    ``confidence_level``, ``support_min``, ``support_max``. Undefined entries
    are ``None``.
    """

    level = validate_confidence_level(confidence_level)
    cdf = CDF(data)
    epsilon = dkw_epsilon(cdf.n, level)
    lower, upper = _shifted_bounds(cdf, epsilon)
    support = cdf.support
    return {
        "lower": lower,
        "upper": upper,
        "width": (upper - lower) if lower is not None and upper is not None else None,
        "mean": cdf.expected_value(),
        "epsilon": epsilon if math.isfinite(epsilon) else None,
        "n": cdf.n,
        "confidence_level": level,
        "support_min": support[0] if support else None,
        "support_max": support[1] if support else None,
    }


__all__ = [
    "validate_confidence_level",
    "dkw_epsilon",
    "calculate_confidence_interval",
    "summarize_interval",
]
