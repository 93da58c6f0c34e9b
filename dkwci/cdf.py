"""Empirical cumulative distribution function over a discrete support.

The `CDF` is a right-continuous step function built from a histogram. It maps
each distinct observed value to the fraction of observations less than or
equal to it. Instances are immutable: `shift` returns a new CDF that shares
the (read-only) support array and owns freshly computed cumulative
probabilities.

Examples
--------
>>> cdf = CDF({7: 2, 3: 0, 0: 1, 5: 1})
>>> cdf.xs.tolist(), cdf.ys.tolist()
([0.0, 3.0, 5.0, 7.0], [0.25, 0.25, 0.5, 1.0])
>>> cdf.expected_value()
4.75
>>> cdf.shift(0.25).ys.tolist()
[0.5, 0.5, 0.75, 1.0]
"""

from __future__ import annotations

from typing import Any, Self
import math

import numpy as np

from dkwci.histogram import HistogramLike, count, normalize_histogram


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


class CDF:
    """Empirical CDF of a histogram.

    Parameters
    ----------
    data:
        Histogram as a mapping from value to frequency, an iterable of
        ``(value, frequency)`` pairs, or ``None`` for an empty CDF.

    Attributes
    ----------
    xs:
        Ascending distinct support values.
    ys:
        Cumulative probabilities, non-decreasing, last element 1.0.
    n:
        Total number of observations.

    Notes
    -----
    The last cumulative probability is always exactly 1.0, even when float
    rounding of very large counts would leave it just below. A histogram whose
    frequencies are all zero has no defined CDF. Rather than dividing by zero,
    its ``ys`` places the terminal step at the maximum value and
    `expected_value` reports ``None``.
    """

    __slots__ = ("_xs", "_ys", "_n")

    def __init__(self, data: HistogramLike = None) -> None:
        pairs = normalize_histogram(data)
        xs = np.array([v for v, _ in pairs], dtype=float)
        freqs = np.array([f for _, f in pairs], dtype=float)
        n = count(f for _, f in pairs)
        if n > 0:
            ys = np.cumsum(freqs) / n
        else:
            ys = np.zeros(len(pairs), dtype=float)
        if ys.size:
            ys[-1] = 1.0
        self._xs = _readonly(xs)
        self._ys = _readonly(ys)
        self._n = n

    @classmethod
    def _from_arrays(cls, xs: np.ndarray, ys: np.ndarray, n: int) -> Self:
        obj = cls.__new__(cls)
        obj._xs = xs
        obj._ys = _readonly(ys)
        obj._n = n
        return obj

    @property
    def xs(self) -> np.ndarray:
        return self._xs

    @property
    def ys(self) -> np.ndarray:
        return self._ys

    @property
    def n(self) -> int:
        return self._n

    @property
    def support(self) -> tuple[float, float] | None:
        """``(min, max)`` of the support, or ``None`` when empty."""

        if self._xs.size == 0:
            return None
        return float(self._xs[0]), float(self._xs[-1])

    def shift(self, offset: float) -> CDF:
        """Return a copy with every cumulative probability moved by ``offset``.

        Values are clamped into [0, 1] and the final probability is pinned to
        1.0, since no mass can lie beyond the largest support value.
        """

        offset = float(offset)
        if math.isnan(offset):
            raise ValueError("offset must not be NaN")
        ys = np.clip(self._ys + offset, 0.0, 1.0)
        if ys.size:
            ys[-1] = 1.0
        return self._from_arrays(self._xs, ys, self._n)

    def expected_value(self) -> float | None:
        """Return ``sum(x_i * (F(x_i) - F(x_{i-1})))``, or ``None`` without data."""

        if self._xs.size == 0 or self._n <= 0:
            return None
        if self._xs.size == 1:
            return float(self._xs[0])
        masses = np.diff(self._ys, prepend=0.0)
        return float(np.dot(self._xs, masses))

    def __call__(self, x: float) -> float:
        """Evaluate the step function at ``x``."""

        idx = int(np.searchsorted(self._xs, float(x), side="right")) - 1
        if idx < 0:
            return 0.0
        return float(self._ys[idx])

    def __len__(self) -> int:
        return int(self._xs.size)

    def __repr__(self) -> str:
        return f"CDF(xs={self._xs.tolist()!r}, ys={self._ys.tolist()!r}, n={self._n})"

    def to_dict(self) -> dict[str, Any]:
        """Return the CDF as plain JSON-serializable data."""

        return {
            "xs": self._xs.tolist(),
            "ys": self._ys.tolist(),
            "n": self._n,
        }


__all__ = ["CDF"]
