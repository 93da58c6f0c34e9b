"""Histogram validation, normalization and loading.

A histogram maps each observed value to the number of observations equal to
that value. It must include the smallest and largest *possible* values even
when their frequency is zero, otherwise the support of the derived CDF is
truncated and the resulting interval is too narrow.

Internally every histogram is normalized into an ascending list of
``(value, frequency)`` pairs so that nothing downstream depends on mapping
iteration order.

Examples
--------
>>> count({1: 0, 2: 4, 5: 3})
7
>>> normalize_histogram({5: 1, 1: 0, 3: 2})
[(1.0, 0), (3.0, 2), (5.0, 1)]
>>> parse_histogram_items(["1=0", "2=3"])
[(1.0, 0), (2.0, 3)]
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Union
import json
import math
import numbers
import warnings

from dkwci.errors import InvalidDataValue, InvalidFrequency

HistogramLike = Union[Mapping[Any, Any], Iterable[tuple[Any, Any]], None]


def count(data: Mapping[Any, int] | Iterable[int]) -> int:
    """Return the sum of all frequencies in ``data``.

    ``data`` may be a histogram mapping or a plain iterable of frequencies.
    No validation is performed.
    """

    if isinstance(data, Mapping):
        return sum(data.values())
    return sum(data)


def _is_real(x: Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


def validate_value(x: Any) -> float:
    """Return ``x`` as a float or raise `InvalidDataValue`."""

    if not _is_real(x):
        raise InvalidDataValue(f"Invalid data value: {x!r}")
    try:
        value = float(x)
    except OverflowError:
        raise InvalidDataValue(f"Invalid data value: {x!r}") from None
    if not math.isfinite(value):
        raise InvalidDataValue(f"Invalid data value: {x!r}")
    return value


def validate_frequency(f: Any) -> int:
    """Return ``f`` as a non-negative int or raise `InvalidFrequency`.

    Integral floats such as ``3.0`` are accepted; NaN, fractional values and
    integers too large to represent as a float are not.
    """

    if isinstance(f, numbers.Integral) and not isinstance(f, bool):
        freq = int(f)
    elif _is_real(f) and math.isfinite(float(f)) and float(f).is_integer():
        freq = int(f)
    else:
        raise InvalidFrequency(f"Invalid frequency: {f!r}")
    if freq < 0:
        raise InvalidFrequency(f"Invalid frequency: {f!r}")
    try:
        float(freq)
    except OverflowError:
        raise InvalidFrequency(f"Invalid frequency: {f!r}") from None
    return freq


def _merge_pairs(pairs: Iterable[tuple[float, int]]) -> list[tuple[float, int]]:
    merged: dict[float, int] = {}
    for value, freq in pairs:
        if value in merged:
            warnings.warn(
                f"Duplicate histogram value {value!r}; summing frequencies.",
                RuntimeWarning,
            )
            merged[value] += freq
        else:
            merged[value] = freq
    return sorted(merged.items())


def normalize_histogram(data: HistogramLike) -> list[tuple[float, int]]:
    """Validate ``data`` and return it as ascending ``(value, frequency)`` pairs.

    Parameters
    ----------
    data:
        A mapping from value to frequency, an iterable of ``(value,
        frequency)`` pairs, or ``None`` for an empty histogram. Values must be
        finite real numbers and frequencies non-negative integers.

    Raises
    ------
    InvalidDataValue
        If a value is not a finite real number.
    InvalidFrequency
        If a frequency is negative, fractional or not numeric.
    """

    if data is None:
        return []
    items = data.items() if isinstance(data, Mapping) else data
    pairs: list[tuple[float, int]] = []
    for item in items:
        try:
            raw_value, raw_freq = item
        except (TypeError, ValueError):
            raise InvalidDataValue(f"Expected a (value, frequency) pair, got {item!r}") from None
        pairs.append((validate_value(raw_value), validate_frequency(raw_freq)))
    return _merge_pairs(pairs)


def _parse_value(text: Any) -> Any:
    if isinstance(text, str):
        try:
            return float(text.strip())
        except ValueError:
            raise InvalidDataValue(f"Invalid data value: {text!r}") from None
    return text


def _parse_frequency(text: Any) -> Any:
    if isinstance(text, str):
        s = text.strip()
        try:
            return int(s)
        except ValueError:
            pass
        try:
            return float(s)
        except ValueError:
            raise InvalidFrequency(f"Invalid frequency: {text!r}") from None
    return text


def parse_histogram(data: HistogramLike) -> list[tuple[float, int]]:
    """Parse a histogram whose values and frequencies may be text.

    Intended for data decoded from JSON or the command line, where keys are
    strings. Distinct strings that parse to the same number (``"1"`` and
    ``"1.0"``) are merged by summing their frequencies.
    """

    if data is None:
        return []
    items = data.items() if isinstance(data, Mapping) else data
    parsed: list[tuple[Any, Any]] = []
    for item in items:
        try:
            raw_value, raw_freq = item
        except (TypeError, ValueError):
            raise InvalidDataValue(f"Expected a (value, frequency) pair, got {item!r}") from None
        parsed.append((_parse_value(raw_value), _parse_frequency(raw_freq)))
    return normalize_histogram(parsed)


def parse_histogram_items(items: Iterable[str]) -> list[tuple[float, int]]:
    """Parse ``VALUE=COUNT`` strings into a normalized histogram."""

    pairs: list[tuple[str, str]] = []
    for item in items:
        value, sep, freq = item.partition("=")
        if not sep:
            raise InvalidDataValue(f"Expected VALUE=COUNT, got {item!r}")
        pairs.append((value, freq))
    return parse_histogram(pairs)


def load_histogram(path: Path) -> list[tuple[float, int]]:
    """Load a histogram from a JSON file.

    The file holds either an object (``{"1": 0, "2": 3}``) or a list of
    ``[value, count]`` pairs.
    """

    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, (dict, list)):
        raise InvalidDataValue(f"Histogram file must hold a JSON object or list: {path}")
    return parse_histogram(data)


def histogram_from_samples(
    samples: Iterable[Any],
    support: tuple[Any, Any] | None = None,
) -> list[tuple[float, int]]:
    """Count raw observations into a normalized histogram.

    Parameters
    ----------
    samples:
        Observed values.
    support:
        Optional ``(minimum, maximum)`` possible values. Both are added with
        frequency zero when not observed, so the CDF covers the full support.

    Raises
    ------
    InvalidDataValue
        If a sample is not a finite number or lies outside ``support``.
    ValueError
        If ``support`` is reversed.
    """

    counts: Counter[float] = Counter(validate_value(x) for x in samples)
    if support is not None:
        lo, hi = validate_value(support[0]), validate_value(support[1])
        if lo > hi:
            raise ValueError(f"support minimum {lo} exceeds maximum {hi}")
        outside = [x for x in counts if x < lo or x > hi]
        if outside:
            raise InvalidDataValue(f"Samples outside support [{lo}, {hi}]: {sorted(outside)}")
        counts.setdefault(lo, 0)
        counts.setdefault(hi, 0)
    return sorted(counts.items())


__all__ = [
    "count",
    "validate_value",
    "validate_frequency",
    "normalize_histogram",
    "parse_histogram",
    "parse_histogram_items",
    "load_histogram",
    "histogram_from_samples",
]
