"""Error taxonomy for confidence interval computation.

All errors derive from `ConfidenceIntervalError`, which is itself a
`ValueError`, so callers may catch broadly or narrowly.
"""

from __future__ import annotations


class ConfidenceIntervalError(ValueError):
    """Base class for all invalid-input errors raised by dkwci."""


class InvalidConfidenceLevel(ConfidenceIntervalError):
    """Confidence level is missing, non-numeric, or outside [0.5, 1.0]."""


class InvalidDataValue(ConfidenceIntervalError):
    """A histogram value is not a finite number."""


class InvalidFrequency(ConfidenceIntervalError):
    """A histogram frequency is negative or not an integer."""


__all__ = [
    "ConfidenceIntervalError",
    "InvalidConfidenceLevel",
    "InvalidDataValue",
    "InvalidFrequency",
]
