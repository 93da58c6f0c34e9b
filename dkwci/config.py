"""Centralized configuration defaults.

Defines immutable defaults for the accepted confidence level range, output
formatting and figure resolution so the library and the CLI agree on them.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Immutable configuration defaults for the project."""

    # Confidence levels
    DEFAULT_CONFIDENCE_LEVEL: float = 0.95
    MIN_CONFIDENCE_LEVEL: float = 0.5
    MAX_CONFIDENCE_LEVEL: float = 1.0

    # Output
    DEFAULT_OUTPUT_FORMAT: str = "table"
    FLOAT_PRECISION: int = 4

    # Figures
    FIGURE_DPI: int = 200


OUTPUT_FORMATS: list[str] = ["table", "markdown", "csv", "json"]


_CONFIG_SINGLETON: Optional[Config] = None


def get_config() -> Config:
    """Return a singleton `Config` instance."""

    global _CONFIG_SINGLETON
    if _CONFIG_SINGLETON is None:
        _CONFIG_SINGLETON = Config()
    return _CONFIG_SINGLETON
