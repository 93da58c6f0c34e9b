import math

import pytest

from dkwci.errors import (
    ConfidenceIntervalError,
    InvalidConfidenceLevel,
    InvalidDataValue,
    InvalidFrequency,
)
from dkwci.interval import (
    calculate_confidence_interval,
    dkw_epsilon,
    summarize_interval,
    validate_confidence_level,
)


@pytest.fixture
def ratings() -> dict[int, int]:
    return {1: 0, 2: 3, 3: 9, 4: 53, 5: 144}


@pytest.mark.parametrize("level", [0.45, 1.1, "text", None, True, float("nan"), float("inf"), 0.0])
def test_invalid_confidence_levels(level):
    with pytest.raises(InvalidConfidenceLevel):
        calculate_confidence_interval({}, level)


def test_confidence_level_is_not_a_data_error():
    assert not issubclass(InvalidConfidenceLevel, (InvalidDataValue, InvalidFrequency))
    assert issubclass(InvalidConfidenceLevel, ConfidenceIntervalError)


def test_confidence_level_accepts_numeric_strings():
    assert validate_confidence_level("0.95") == 0.95
    assert validate_confidence_level(0.5) == 0.5
    assert validate_confidence_level(1) == 1.0


def test_basic_usage(ratings):
    lower, upper = calculate_confidence_interval(ratings, 0.95)
    assert lower == pytest.approx(4.24, abs=5e-3)
    assert upper == pytest.approx(4.78, abs=5e-3)


def test_missing_confidence_level_raises(ratings):
    with pytest.raises(TypeError):
        calculate_confidence_interval(ratings)  # type: ignore[call-arg]
    with pytest.raises(TypeError):
        summarize_interval(ratings)  # type: ignore[call-arg]
    with pytest.raises(InvalidConfidenceLevel):
        calculate_confidence_interval(ratings, None)


@pytest.mark.parametrize("level", [0.5, 0.95, 1.0])
def test_negative_frequency_raises(level):
    data = {1: 0, 2: 3, 3: 9, 4: -1, 5: 144}
    with pytest.raises(ConfidenceIntervalError):
        calculate_confidence_interval(data, level)


def test_non_numeric_data_values_raise():
    with pytest.raises(ConfidenceIntervalError):
        calculate_confidence_interval({"text": 0, "text2": 1, 2: 3}, 0.95)


def test_empty_data_returns_undefined():
    assert calculate_confidence_interval({}, 0.95) == (None, None)


def test_all_zero_frequencies_return_undefined():
    assert calculate_confidence_interval({1: 0, 5: 0}, 0.95) == (None, None)


def test_single_value_gives_full_confidence():
    lower, upper = calculate_confidence_interval({12: 10}, 0.95)
    assert lower == pytest.approx(12)
    assert upper == pytest.approx(12)


def test_single_nonzero_value_with_zero_neighbours():
    lower, upper = calculate_confidence_interval({3: 0, 7: 1_000_000_000, 9: 0}, 0.95)
    assert lower == pytest.approx(7.0, abs=1e-3)
    assert upper == pytest.approx(7.0, abs=1e-3)


def test_small_sample_gives_maximum_uncertainty():
    lower, upper = calculate_confidence_interval({1: 1, 5: 0}, 0.95)
    assert lower == pytest.approx(1.0)
    assert upper == pytest.approx(5.0)


def test_large_sample_gives_small_interval():
    lower, upper = calculate_confidence_interval({1: 0, 5: 10_000_000}, 0.95)
    assert lower == pytest.approx(5.0, abs=5e-3)
    assert upper == pytest.approx(5.0, abs=5e-3)


def test_full_confidence_spans_support():
    lower, upper = calculate_confidence_interval({1: 4, 3: 2, 5: 7}, 1.0)
    assert lower == pytest.approx(1.0)
    assert upper == pytest.approx(5.0)


def test_higher_confidence_level_makes_interval_larger():
    data = {1: 0, 5: 1000}
    lo0, hi0 = calculate_confidence_interval(data, 0.80)
    lo1, hi1 = calculate_confidence_interval(data, 0.99)
    assert hi0 - lo0 < hi1 - lo1


def test_width_non_decreasing_in_confidence(ratings):
    widths = []
    for level in [0.5, 0.6, 0.8, 0.9, 0.95, 0.99, 0.999, 1.0]:
        lower, upper = calculate_confidence_interval(ratings, level)
        widths.append(upper - lower)
    assert all(a <= b for a, b in zip(widths, widths[1:]))


def test_larger_sample_shrinks_interval():
    widths = []
    for scale in [1, 10, 100, 1000]:
        lower, upper = calculate_confidence_interval({1: 1 * scale, 3: 2 * scale, 5: 1 * scale}, 0.95)
        widths.append(upper - lower)
    assert all(a >= b for a, b in zip(widths, widths[1:]))
    assert widths[0] > 3.0
    assert widths[-1] < 0.2


@pytest.mark.parametrize(
    "data",
    [
        {1: 0, 2: 3, 3: 9, 4: 53, 5: 144},
        {0: 1, 3: 0, 5: 1, 7: 2},
        {-10: 5, 0: 1, 10: 5},
        {1: 1, 5: 0},
        {12: 10},
    ],
)
@pytest.mark.parametrize("level", [0.5, 0.9, 0.95, 1.0])
def test_lower_bound_never_exceeds_upper(data, level):
    lower, upper = calculate_confidence_interval(data, level)
    assert lower <= upper


def test_inputs_are_not_mutated(ratings):
    before = dict(ratings)
    calculate_confidence_interval(ratings, 0.95)
    assert ratings == before


def test_dkw_epsilon():
    assert dkw_epsilon(209, 0.95) == pytest.approx(math.sqrt(math.log(40) / 418))
    assert dkw_epsilon(0, 0.95) == math.inf
    assert dkw_epsilon(10, 1.0) == math.inf


def test_summarize_interval(ratings):
    summary = summarize_interval(ratings, 0.95)
    lower, upper = calculate_confidence_interval(ratings, 0.95)
    assert summary["lower"] == lower
    assert summary["upper"] == upper
    assert summary["width"] == pytest.approx(upper - lower)
    assert summary["n"] == 209
    assert summary["confidence_level"] == 0.95
    assert summary["support_min"] == 1.0
    assert summary["support_max"] == 5.0
    assert summary["epsilon"] == pytest.approx(dkw_epsilon(209, 0.95))
    assert lower <= summary["mean"] <= upper


def test_summarize_interval_mean():
    summary = summarize_interval({0: 1, 3: 0, 5: 1, 7: 2}, 0.95)
    assert summary["mean"] == pytest.approx(4.75)


def test_summarize_empty_interval():
    summary = summarize_interval({}, 0.9)
    assert summary["lower"] is None and summary["upper"] is None
    assert summary["width"] is None
    assert summary["mean"] is None
    assert summary["epsilon"] is None
    assert summary["n"] == 0
    assert summary["support_min"] is None


def test_huge_data_value_is_a_data_error():
    with pytest.raises(InvalidDataValue):
        calculate_confidence_interval({10**400: 1, 1: 0}, 0.95)


def test_huge_frequency_is_a_data_error():
    with pytest.raises(ConfidenceIntervalError):
        calculate_confidence_interval({1: 0, 5: 10**400}, 0.95)


def test_confidence_range_read_from_config(monkeypatch, ratings):
    from dkwci import config as cfg

    monkeypatch.setattr(cfg, "_CONFIG_SINGLETON", cfg.Config(MIN_CONFIDENCE_LEVEL=0.9))
    with pytest.raises(InvalidConfidenceLevel):
        calculate_confidence_interval(ratings, 0.8)
    assert calculate_confidence_interval(ratings, 0.95)[0] is not None
