import math

import numpy as np
import pytest

from benford_engine.analysis.distribution import build_distribution
from benford_engine.analysis.goodness_of_fit import chi_squared_statistic, chi_squared_test
from benford_engine.analysis.models import FAILS_TO_REJECT, REJECTS
from benford_engine.digits.modes import FIRST_TWO_DIGIT
from benford_engine.exceptions import InsufficientDataError, InvariantViolationError

N = 10_000


def _skewed_digits(skew: float) -> list[int]:
    """Benford counts with a ``skew`` share of the mass moved onto digit 9."""
    digits: list[int] = []
    for d in range(1, 10):
        count = round((1 - skew) * N * math.log10(1 + 1 / d))
        if d == 9:
            count += round(skew * N)
        digits.extend([d] * count)
    return digits


def test_statistic_matches_definition():
    dist = build_distribution(list(range(1, 10)) * 20)
    result = chi_squared_test(dist)
    expected = sum((b.count - b.expected_pct * 180) ** 2 / (b.expected_pct * 180) for b in dist.buckets)
    assert result.chi_squared == pytest.approx(expected)
    assert result.degrees_of_freedom == 8
    assert 0.0 <= result.p_value <= 1.0


def test_chi_squared_increases_with_skew():
    stats = [chi_squared_test(build_distribution(_skewed_digits(s))).chi_squared for s in (0.0, 0.05, 0.1, 0.2, 0.4)]
    assert all(a < b for a, b in zip(stats, stats[1:]))


def test_verdict_follows_alpha():
    conforming = chi_squared_test(build_distribution(_skewed_digits(0.0)))
    assert conforming.passed
    assert conforming.verdict == FAILS_TO_REJECT
    assert conforming.p_value >= 0.05

    skewed = chi_squared_test(build_distribution(_skewed_digits(0.2)), significance_alpha=0.01)
    assert not skewed.passed
    assert skewed.verdict == REJECTS
    assert skewed.significance_alpha == 0.01


def test_two_digit_degrees_of_freedom():
    digits = [10 + (i % 90) for i in range(900)]
    result = chi_squared_test(build_distribution(digits, FIRST_TWO_DIGIT))
    assert result.degrees_of_freedom == 89


def test_zero_expected_count_is_an_invariant_violation():
    with pytest.raises(InvariantViolationError):
        chi_squared_statistic(np.array([1.0, 2.0]), np.array([0.0, 3.0]))
    with pytest.raises(InvariantViolationError):
        chi_squared_statistic(np.array([1.0]), np.array([float("nan")]))
    with pytest.raises(InvariantViolationError):
        chi_squared_statistic(np.array([1.0, 2.0]), np.array([1.0]))


def test_insufficient_distribution_rejected():
    with pytest.raises(InsufficientDataError):
        chi_squared_test(build_distribution([1, 2]))
