"""Chi-squared goodness-of-fit test against the Benford table."""

from __future__ import annotations

import numpy as np
from scipy import stats

from benford_engine.analysis.models import DistributionResult, GoodnessOfFitResult
from benford_engine.exceptions import InsufficientDataError, InvariantViolationError

DEFAULT_ALPHA = 0.05


def expected_counts(distribution: DistributionResult) -> np.ndarray:
    return np.array([b.expected_pct for b in distribution.buckets], dtype=float) * distribution.total_count


def chi_squared_statistic(observed: np.ndarray, expected: np.ndarray) -> float:
    """Pearson statistic; every expected count must be positive and finite."""
    if observed.shape != expected.shape:
        raise InvariantViolationError("observed and expected counts differ in shape")
    if not np.all(np.isfinite(expected)) or np.any(expected <= 0):
        raise InvariantViolationError("expected counts must be finite and > 0")
    return float(np.sum((observed - expected) ** 2 / expected))


def chi_squared_test(distribution: DistributionResult, significance_alpha: float = DEFAULT_ALPHA) -> GoodnessOfFitResult:
    """Test observed bucket counts against Benford with N - 1 degrees of freedom."""
    if not distribution.is_sufficient:
        raise InsufficientDataError(
            f"Insufficient data for chi-squared: need >={distribution.minimum_total_count}, "
            f"got {distribution.total_count}"
        )
    observed = np.array(distribution.counts, dtype=float)
    statistic = chi_squared_statistic(observed, expected_counts(distribution))
    dof = len(distribution.buckets) - 1
    p_value = float(stats.chi2.sf(statistic, dof))
    return GoodnessOfFitResult(
        chi_squared=statistic,
        degrees_of_freedom=dof,
        p_value=p_value,
        significance_alpha=significance_alpha,
        passed=p_value >= significance_alpha,
    )


__all__ = ["DEFAULT_ALPHA", "chi_squared_statistic", "chi_squared_test", "expected_counts"]
