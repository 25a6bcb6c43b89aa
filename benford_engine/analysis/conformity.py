"""Mean Absolute Deviation conformity scoring."""

from __future__ import annotations

from typing import Optional

import numpy as np

from benford_engine.analysis.models import ConformityVerdict, DistributionResult
from benford_engine.digits.modes import MadThresholds, get_mode_spec
from benford_engine.exceptions import InsufficientDataError

CLOSE_CONFORMITY = "Close conformity"
ACCEPTABLE_CONFORMITY = "Acceptable conformity"
MARGINAL_CONFORMITY = "Marginal conformity"
NONCONFORMITY = "Nonconformity"


def _require_sufficient(distribution: DistributionResult) -> None:
    if not distribution.is_sufficient:
        raise InsufficientDataError(
            f"Insufficient data for conformity: need >={distribution.minimum_total_count}, "
            f"got {distribution.total_count}"
        )


def mad_score(distribution: DistributionResult) -> float:
    """Average |observed - expected| over every bucket of the domain."""
    _require_sufficient(distribution)
    observed = np.array([b.observed_pct for b in distribution.buckets], dtype=float)
    expected = np.array([b.expected_pct for b in distribution.buckets], dtype=float)
    return float(np.mean(np.abs(observed - expected)))


def conformity_band(mad: float, thresholds: Optional[MadThresholds]) -> Optional[str]:
    """Map a MAD score to its qualitative band; None when the mode is uncalibrated."""
    if thresholds is None:
        return None
    if mad < thresholds.close:
        return CLOSE_CONFORMITY
    if mad < thresholds.acceptable:
        return ACCEPTABLE_CONFORMITY
    if mad < thresholds.marginal:
        return MARGINAL_CONFORMITY
    return NONCONFORMITY


def evaluate_conformity(distribution: DistributionResult) -> ConformityVerdict:
    mad = mad_score(distribution)
    spec = get_mode_spec(distribution.mode)
    return ConformityVerdict(mad_score=mad, band=conformity_band(mad, spec.mad_thresholds))


__all__ = [
    "ACCEPTABLE_CONFORMITY",
    "CLOSE_CONFORMITY",
    "MARGINAL_CONFORMITY",
    "NONCONFORMITY",
    "conformity_band",
    "evaluate_conformity",
    "mad_score",
]
