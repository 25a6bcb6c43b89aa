"""Insufficient data handling helpers for Benford analysis."""

from __future__ import annotations

from typing import Optional

from benford_engine.analysis.models import (
    STATUS_INSUFFICIENT_DATA,
    BenfordAnalysisResult,
    DistributionResult,
)
from benford_engine.utils.logging import get_logger

log = get_logger(__name__, component="analysis_errors")


def has_minimum_samples(sample_count: int, min_required: int) -> bool:
    """Return True when the sample count satisfies the minimum requirement."""

    return sample_count >= min_required


def handle_insufficient_data(
    distribution: DistributionResult,
    *,
    significance_alpha: float,
    skipped_count: int = 0,
    source: Optional[str] = None,
) -> BenfordAnalysisResult:
    """Build the explicit insufficient-data result; no statistics are attached."""

    required = distribution.minimum_total_count
    message = (
        f"Insufficient data for {distribution.mode} analysis: "
        f"need ≥{required}, got {distribution.total_count}"
    )
    extra = {
        "mode": distribution.mode,
        "required": required,
        "n_samples": distribution.total_count,
        "status": STATUS_INSUFFICIENT_DATA,
    }
    if source:
        extra["source"] = source
    log.warning("Skipping conformity tests due to insufficient data", extra=extra)

    return BenfordAnalysisResult(
        status=STATUS_INSUFFICIENT_DATA,
        distribution=distribution,
        significance_alpha=significance_alpha,
        skipped_count=skipped_count,
        message=message,
    )


__all__ = ["handle_insufficient_data", "has_minimum_samples"]
