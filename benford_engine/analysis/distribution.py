"""Single-pass aggregation of leading digits into per-digit buckets."""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Union

import numpy as np

from benford_engine.analysis.errors import has_minimum_samples
from benford_engine.analysis.models import (
    STATUS_INSUFFICIENT_DATA,
    STATUS_OK,
    DigitBucket,
    DistributionResult,
)
from benford_engine.digits.expected import expected_distribution
from benford_engine.digits.modes import FIRST_DIGIT, ModeSpec, get_mode_spec
from benford_engine.exceptions import InvariantViolationError

DEFAULT_SAMPLE_RETENTION = 20
DEFAULT_MINIMUM_TOTAL = 100


def build_distribution(
    digits: Sequence[int],
    mode: Union[str, ModeSpec] = FIRST_DIGIT,
    *,
    values: Optional[Sequence[float]] = None,
    sample_retention_count: int = DEFAULT_SAMPLE_RETENTION,
    minimum_total_count: int = DEFAULT_MINIMUM_TOTAL,
) -> DistributionResult:
    """Count resolved digits per bucket over the full domain of ``mode``.

    ``values`` (same length as ``digits``) are the original values; the first
    ``sample_retention_count`` per bucket are kept as drill-down evidence.
    Below ``minimum_total_count`` the result carries the insufficient_data
    status and no percentages.
    """
    spec = get_mode_spec(mode)
    if values is not None and len(values) != len(digits):
        raise InvariantViolationError(
            f"digits and values differ in length ({len(digits)} != {len(values)})"
        )

    counts: Dict[int, int] = {d: 0 for d in spec.domain}
    retained: Dict[int, List[float]] = {d: [] for d in spec.domain}
    for idx, digit in enumerate(digits):
        if not spec.contains(digit):
            raise InvariantViolationError(f"digit {digit!r} outside {spec.name} domain")
        counts[digit] += 1
        if values is not None and len(retained[digit]) < sample_retention_count:
            retained[digit].append(float(values[idx]))

    total = int(sum(counts.values()))
    expected = expected_distribution(spec)
    sufficient = has_minimum_samples(total, minimum_total_count)

    observed = np.zeros(spec.size, dtype=float)
    if sufficient and total > 0:
        observed = np.fromiter((counts[d] for d in spec.domain), dtype=float, count=spec.size) / total
    difference = observed - expected.as_array()

    buckets = []
    for i, digit in enumerate(spec.domain):
        buckets.append(
            DigitBucket(
                digit=digit,
                count=counts[digit],
                expected_pct=expected.probabilities[i],
                observed_pct=float(observed[i]) if sufficient else None,
                difference=float(difference[i]) if sufficient else None,
                samples=tuple(retained[digit]),
            )
        )

    return DistributionResult(
        mode=spec.name,
        status=STATUS_OK if sufficient else STATUS_INSUFFICIENT_DATA,
        total_count=total,
        buckets=tuple(buckets),
        minimum_total_count=minimum_total_count,
    )


__all__ = ["DEFAULT_MINIMUM_TOTAL", "DEFAULT_SAMPLE_RETENTION", "build_distribution"]
