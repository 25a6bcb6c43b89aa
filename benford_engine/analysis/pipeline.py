"""
End-to-end Benford analysis: extraction -> digit resolution -> distribution ->
MAD conformity and chi-squared goodness of fit.

Each call builds its result from scratch; nothing is shared or cached between
calls apart from the constant expected tables, so concurrent callers need no
locking.
"""

from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence, Union

from benford_engine.analysis.conformity import evaluate_conformity
from benford_engine.analysis.distribution import build_distribution
from benford_engine.analysis.errors import handle_insufficient_data
from benford_engine.analysis.goodness_of_fit import chi_squared_test
from benford_engine.analysis.models import STATUS_OK, BenfordAnalysisResult
from benford_engine.digits.resolver import leading_digits
from benford_engine.extraction.tokens import NumericSample, coerce_samples, extract_samples
from benford_engine.schema.analysis_config import AnalysisConfig
from benford_engine.utils.logging import get_logger
from benford_engine.utils.profiling import track_time

log = get_logger(__name__, component="pipeline")


def analyze_samples(
    samples: Sequence[NumericSample],
    config: Optional[AnalysisConfig] = None,
    *,
    skipped_count: int = 0,
    source: Optional[str] = None,
) -> BenfordAnalysisResult:
    """Run the digit tests over already-extracted samples."""
    config = config or AnalysisConfig()
    spec = config.mode_spec

    with track_time("benford_analysis") as timing:
        digits: List[int] = []
        values: List[float] = []
        for sample in samples:
            digit = leading_digits(sample.magnitude, spec)
            if digit is None:
                skipped_count += 1
                continue
            digits.append(digit)
            values.append(sample.value)

        distribution = build_distribution(
            digits,
            spec,
            values=values,
            sample_retention_count=config.sample_retention_count,
            minimum_total_count=config.minimum_total_count,
        )
        if not distribution.is_sufficient:
            return handle_insufficient_data(
                distribution,
                significance_alpha=config.significance_alpha,
                skipped_count=skipped_count,
                source=source,
            )

        result = BenfordAnalysisResult(
            status=STATUS_OK,
            distribution=distribution,
            significance_alpha=config.significance_alpha,
            conformity=evaluate_conformity(distribution),
            goodness_of_fit=chi_squared_test(distribution, config.significance_alpha),
            skipped_count=skipped_count,
        )

    log.info(
        "Benford analysis complete",
        extra={
            "mode": result.mode,
            "status": result.status,
            "total_count": result.total_count,
            "duration_ms": timing.duration_ms,
        },
    )
    return result


def analyze_text(text: str, config: Optional[AnalysisConfig] = None, *, source: Optional[str] = None) -> BenfordAnalysisResult:
    """Extract numeric tokens from raw text and analyze them."""
    return analyze_samples(extract_samples(text), config, source=source)


def analyze_values(values: Iterable[Any], config: Optional[AnalysisConfig] = None, *, source: Optional[str] = None) -> BenfordAnalysisResult:
    """Analyze a pre-extracted ordered sequence of numeric values."""
    samples, skipped = coerce_samples(values)
    return analyze_samples(samples, config, skipped_count=skipped, source=source)


def analyze(data: Union[str, Iterable[Any]], config: Optional[AnalysisConfig] = None, *, source: Optional[str] = None) -> BenfordAnalysisResult:
    """Dispatch raw text to the extractor and anything else to value coercion."""
    if isinstance(data, str):
        return analyze_text(data, config, source=source)
    return analyze_values(data, config, source=source)


__all__ = ["analyze", "analyze_samples", "analyze_text", "analyze_values"]
