"""Benford analysis engine."""

from benford_engine.analysis.models import (
    BenfordAnalysisResult,
    ConformityVerdict,
    DigitBucket,
    DistributionResult,
    GoodnessOfFitResult,
)
from benford_engine.analysis.pipeline import analyze, analyze_samples, analyze_text, analyze_values

__all__ = [
    "BenfordAnalysisResult",
    "ConformityVerdict",
    "DigitBucket",
    "DistributionResult",
    "GoodnessOfFitResult",
    "analyze",
    "analyze_samples",
    "analyze_text",
    "analyze_values",
]
