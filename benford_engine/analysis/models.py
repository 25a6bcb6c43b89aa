"""Shared result models for Benford analysis."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Dict, Literal, Optional, Tuple

AnalysisStatus = Literal["ok", "insufficient_data"]

STATUS_OK = "ok"
STATUS_INSUFFICIENT_DATA = "insufficient_data"

FAILS_TO_REJECT = "fails to reject conformity"
REJECTS = "rejects conformity"


@dataclass(frozen=True)
class DigitBucket:
    digit: int
    count: int
    expected_pct: float
    observed_pct: Optional[float] = None
    difference: Optional[float] = None
    samples: Tuple[float, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "digit": self.digit,
            "count": self.count,
            "observed_pct": self.observed_pct,
            "expected_pct": self.expected_pct,
            "difference": self.difference,
            "samples": list(self.samples),
        }


@dataclass(frozen=True)
class DistributionResult:
    mode: str
    status: AnalysisStatus
    total_count: int
    buckets: Tuple[DigitBucket, ...]
    minimum_total_count: int

    @property
    def is_sufficient(self) -> bool:
        return self.status == STATUS_OK

    @property
    def counts(self) -> Tuple[int, ...]:
        return tuple(b.count for b in self.buckets)

    def bucket(self, digit: int) -> DigitBucket:
        for b in self.buckets:
            if b.digit == digit:
                return b
        raise KeyError(digit)


@dataclass(frozen=True)
class ConformityVerdict:
    mad_score: float
    band: Optional[str]


@dataclass(frozen=True)
class GoodnessOfFitResult:
    chi_squared: float
    degrees_of_freedom: int
    p_value: float
    significance_alpha: float
    passed: bool

    @property
    def verdict(self) -> str:
        return FAILS_TO_REJECT if self.passed else REJECTS


@dataclass(frozen=True)
class BenfordAnalysisResult:
    """Single handoff object for presentation and transport layers.

    Callers must check ``status`` before trusting the statistics: when it is
    ``insufficient_data`` the conformity and goodness-of-fit fields are None.
    """

    status: AnalysisStatus
    distribution: DistributionResult
    significance_alpha: float
    conformity: Optional[ConformityVerdict] = None
    goodness_of_fit: Optional[GoodnessOfFitResult] = None
    skipped_count: int = 0
    message: Optional[str] = None

    @property
    def mode(self) -> str:
        return self.distribution.mode

    @property
    def total_count(self) -> int:
        return self.distribution.total_count

    @property
    def buckets(self) -> Tuple[DigitBucket, ...]:
        return self.distribution.buckets

    @property
    def mad_score(self) -> Optional[float]:
        return self.conformity.mad_score if self.conformity else None

    @property
    def conformity_band(self) -> Optional[str]:
        return self.conformity.band if self.conformity else None

    @property
    def chi_squared(self) -> Optional[float]:
        return self.goodness_of_fit.chi_squared if self.goodness_of_fit else None

    @property
    def degrees_of_freedom(self) -> Optional[int]:
        return self.goodness_of_fit.degrees_of_freedom if self.goodness_of_fit else None

    @property
    def p_value(self) -> Optional[float]:
        return self.goodness_of_fit.p_value if self.goodness_of_fit else None

    @property
    def goodness_of_fit_verdict(self) -> Optional[str]:
        return self.goodness_of_fit.verdict if self.goodness_of_fit else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status,
            "mode": self.mode,
            "total_count": self.total_count,
            "minimum_total_count": self.distribution.minimum_total_count,
            "skipped_count": self.skipped_count,
            "buckets": [b.to_dict() for b in self.buckets],
            "mad_score": self.mad_score,
            "conformity_band": self.conformity_band,
            "chi_squared": self.chi_squared,
            "degrees_of_freedom": self.degrees_of_freedom,
            "p_value": self.p_value,
            "significance_alpha": self.significance_alpha,
            "goodness_of_fit_verdict": self.goodness_of_fit_verdict,
            "message": self.message,
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


__all__ = [
    "AnalysisStatus",
    "BenfordAnalysisResult",
    "ConformityVerdict",
    "DigitBucket",
    "DistributionResult",
    "FAILS_TO_REJECT",
    "GoodnessOfFitResult",
    "REJECTS",
    "STATUS_INSUFFICIENT_DATA",
    "STATUS_OK",
]
