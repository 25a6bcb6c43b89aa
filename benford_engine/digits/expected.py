"""Benford expected-distribution tables."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple, Union

import numpy as np

from benford_engine.digits.modes import FIRST_DIGIT, ModeSpec, get_mode_spec


@dataclass(frozen=True)
class ExpectedDistribution:
    """P(d) = log10(1 + 1/d) over one mode's digit domain."""

    mode: str
    digits: Tuple[int, ...]
    probabilities: Tuple[float, ...]

    def probability(self, digit: int) -> float:
        return self.probabilities[self.digits.index(digit)]

    def as_array(self) -> np.ndarray:
        return np.asarray(self.probabilities, dtype=float)


def benford_probability(digit: int) -> float:
    return math.log10(1 + 1 / digit)


@lru_cache(maxsize=None)
def _build(spec: ModeSpec) -> ExpectedDistribution:
    digits = spec.domain
    return ExpectedDistribution(
        mode=spec.name,
        digits=digits,
        probabilities=tuple(benford_probability(d) for d in digits),
    )


def expected_distribution(mode: Union[str, ModeSpec] = FIRST_DIGIT) -> ExpectedDistribution:
    """Return the (memoized, immutable) expected table for a mode."""
    return _build(get_mode_spec(mode))


__all__ = ["ExpectedDistribution", "benford_probability", "expected_distribution"]
