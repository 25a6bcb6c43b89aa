"""Synthetic datasets with known leading-digit behaviour."""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from benford_engine.digits.modes import FIRST_DIGIT, ModeSpec, get_mode_spec

# Magnitudes are spread over 10**-2 .. 10**5 so results do not hinge on one decade.
MIN_DECADE = -2
MAX_DECADE = 6


def _decades(rng: np.random.Generator, n: int) -> np.ndarray:
    return 10.0 ** rng.integers(MIN_DECADE, MAX_DECADE, size=n)


def benford_values(n: int, mode: Union[str, ModeSpec] = FIRST_DIGIT, seed: Optional[int] = None) -> np.ndarray:
    """Return ``n`` positive values whose leading digits follow Benford's Law.

    Mantissas are stratified over one log-decade (midpoint of each of ``n``
    equal strata), so every bucket count is within one of ``n * P(d)``. The
    seed only controls magnitudes and ordering.
    """
    if n < 0:
        raise ValueError("n must be >= 0")
    spec = get_mode_spec(mode)
    rng = np.random.default_rng(seed)
    strata = (np.arange(n, dtype=float) + 0.5) / max(n, 1)
    mantissas = 10.0 ** (spec.digit_count - 1 + strata)
    values = mantissas * _decades(rng, n)
    return rng.permutation(values)


def uniform_digit_values(n: int, mode: Union[str, ModeSpec] = FIRST_DIGIT, seed: Optional[int] = None) -> np.ndarray:
    """Return ``n`` values whose leading digit(s) are uniform over the mode's domain."""
    if n < 0:
        raise ValueError("n must be >= 0")
    spec = get_mode_spec(mode)
    rng = np.random.default_rng(seed)
    leading = rng.integers(spec.lower, spec.upper, size=n)
    # keep clear of the next digit so float scaling cannot carry over
    fraction = rng.uniform(0.0, 0.99, size=n)
    return (leading + fraction) * _decades(rng, n)


__all__ = ["benford_values", "uniform_digit_values"]
