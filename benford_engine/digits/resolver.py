"""Leading significant digit resolution."""

from __future__ import annotations

import math
from decimal import ROUND_FLOOR, Decimal
from typing import Optional, Union

from benford_engine.digits.modes import FIRST_DIGIT, ModeSpec, get_mode_spec

# Exact binary values sit just below many decimal boundaries (0.3 is stored as
# 0.29999...), so truncation is applied after nudging up by this amount.
EPSILON = Decimal("1e-9")


def leading_digits(value: float, mode: Union[str, ModeSpec] = FIRST_DIGIT) -> Optional[int]:
    """Return the leading significant digit(s) of |value| for the given mode.

    The float is expanded to its exact decimal value and shifted by an exact
    power of ten into [10**(k-1), 10**k), so no rounding accumulates from
    repeated division. Returns None for zero, NaN, infinities and
    non-numeric input.

    Examples (first_digit):
        123.4 -> 1
        0.00456 -> 4
        -250 -> 2
        0 -> None
    """
    spec = get_mode_spec(mode)
    try:
        magnitude = abs(float(value))
    except (TypeError, ValueError, OverflowError):
        return None
    if magnitude == 0.0 or not math.isfinite(magnitude):
        return None

    exact = Decimal(magnitude)
    scaled = exact.scaleb(spec.digit_count - 1 - exact.adjusted())
    digits = int((scaled + EPSILON).to_integral_value(rounding=ROUND_FLOOR))
    if digits >= spec.upper:
        # within EPSILON of the next power of ten
        digits = spec.lower
    return digits


def leading_digit(value: float) -> Optional[int]:
    """First-digit shorthand for leading_digits."""
    return leading_digits(value, FIRST_DIGIT)


__all__ = ["EPSILON", "leading_digit", "leading_digits"]
