"""Numeric token extraction from raw text or pre-parsed values.

Text is scanned once, left to right, for tokens of the form
``[sign] digits [, ddd]* [. digits]``. Anything else is ignored. Zero is
dropped (the leading digit is undefined there) and the sign is kept on the
sample but not used for digit analysis.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple

from benford_engine.utils.logging import get_logger

log = get_logger(__name__, component="extraction")

NUMBER_PATTERN = re.compile(
    r"""
    [+-]?
    (?:\d{1,3}(?:,\d{3})+(?!\d)   # grouped thousands: 1,234,567
      |\d+)                       # plain digits
    (?:\.\d+)?                    # optional fraction
    """,
    re.VERBOSE,
)

GROUPING_SEPARATOR = ","


@dataclass(frozen=True)
class NumericSample:
    value: float
    token: Optional[str] = None

    @property
    def magnitude(self) -> float:
        return abs(self.value)


def _is_usable(value: float) -> bool:
    return value != 0.0 and math.isfinite(value)


def iter_samples(text: str) -> Iterable[NumericSample]:
    for match in NUMBER_PATTERN.finditer(text):
        token = match.group(0)
        value = float(token.replace(GROUPING_SEPARATOR, ""))
        if _is_usable(value):
            yield NumericSample(value=value, token=token)


def extract_samples(text: str) -> List[NumericSample]:
    """Return signed samples (with their source tokens) in order of appearance."""
    if not text:
        return []
    return list(iter_samples(text))


def extract_values(text: str) -> List[float]:
    """Return the absolute, non-zero numeric values found in ``text``.

    >>> extract_values("Revenue was 1,234,567 in 2023")
    [1234567.0, 2023.0]
    """
    return [sample.magnitude for sample in extract_samples(text)]


def coerce_samples(values: Iterable[Any]) -> Tuple[List[NumericSample], int]:
    """Convert pre-extracted values into samples.

    Returns the usable samples and the number of entries skipped because they
    were non-numeric, zero, NaN or infinite.
    """
    samples: List[NumericSample] = []
    skipped = 0
    for item in values:
        if isinstance(item, NumericSample):
            if _is_usable(item.value):
                samples.append(item)
            else:
                skipped += 1
            continue
        if isinstance(item, (bool, bytes)) or item is None:
            skipped += 1
            continue
        try:
            value = float(item.replace(GROUPING_SEPARATOR, "") if isinstance(item, str) else item)
        except (TypeError, ValueError, OverflowError):
            skipped += 1
            continue
        if not _is_usable(value):
            skipped += 1
            continue
        samples.append(NumericSample(value=value, token=item if isinstance(item, str) else None))
    if skipped:
        log.debug("Skipped non-usable values", extra={"skipped": skipped, "kept": len(samples)})
    return samples, skipped


__all__ = [
    "NUMBER_PATTERN",
    "NumericSample",
    "coerce_samples",
    "extract_samples",
    "extract_values",
    "iter_samples",
]
