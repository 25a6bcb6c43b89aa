"""CLI validation helpers."""

from __future__ import annotations

from typing import Optional

from benford_engine.exceptions import ConfigValidationError

GENERATOR_KINDS = ("benford", "uniform")


def require_positive(name: str, value: int | float) -> None:
    if value <= 0:
        raise ConfigValidationError(f"{name} must be > 0")


def validate_analyze_inputs(*, source: str, text: bool, column: Optional[str]) -> None:
    if not source.strip():
        raise ConfigValidationError("source is required")
    if text and column:
        raise ConfigValidationError("--column cannot be combined with --text")


def validate_generate_inputs(*, kind: str, count: int) -> None:
    if kind not in GENERATOR_KINDS:
        raise ConfigValidationError(f"kind must be one of {list(GENERATOR_KINDS)}")
    require_positive("count", count)


__all__ = ["GENERATOR_KINDS", "require_positive", "validate_analyze_inputs", "validate_generate_inputs"]
