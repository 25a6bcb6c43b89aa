"""Analysis configuration schema and validation."""

from __future__ import annotations

from dataclasses import dataclass, fields

from benford_engine.digits.modes import FIRST_DIGIT, DigitMode, get_mode_spec
from benford_engine.exceptions import ConfigValidationError


@dataclass(slots=True, frozen=True)
class AnalysisConfig:
    mode: DigitMode = FIRST_DIGIT
    significance_alpha: float = 0.05
    sample_retention_count: int = 20
    minimum_total_count: int = 100

    def __post_init__(self) -> None:
        object.__setattr__(self, "mode", get_mode_spec(self.mode).name)
        if not 0.0 < self.significance_alpha < 1.0:
            raise ConfigValidationError("significance_alpha must be in (0, 1)")
        if self.sample_retention_count < 0:
            raise ConfigValidationError("sample_retention_count must be >= 0")
        if self.minimum_total_count < 1:
            raise ConfigValidationError("minimum_total_count must be >= 1")

    @property
    def mode_spec(self):
        return get_mode_spec(self.mode)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_dict(cls, data: dict) -> "AnalysisConfig":
        unknown = set(data) - set(cls.field_names())
        if unknown:
            raise ConfigValidationError(f"unknown config keys: {sorted(unknown)}")
        return cls(**data)

    def to_dict(self) -> dict:
        return {
            "mode": self.mode,
            "significance_alpha": self.significance_alpha,
            "sample_retention_count": self.sample_retention_count,
            "minimum_total_count": self.minimum_total_count,
        }


__all__ = ["AnalysisConfig"]
