"""Project-wide exception types."""

class BenfordEngineError(Exception):
    """Base exception for all engine errors."""


class DataSourceError(BenfordEngineError):
    """Raised when input data cannot be read or lacks the requested field."""


class InsufficientDataError(DataSourceError):
    """Raised when data does not meet minimum sample requirements."""


class ConfigError(BenfordEngineError):
    """Raised when configuration is missing or malformed."""


class ConfigValidationError(ConfigError):
    """Raised when validation fails for supplied configuration."""


class SchemaError(BenfordEngineError):
    """Raised when schema validation fails."""


class InvariantViolationError(BenfordEngineError):
    """Raised when an internal invariant of the analysis is broken."""
