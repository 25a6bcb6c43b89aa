"""Config loading with precedence: defaults < file < environment < CLI."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional

import yaml

from benford_engine.digits.modes import get_mode_spec
from benford_engine.exceptions import ConfigError, ConfigValidationError
from benford_engine.schema.analysis_config import AnalysisConfig
from benford_engine.utils.logging import get_logger

log = get_logger(__name__, component="config")

ENV_PREFIX = "BENFORD_"


def _cast_mode(value: Any) -> str:
    return get_mode_spec(value).name


CASTERS: Dict[str, Callable[[Any], Any]] = {
    "mode": _cast_mode,
    "significance_alpha": float,
    "sample_retention_count": int,
    "minimum_total_count": int,
}


def _load_yaml(path: Path) -> dict:
    with path.open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def load_config_file(path: Path) -> dict:
    """Read a YAML or JSON config file; an ``analysis:`` section is used when present."""
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"config file not found: {path}")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(path.read_text(encoding="utf-8"))
        else:
            data = _load_yaml(path)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"could not parse config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigValidationError(f"config {path} must contain a mapping")
    section = data.get("analysis", data)
    if not isinstance(section, dict):
        raise ConfigValidationError(f"'analysis' section in {path} must be a mapping")
    return section


def load_env_overrides(env: Optional[Mapping[str, str]] = None) -> dict:
    env = os.environ if env is None else env
    overrides = {}
    for name in CASTERS:
        raw = env.get(ENV_PREFIX + name.upper())
        if raw not in (None, ""):
            overrides[name] = raw
    return overrides


def _cast(values: Mapping[str, Any], origin: str) -> dict:
    unknown = set(values) - set(CASTERS)
    if unknown:
        raise ConfigValidationError(f"unknown config keys in {origin}: {sorted(unknown)}")
    cast = {}
    for key, raw in values.items():
        try:
            cast[key] = CASTERS[key](raw)
        except (TypeError, ValueError) as exc:
            raise ConfigValidationError(f"invalid value for {key} in {origin}: {raw!r}") from exc
    return cast


def load_config_with_precedence(
    config_path: Optional[Path] = None,
    cli_values: Optional[Mapping[str, Any]] = None,
    env: Optional[Mapping[str, str]] = None,
) -> AnalysisConfig:
    """Merge defaults, config file, BENFORD_* environment and explicit CLI values.

    CLI values that are None are treated as "not given".
    """
    merged: Dict[str, Any] = AnalysisConfig().to_dict()
    sources = ["defaults"]

    if config_path is not None:
        merged.update(_cast(load_config_file(config_path), str(config_path)))
        sources.append("file")

    env_values = load_env_overrides(env)
    if env_values:
        merged.update(_cast(env_values, "environment"))
        sources.append("environment")

    explicit = {k: v for k, v in (cli_values or {}).items() if v is not None}
    if explicit:
        merged.update(_cast(explicit, "cli"))
        sources.append("cli")

    config = AnalysisConfig.from_dict(merged)
    log.debug("Config resolved", extra={"mode": config.mode, "sources": sources})
    return config


__all__ = ["ENV_PREFIX", "load_config_file", "load_config_with_precedence", "load_env_overrides"]
