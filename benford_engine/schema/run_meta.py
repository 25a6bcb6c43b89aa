"""Run metadata written alongside analysis artifacts."""

from __future__ import annotations

import json
import os
import platform
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from importlib import metadata
from pathlib import Path
from typing import Any, Dict, Optional

TRACKED_LIBRARIES = ("numpy", "scipy", "pandas", "typer", "rich", "PyYAML")


@dataclass
class ReproducibilityContext:
    library_versions: Dict[str, str]
    system_info: Dict[str, Any]


@dataclass
class RunMeta:
    run_id: str
    source: str
    config: Dict[str, Any]
    created_at: str
    reproducibility: Optional[ReproducibilityContext] = None
    result: Dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    def write_atomic(self, path: Path) -> None:
        """Write run_meta to a temporary file then move for atomicity."""
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        tmp_path.write_text(self.to_json())
        tmp_path.replace(path)

    @classmethod
    def from_json(cls, raw: str) -> "RunMeta":
        data = json.loads(raw)
        repro = data.get("reproducibility")
        if repro is not None:
            data["reproducibility"] = ReproducibilityContext(**repro)
        return cls(**data)

    @classmethod
    def capture_context(
        cls,
        run_id: str,
        source: str,
        config: Dict[str, Any],
        result: Optional[Dict[str, Any]] = None,
    ) -> "RunMeta":
        reproducibility = ReproducibilityContext(
            library_versions=_capture_lib_versions(),
            system_info={
                "os": platform.platform(),
                "cpu_count": os.cpu_count(),
                "python_version": platform.python_version(),
            },
        )
        return cls(
            run_id=run_id,
            source=source,
            config=config,
            created_at=datetime.now(timezone.utc).isoformat(),
            reproducibility=reproducibility,
            result=result or {},
        )


def _capture_lib_versions() -> Dict[str, str]:
    versions: Dict[str, str] = {}
    for lib in TRACKED_LIBRARIES:
        try:
            versions[lib] = metadata.version(lib)
        except metadata.PackageNotFoundError:
            versions[lib] = "missing"
    return versions


__all__ = ["ReproducibilityContext", "RunMeta"]
