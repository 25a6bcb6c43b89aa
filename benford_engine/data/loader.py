"""Input loading for the CLI: plain text files and CSV columns."""

from __future__ import annotations

from pathlib import Path
from typing import List

import pandas as pd

from benford_engine.exceptions import DataSourceError, SchemaError
from benford_engine.utils.logging import get_logger

log = get_logger(__name__, component="data_loader")


def load_text(path: Path, encoding: str = "utf-8") -> str:
    path = Path(path)
    if not path.exists():
        raise DataSourceError(f"input file not found: {path}")
    try:
        return path.read_text(encoding=encoding, errors="replace")
    except OSError as exc:
        raise DataSourceError(f"could not read {path}: {exc}") from exc


def load_csv_column(path: Path, column: str, *, sep: str = ",") -> List[float]:
    """Return one CSV column as floats in file order; unparseable cells become NaN.

    Thousands separators (``1,234``) are accepted in quoted cells. NaN entries
    are left in place for the engine to skip and count.
    """
    path = Path(path)
    if not path.exists():
        raise DataSourceError(f"input file not found: {path}")
    try:
        df = pd.read_csv(path, sep=sep, dtype=str)
    except (OSError, pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
        raise DataSourceError(f"could not parse CSV {path}: {exc}") from exc
    if column not in df.columns:
        raise SchemaError(f"column '{column}' not in {path} (columns: {list(df.columns)})")
    cleaned = df[column].str.replace(",", "", regex=False).str.strip()
    series = pd.to_numeric(cleaned, errors="coerce")
    log.info("CSV column loaded", extra={"path": str(path), "column": column, "rows": len(series)})
    return series.astype(float).tolist()


__all__ = ["load_csv_column", "load_text"]
