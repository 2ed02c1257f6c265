"""Load tabular input files into DataFrames."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from normflow.exceptions import DataSourceError
from normflow.utils.logging import get_logger

log = get_logger(__name__, component="data_loader")

SUPPORTED_SUFFIXES = {".csv", ".json", ".parquet"}


def load_table(path: Path | str) -> pd.DataFrame:
    """Read a CSV, JSON (records) or Parquet file."""
    path = Path(path)
    if not path.exists():
        raise DataSourceError(f"Input file not found: {path}")
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DataSourceError(f"Unsupported file type '{suffix}'; expected one of {sorted(SUPPORTED_SUFFIXES)}")
    try:
        if suffix == ".csv":
            df = pd.read_csv(path)
        elif suffix == ".json":
            df = pd.read_json(path, orient="records")
        else:
            df = pd.read_parquet(path)
    except Exception as exc:
        raise DataSourceError(f"Failed to read {path}: {exc}") from exc
    log.info("Loaded table", extra={"n_samples": len(df), "column": list(df.columns)})
    return df


__all__ = ["SUPPORTED_SUFFIXES", "load_table"]
