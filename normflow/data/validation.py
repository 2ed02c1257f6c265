"""Schema checks for tabular input."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from normflow.exceptions import SchemaError


def require_columns(df: pd.DataFrame, columns: Iterable[str]) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise SchemaError(f"Missing required columns: {missing}")


def require_numeric(df: pd.DataFrame, column: str) -> None:
    require_columns(df, [column])
    if not pd.api.types.is_numeric_dtype(df[column]) or pd.api.types.is_bool_dtype(df[column]):
        raise SchemaError(f"Column '{column}' must be numeric, got {df[column].dtype}")


__all__ = ["require_columns", "require_numeric"]
