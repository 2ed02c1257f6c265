"""Min-max normalization of numeric sequences.

``normalize`` rescales a sequence onto the closed interval [0, 1] using the
sequence's own minimum and maximum::

    y[i] = (x[i] - min(x)) / (max(x) - min(x))

The result has the same length and container kind as the input. Sequences
with fewer than two elements, non-numeric or non-finite values raise
``InvalidInput``; a sequence whose elements are all equal raises
``DegenerateRange``.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np
import pandas as pd

from normflow.exceptions import DegenerateRange, InvalidInput
from normflow.utils.logging import get_logger

log = get_logger(__name__, component="normalize")

MIN_LENGTH = 2


def _as_float_array(values: object) -> np.ndarray:
    if values is None or isinstance(values, (str, bytes)) or np.isscalar(values):
        raise InvalidInput(f"Expected a sequence of numbers, got {type(values).__name__}")
    try:
        arr = np.asarray(values)
        if arr.dtype.kind == "c":
            raise TypeError("complex values are not supported")
        if arr.dtype.kind != "f":
            arr = arr.astype(float)
    except (TypeError, ValueError) as exc:
        raise InvalidInput(f"Sequence must contain only numeric values: {exc}") from exc
    if arr.ndim != 1:
        raise InvalidInput(f"Sequence must be one-dimensional, got shape {arr.shape}")
    if arr.size < MIN_LENGTH:
        raise InvalidInput(
            f"Need at least {MIN_LENGTH} values to normalize, got {arr.size}"
        )
    if not np.isfinite(arr).all():
        raise InvalidInput("Sequence contains NaN or infinite values")
    return arr


def _rescale(arr: np.ndarray) -> np.ndarray:
    lo = arr.min()
    hi = arr.max()
    if hi == lo:
        raise DegenerateRange(f"All {arr.size} values equal {lo}; range is zero")
    with np.errstate(over="ignore"):
        span = hi - lo
    if not np.isfinite(span):
        # max - min overflowed; halving both ends keeps the ratio exact
        return (arr / 2 - lo / 2) / (hi / 2 - lo / 2)
    return (arr - lo) / span


def _wrap_like(template: object, scaled: np.ndarray):
    if isinstance(template, pd.Series):
        return pd.Series(scaled, index=template.index, name=template.name)
    if isinstance(template, np.ndarray):
        return scaled
    if isinstance(template, tuple):
        return tuple(scaled.tolist())
    return scaled.tolist()


def normalize(x: Sequence[float] | np.ndarray | pd.Series):
    """Return ``x`` min-max scaled onto [0, 1].

    Lists come back as lists and tuples as tuples. Arrays and Series keep a
    floating dtype (float32 stays float32) and anything else becomes float64;
    Series carry the original index and name.
    """
    arr = _as_float_array(x)
    scaled = _rescale(arr)
    log.debug("Normalized sequence", extra={"n_samples": int(arr.size)})
    return _wrap_like(x, scaled)


def normalize_frame(df: pd.DataFrame, columns: Iterable[str] | None = None) -> pd.DataFrame:
    """Normalize selected columns of ``df`` (all numeric columns by default).

    Columns not selected are passed through untouched. Errors from a column are
    re-raised with the column name prepended.
    """
    selected = list(columns) if columns is not None else list(df.select_dtypes("number").columns)
    missing = [c for c in selected if c not in df.columns]
    if missing:
        raise InvalidInput(f"Unknown columns: {missing}")

    out = df.copy()
    for column in selected:
        try:
            out[column] = normalize(df[column])
        except (InvalidInput, DegenerateRange) as exc:
            raise type(exc)(f"column '{column}': {exc}") from exc
    log.debug("Normalized frame", extra={"column": selected, "n_samples": len(df)})
    return out


__all__ = ["MIN_LENGTH", "normalize", "normalize_frame"]
