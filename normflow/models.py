"""Split-apply-fit helpers around statsmodels OLS.

Typical use, fitting ``mpg ~ wt`` per cylinder count and collecting R²::

    summaries = fit_by_group(cars, "cyl", "mpg ~ wt")
    r2 = r_squared_by_group(cars, "cyl", "mpg ~ wt")
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable

import pandas as pd
import statsmodels.formula.api as smf

from normflow.exceptions import ModelFitError, SchemaError
from normflow.mapping import map_dbl
from normflow.utils.logging import get_logger

log = get_logger(__name__, component="models")


def _finite_or_none(value: float) -> float | None:
    return value if math.isfinite(value) else None


@dataclass
class ModelSummary:
    formula: str
    r_squared: float
    adj_r_squared: float
    params: Dict[str, float]
    nobs: int
    group: Hashable | None = None
    result: Any = field(default=None, repr=False, compare=False)

    def to_dict(self) -> dict:
        return {
            "group": self.group,
            "formula": self.formula,
            "r_squared": _finite_or_none(self.r_squared),
            "adj_r_squared": _finite_or_none(self.adj_r_squared),
            "params": {name: _finite_or_none(value) for name, value in self.params.items()},
            "nobs": self.nobs,
        }


def split_frame(df: pd.DataFrame, column: str) -> Dict[Hashable, pd.DataFrame]:
    """Split ``df`` into sub-frames keyed by the values of ``column`` (sorted, NaN keys dropped)."""
    if column not in df.columns:
        raise SchemaError(f"Cannot split on missing column '{column}'")
    return {key: group for key, group in df.groupby(column, sort=True)}


def fit_ols(df: pd.DataFrame, formula: str, group: Hashable | None = None) -> ModelSummary:
    """Fit ordinary least squares for ``formula`` on ``df``."""
    if "~" not in formula:
        raise ModelFitError(f"Formula must have the form 'y ~ x', got '{formula}'")
    if df.empty:
        raise ModelFitError(f"Cannot fit '{formula}' on an empty frame (group={group!r})")
    try:
        result = smf.ols(formula, data=df).fit()
    except Exception as exc:
        raise ModelFitError(f"Failed to fit '{formula}' (group={group!r}): {exc}") from exc

    nobs = int(result.nobs)
    if result.df_resid <= 0:
        raise ModelFitError(
            f"Not enough observations to fit '{formula}' (group={group!r}): "
            f"{nobs} rows for {len(result.params)} parameters leaves no residual degrees of freedom"
        )

    return ModelSummary(
        formula=formula,
        r_squared=float(result.rsquared),
        adj_r_squared=float(result.rsquared_adj),
        params={str(name): float(value) for name, value in result.params.items()},
        nobs=nobs,
        group=group,
        result=result,
    )


def fit_by_group(df: pd.DataFrame, group_column: str, formula: str) -> Dict[Hashable, ModelSummary]:
    """Fit ``formula`` separately on each split of ``df`` by ``group_column``."""
    groups = split_frame(df, group_column)
    summaries = {key: fit_ols(frame, formula, group=key) for key, frame in groups.items()}
    log.info(
        "Fitted models per group",
        extra={"formula": formula, "group": group_column, "n_groups": len(summaries)},
    )
    return summaries


def r_squared_by_group(df: pd.DataFrame, group_column: str, formula: str) -> pd.Series:
    r2 = map_dbl(fit_by_group(df, group_column, formula), "r_squared")
    r2.index.name = group_column
    r2.name = "r_squared"
    return r2


__all__ = ["ModelSummary", "fit_by_group", "fit_ols", "r_squared_by_group", "split_frame"]
