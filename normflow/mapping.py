"""Apply a function over every element of a collection.

Three collectors are provided:

- ``map_list`` keeps results as-is (a list, or a dict when mapping over a dict),
- ``map_dbl`` coerces each result to a float,
- ``map_df`` row-binds results into a single DataFrame, optionally tagging each
  row with the identifier of the element it came from.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Hashable, Iterable, Iterator, Tuple, Union

import numpy as np
import pandas as pd

from normflow.exceptions import MappingError

Extractor = Union[Callable[[Any], Any], str]


def _keyed(items: Iterable[Any]) -> Iterator[Tuple[Hashable, Any]]:
    if isinstance(items, Mapping):
        yield from items.items()
    else:
        for position, item in enumerate(items, start=1):
            yield str(position), item


def _as_callable(func_or_key: Extractor) -> Callable[[Any], Any]:
    if callable(func_or_key):
        return func_or_key
    if not isinstance(func_or_key, str):
        raise MappingError(f"Expected a callable or attribute name, got {type(func_or_key).__name__}")
    key = func_or_key

    def _extract(item: Any) -> Any:
        if isinstance(item, Mapping):
            if key not in item:
                raise MappingError(f"Key '{key}' not found in mapping element")
            return item[key]
        if not hasattr(item, key):
            raise MappingError(f"Element of type {type(item).__name__} has no attribute '{key}'")
        return getattr(item, key)

    return _extract


def map_list(items: Iterable[Any], func: Extractor):
    """Return ``func`` applied to each element, preserving dict keys when given a dict."""
    fn = _as_callable(func)
    if isinstance(items, Mapping):
        return {key: fn(value) for key, value in items.items()}
    return [fn(item) for item in items]


def _to_float(value: Any, key: Hashable) -> float:
    if np.ndim(value) != 0:
        raise MappingError(f"Result for element {key!r} is not a scalar (shape {np.shape(value)})")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MappingError(f"Result for element {key!r} is not numeric: {value!r}") from exc


def map_dbl(items: Iterable[Any], func: Extractor):
    """Apply ``func`` (or extract an attribute/key) and coerce each result to float.

    Returns a float array, or a Series indexed by key when ``items`` is a dict.
    """
    fn = _as_callable(func)
    keyed = [(key, _to_float(fn(item), key)) for key, item in _keyed(items)]
    if isinstance(items, Mapping):
        return pd.Series([v for _, v in keyed], index=[k for k, _ in keyed], dtype=float)
    return np.array([v for _, v in keyed], dtype=float)


def _result_frame(result: Any, key: Hashable) -> pd.DataFrame:
    if isinstance(result, pd.DataFrame):
        return result.reset_index(drop=True)
    if isinstance(result, pd.Series):
        return result.reset_index(drop=True).to_frame(name=result.name if result.name is not None else "value")
    if isinstance(result, Mapping):
        if all(np.ndim(v) == 0 for v in result.values()):
            return pd.DataFrame([dict(result)])
        return pd.DataFrame(dict(result))
    if np.ndim(result) == 0:
        return pd.DataFrame({"value": [result]})
    if np.ndim(result) == 1:
        return pd.DataFrame({"value": list(result)})
    raise MappingError(f"Result for element {key!r} cannot be converted to rows")


def map_df(items: Iterable[Any], func: Extractor, id_column: str | None = None) -> pd.DataFrame:
    """Apply ``func`` to each element and row-bind the results into one DataFrame.

    When ``id_column`` is given, it is inserted as the first column and holds the
    source element's dict key, or its 1-based position as a string.
    """
    fn = _as_callable(func)
    frames = []
    for key, item in _keyed(items):
        frame = _result_frame(fn(item), key)
        if id_column is not None:
            if id_column in frame.columns:
                raise MappingError(f"id_column '{id_column}' collides with a result column")
            frame.insert(0, id_column, [key] * len(frame))
        frames.append(frame)

    if not frames:
        return pd.DataFrame(columns=[id_column] if id_column else [])
    return pd.concat(frames, ignore_index=True)


__all__ = ["map_df", "map_dbl", "map_list"]
