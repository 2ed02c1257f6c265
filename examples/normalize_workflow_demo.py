"""Walk through the normalize / map / fit-per-group workflow.

This script demonstrates:
1. Normalizing a literal sequence and the guard on a single value
2. Mapping normalize over random sequences of lengths 2..10
3. Row-binding the results with an id column and checking the overall range
4. Fitting mpg ~ wt per cylinder group from a CSV and collecting R²

Usage:
    python examples/normalize_workflow_demo.py [path/to/mtcars.csv]
"""

from __future__ import annotations

import sys

from normflow import (
    InvalidInput,
    map_df,
    normalize,
    r_squared_by_group,
    random_sequences,
)
from normflow.data import load_table


def run_demo(csv_path: str | None = None) -> None:
    print("normalize([1, 2, 3]) ->", normalize([1, 2, 3]))
    try:
        normalize([1])
    except InvalidInput as exc:
        print("normalize([1]) ->", exc)

    sequences = random_sequences(range(2, 11), seed=42)
    frame = map_df(sequences, normalize, id_column="id")
    print(f"\n{len(frame)} rows from {len(sequences)} sequences")
    print(frame.groupby("id", sort=False)["value"].agg(["count", "min", "max"]))
    print("overall range:", (frame["value"].min(), frame["value"].max()))

    if csv_path:
        cars = load_table(csv_path)
        print("\nR² of mpg ~ wt by cyl:")
        print(r_squared_by_group(cars, "cyl", "mpg ~ wt"))


if __name__ == "__main__":
    run_demo(sys.argv[1] if len(sys.argv) > 1 else None)
