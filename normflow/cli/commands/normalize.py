"""Normalize CLI wiring."""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from normflow.cli.errors import handle_errors
from normflow.data import load_table, require_numeric
from normflow.exceptions import ConfigConflictError, ConfigValidationError
from normflow.normalize import normalize as normalize_values
from normflow.utils.logging import get_logger

log = get_logger(__name__, component="cli_normalize")


@handle_errors
def normalize(
    values: Optional[List[float]] = typer.Argument(None, help="Numbers to normalize; negatives such as -1 are accepted"),
    csv: Optional[Path] = typer.Option(None, "--csv", help="Read values from a CSV/JSON/Parquet file"),
    column: Optional[str] = typer.Option(None, "--column", help="Column to read when --csv is given"),
) -> None:
    """Min-max scale a sequence of numbers onto [0, 1] and print it as JSON."""

    if values and csv is not None:
        raise ConfigConflictError("Pass values or --csv, not both")
    if csv is not None:
        if not column:
            raise ConfigValidationError("--column is required with --csv")
        df = load_table(csv)
        require_numeric(df, column)
        source = df[column]
    else:
        source = list(values or [])

    result = normalize_values(source)
    log.info("Normalized values", extra={"n_samples": len(result), "column": column})
    typer.echo(json.dumps({"values": list(result)}))
