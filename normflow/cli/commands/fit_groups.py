"""Per-group OLS CLI wiring."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from normflow.cli.errors import handle_errors
from normflow.config.loader import load_config_with_precedence
from normflow.data import load_table, require_columns
from normflow.models import fit_by_group
from normflow.schema.run_config import RunConfig
from normflow.utils.logging import get_logger

console = Console()
log = get_logger(__name__, component="cli_fit_groups")

DEFAULTS = {"seed": 0, "group_column": "cyl", "formula": "mpg ~ wt"}
CASTERS = {"seed": int, "group_column": str, "formula": str}


@handle_errors
def fit_groups(
    path: Path = typer.Argument(..., help="CSV/JSON/Parquet file with the data to split"),
    config: Optional[Path] = typer.Option(None, "--config", help="Optional YAML/JSON config path"),
    group: Optional[str] = typer.Option(None, "--group", help="Column to split on"),
    formula: Optional[str] = typer.Option(None, "--formula", help="Model formula, e.g. 'mpg ~ wt'"),
    json_output: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """Fit a linear model on each split of a table and report R² per group."""

    merged = load_config_with_precedence(
        config_path=config,
        cli_values={"group_column": group, "formula": formula},
        defaults=DEFAULTS,
        casters=CASTERS,
    )
    cfg = RunConfig.from_dict(merged)

    df = load_table(path)
    require_columns(df, [cfg.group_column])
    summaries = fit_by_group(df, cfg.group_column, cfg.formula)

    if json_output:
        typer.echo(json.dumps({"groups": [s.to_dict() for s in summaries.values()]}, default=str, allow_nan=False))
        return

    table = Table(title=f"{cfg.formula} by {cfg.group_column}")
    table.add_column(cfg.group_column)
    table.add_column("n", justify="right")
    table.add_column("R²", justify="right")
    table.add_column("adj R²", justify="right")
    for key, summary in summaries.items():
        table.add_row(str(key), str(summary.nobs), f"{summary.r_squared:.4f}", f"{summary.adj_r_squared:.4f}")
    console.print(table)
