"""Typer CLI entrypoint with structured error handling."""

from __future__ import annotations

import os
import sys

import typer

from normflow.cli.commands.demo_map import demo_map
from normflow.cli.commands.fit_groups import fit_groups
from normflow.cli.commands.normalize import normalize
from normflow.utils.logging import configure_logging, get_logger

app = typer.Typer(help="normflow: min-max normalization and split-apply-fit workflows")


# negative numbers such as -1 are values, not options
app.command(context_settings={"ignore_unknown_options": True})(normalize)
app.command("demo-map")(demo_map)
app.command("fit-groups")(fit_groups)


log = get_logger(__name__, component="cli")


def main() -> None:
    configure_logging(component="cli", level=os.getenv("NORMFLOW_LOG_LEVEL", "INFO"))
    try:
        app()
    except KeyboardInterrupt:
        log.info("Interrupted")
        sys.exit(130)
    except Exception:
        log.exception("Unhandled exception")
        sys.exit(255)


if __name__ == "__main__":
    # Use sys.exit to ensure proper exit code propagation under raw python invocation
    sys.exit(main())
