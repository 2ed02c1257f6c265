"""Map project exceptions to CLI exit codes."""

from __future__ import annotations

import functools
from typing import Callable, TypeVar

import typer

from normflow.exceptions import (
    ConfigError,
    DataSourceError,
    DegenerateRange,
    InvalidInput,
    MappingError,
    ModelFitError,
    NormalizationCheckError,
    SchemaError,
)
from normflow.utils.logging import get_logger

log = get_logger(__name__, component="cli")

F = TypeVar("F", bound=Callable[..., None])

EXIT_CONFIG = 1
EXIT_INVALID_INPUT = 2
EXIT_MODEL_FIT = 3
EXIT_DATA = 4


def handle_errors(func: F) -> F:
    """Wrap a command so known errors exit with a stable code instead of a traceback."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except ConfigError as exc:
            log.error(str(exc))
            raise typer.Exit(code=EXIT_CONFIG)
        except (InvalidInput, DegenerateRange, NormalizationCheckError, MappingError) as exc:
            log.error(f"Input validation failed: {exc}")
            raise typer.Exit(code=EXIT_INVALID_INPUT)
        except ModelFitError as exc:
            log.error(f"Model fitting failed: {exc}")
            raise typer.Exit(code=EXIT_MODEL_FIT)
        except (DataSourceError, SchemaError) as exc:
            log.error(f"Data validation failed: {exc}")
            raise typer.Exit(code=EXIT_DATA)

    return wrapper  # type: ignore[return-value]


__all__ = ["EXIT_CONFIG", "EXIT_DATA", "EXIT_INVALID_INPUT", "EXIT_MODEL_FIT", "handle_errors"]
