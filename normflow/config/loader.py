"""Layered configuration loading.

Precedence, lowest to highest: defaults < config file (YAML/JSON) <
environment variables (``<PREFIX><KEY>``) < explicit CLI values. A CLI value of
``None`` means "not supplied" and does not override lower layers.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

import yaml

from normflow.exceptions import ConfigValidationError
from normflow.utils.logging import get_logger

log = get_logger(__name__, component="config")

ENV_PREFIX = "NORMFLOW_"


def _load_yaml(path: Path) -> Dict[str, Any]:
    try:
        content = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ConfigValidationError(f"Invalid YAML in {path}: {exc}") from exc
    return content or {}


def _load_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigValidationError(f"Config file not found: {path}")
    suffix = path.suffix.lower()
    if suffix in {".yml", ".yaml"}:
        content = _load_yaml(path)
    elif suffix == ".json":
        try:
            content = json.loads(path.read_text())
        except json.JSONDecodeError as exc:
            raise ConfigValidationError(f"Invalid JSON in {path}: {exc}") from exc
    else:
        raise ConfigValidationError("Config file must be JSON or YAML")
    if not isinstance(content, dict):
        raise ConfigValidationError(f"Config file {path} must contain a mapping at the top level")
    return content


def _cast(key: str, value: Any, casters: Mapping[str, Callable[[Any], Any]]) -> Any:
    caster = casters.get(key)
    if caster is None or value is None:
        return value
    try:
        return caster(value)
    except (TypeError, ValueError) as exc:
        raise ConfigValidationError(f"Invalid value for '{key}': {value!r}") from exc


def load_config_with_precedence(
    config_path: Path | None,
    env_prefix: str = ENV_PREFIX,
    cli_values: Mapping[str, Any] | None = None,
    defaults: Mapping[str, Any] | None = None,
    casters: Mapping[str, Callable[[Any], Any]] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Dict[str, Any]:
    """Merge configuration layers and return a plain dict keyed like ``defaults``."""

    casters = casters or {}
    environ = os.environ if environ is None else environ
    merged: Dict[str, Any] = dict(defaults or {})
    sources: Dict[str, str] = {key: "default" for key in merged}

    if config_path is not None:
        for key, value in _load_file(Path(config_path)).items():
            merged[key] = _cast(key, value, casters)
            sources[key] = "file"

    for key in list(merged):
        env_key = f"{env_prefix}{key.upper()}"
        if env_key in environ:
            merged[key] = _cast(key, environ[env_key], casters)
            sources[key] = "env"

    for key, value in (cli_values or {}).items():
        if value is not None:
            merged[key] = value
            sources[key] = "cli"

    log.debug("Resolved configuration", extra={"sources": sources})
    return merged


__all__ = ["ENV_PREFIX", "load_config_with_precedence"]
