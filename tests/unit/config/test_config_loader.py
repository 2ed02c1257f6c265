import json

import pytest

from normflow.config.loader import load_config_with_precedence
from normflow.exceptions import ConfigValidationError

DEFAULTS = {"seed": 1, "min_length": 2, "max_length": 10}
CASTERS = {"seed": int, "min_length": int, "max_length": int}


def test_defaults_when_nothing_else_is_given():
    merged = load_config_with_precedence(None, defaults=DEFAULTS, casters=CASTERS, environ={})
    assert merged == DEFAULTS


def test_file_overrides_defaults(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("seed: 5\nmax_length: 6\n")
    merged = load_config_with_precedence(path, defaults=DEFAULTS, casters=CASTERS, environ={})
    assert merged == {"seed": 5, "min_length": 2, "max_length": 6}


def test_env_overrides_file_and_is_cast(tmp_path):
    path = tmp_path / "run.json"
    path.write_text(json.dumps({"seed": 5}))
    merged = load_config_with_precedence(
        path,
        env_prefix="NORMFLOW_",
        defaults=DEFAULTS,
        casters=CASTERS,
        environ={"NORMFLOW_SEED": "11"},
    )
    assert merged["seed"] == 11


def test_cli_overrides_env_but_none_does_not():
    merged = load_config_with_precedence(
        None,
        cli_values={"seed": 3, "max_length": None},
        defaults=DEFAULTS,
        casters=CASTERS,
        environ={"NORMFLOW_SEED": "11", "NORMFLOW_MAX_LENGTH": "4"},
    )
    assert merged["seed"] == 3
    assert merged["max_length"] == 4


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("NORMFLOW_MIN_LENGTH", "3")
    merged = load_config_with_precedence(None, defaults=DEFAULTS, casters=CASTERS)
    assert merged["min_length"] == 3


def test_bad_cast_raises():
    with pytest.raises(ConfigValidationError, match="seed"):
        load_config_with_precedence(None, defaults=DEFAULTS, casters=CASTERS, environ={"NORMFLOW_SEED": "abc"})


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigValidationError, match="not found"):
        load_config_with_precedence(tmp_path / "nope.yaml", defaults=DEFAULTS)


def test_unknown_suffix_raises(tmp_path):
    path = tmp_path / "run.toml"
    path.write_text("seed = 1")
    with pytest.raises(ConfigValidationError):
        load_config_with_precedence(path, defaults=DEFAULTS)


def test_non_mapping_file_raises(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("- 1\n- 2\n")
    with pytest.raises(ConfigValidationError, match="mapping"):
        load_config_with_precedence(path, defaults=DEFAULTS)


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("seed: [1, 2\n")
    with pytest.raises(ConfigValidationError, match="Invalid YAML"):
        load_config_with_precedence(path, defaults=DEFAULTS)
