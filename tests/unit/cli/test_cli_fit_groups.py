import json

import pytest

pytest.importorskip("typer")
from typer.testing import CliRunner

from normflow.cli.errors import EXIT_DATA, EXIT_MODEL_FIT
from normflow.cli.main import app

runner = CliRunner()


def test_fit_groups_json(cars_csv):
    result = runner.invoke(app, ["fit-groups", str(cars_csv), "--group", "cyl", "--formula", "mpg ~ wt", "--json"])
    assert result.exit_code == 0, result.output
    groups = json.loads(result.stdout)["groups"]
    assert [g["nobs"] for g in groups] == [11, 7, 14]
    assert groups[0]["r_squared"] == pytest.approx(0.5086, abs=1e-3)


def test_fit_groups_table(cars_csv):
    result = runner.invoke(app, ["fit-groups", str(cars_csv)])
    assert result.exit_code == 0, result.output
    assert "mpg ~ wt by cyl" in result.stdout
    assert "0.4645" in result.stdout


def test_unknown_group_column_is_a_data_error(cars_csv):
    result = runner.invoke(app, ["fit-groups", str(cars_csv), "--group", "gear"])
    assert result.exit_code == EXIT_DATA


def test_missing_file_is_a_data_error(tmp_path):
    result = runner.invoke(app, ["fit-groups", str(tmp_path / "none.csv")])
    assert result.exit_code == EXIT_DATA


def test_bad_formula_is_a_model_fit_error(cars_csv):
    result = runner.invoke(app, ["fit-groups", str(cars_csv), "--formula", "mpg ~ horsepower"])
    assert result.exit_code == EXIT_MODEL_FIT


def test_group_without_residual_degrees_of_freedom_is_a_model_fit_error(tmp_path):
    path = tmp_path / "tiny.csv"
    path.write_text("g,x,y\n1,0.0,1.0\n1,1.0,3.0\n2,0.0,1.0\n2,1.0,2.0\n2,2.0,4.0\n")
    result = runner.invoke(app, ["fit-groups", str(path), "--group", "g", "--formula", "y ~ x", "--json"])
    assert result.exit_code == EXIT_MODEL_FIT


def test_json_output_is_strict_when_r_squared_is_undefined(tmp_path):
    path = tmp_path / "flat.csv"
    path.write_text("g,x,y\n1,0.0,2.0\n1,1.0,2.0\n1,2.0,2.0\n")
    result = runner.invoke(app, ["fit-groups", str(path), "--group", "g", "--formula", "y ~ x", "--json"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout, parse_constant=lambda name: pytest.fail(f"non-JSON constant {name}"))
    assert payload["groups"][0]["r_squared"] is None
