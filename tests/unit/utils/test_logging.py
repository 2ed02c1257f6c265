import io
import json
import logging

import pytest

from normflow.utils.logging import configure_logging, get_logger, resolve_level


@pytest.fixture
def restore_root():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_output_includes_context(restore_root):
    stream = io.StringIO()
    configure_logging(run_id="run-1", component="test", stream=stream)
    get_logger("normflow.tests").info("hello", extra={"n_samples": 3})
    payload = json.loads(stream.getvalue().strip())
    assert payload["message"] == "hello"
    assert payload["level"] == "INFO"
    assert payload["run_id"] == "run-1"
    assert payload["component"] == "test"
    assert payload["n_samples"] == 3
    assert payload["timestamp"].endswith("Z")


def test_level_names_are_accepted(restore_root):
    stream = io.StringIO()
    configure_logging(level="warning", stream=stream)
    get_logger("normflow.tests").info("dropped")
    assert stream.getvalue() == ""


def test_unknown_level_raises():
    with pytest.raises(ValueError):
        resolve_level("chatty")
