import logging
import os
import subprocess
import sys
import uuid
from pathlib import Path

import pytest
from fungi.logger.logger import logger, setup_logger

SRC_DIR = Path(__file__).resolve().parents[2] / "src"


@pytest.fixture
def logger_name():
    name = f"fungi.test.{uuid.uuid4().hex}"
    yield name
    logging.getLogger(name).handlers.clear()


def test_default_logger():
    assert logger.name == "fungi"
    assert logger.propagate is False
    assert len(logger.handlers) >= 1


def test_setup_logger_configures_once(logger_name):
    first = setup_logger(logger_name, level="info")
    assert first.level == logging.INFO
    assert len(first.handlers) == 1

    second = setup_logger(logger_name, level="error")
    assert second is first
    assert second.level == logging.INFO
    assert len(second.handlers) == 1


def test_setup_logger_custom_format(logger_name):
    configured = setup_logger(logger_name, level="DEBUG", format_string="%(message)s")
    formatter = configured.handlers[0].formatter
    record = logging.LogRecord(logger_name, logging.DEBUG, __file__, 1, "hi", None, None)
    assert formatter.format(record) == "hi"


def test_setup_logger_reads_environment(monkeypatch, logger_name):
    monkeypatch.setenv("FUNGI_LOG_LEVEL", "error")
    assert setup_logger(logger_name).level == logging.ERROR


def test_invalid_environment_level_falls_back(monkeypatch, logger_name):
    monkeypatch.setenv("FUNGI_LOG_LEVEL", "verbose")
    with pytest.warns(RuntimeWarning, match="invalid fungi logging settings"):
        configured = setup_logger(logger_name)
    assert configured.level == logging.WARNING


def test_import_with_invalid_environment_level():
    env = dict(os.environ)
    env["FUNGI_LOG_LEVEL"] = "verbose"
    env["PYTHONPATH"] = os.pathsep.join(
        p for p in (str(SRC_DIR), env.get("PYTHONPATH")) if p
    )
    result = subprocess.run(
        [
            sys.executable,
            "-c",
            "import fungi; print(fungi.find([1], lambda i, x: True))",
        ],
        env=env,
        capture_output=True,
        text=True,
    )
    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "(1, True)"
    assert "RuntimeWarning" in result.stderr
