# tests/unit/logging/test_logger.py - v1
"""Tests for logging/logger.py - formatters and setup."""

from __future__ import annotations

import json
import logging

import pytest

from stylemorph.logging.context import clear_context, set_run_context, set_stage_context
from stylemorph.logging.logger import ROOT_LOGGER, JsonFormatter, TextFormatter, setup_logging


def _record(msg: str = "hello", **kwargs) -> logging.LogRecord:
    record = logging.LogRecord(
        name="stylemorph.pipeline", level=logging.INFO, pathname=__file__,
        lineno=1, msg=msg, args=(), exc_info=None,
    )
    for key, value in kwargs.items():
        setattr(record, key, value)
    return record


@pytest.fixture(autouse=True)
def _clean_context():
    clear_context()
    yield
    clear_context()
    logging.getLogger(ROOT_LOGGER).handlers.clear()


class TestJsonFormatter:
    def test_basic_fields(self):
        entry = json.loads(JsonFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["logger"] == "stylemorph.pipeline"
        assert entry["message"] == "hello"
        assert "context" not in entry

    def test_context_and_data(self):
        set_run_context("abcdef1234")
        set_stage_context("rewrite_document[0]")
        entry = json.loads(JsonFormatter().format(_record(data={"files": 2})))
        assert entry["context"] == {"run_id": "abcdef1234", "stage": "rewrite_document[0]"}
        assert entry["data"] == {"files": 2}


class TestTextFormatter:
    def test_plain(self):
        line = TextFormatter().format(_record())
        assert "[INFO    ]" in line
        assert line.endswith("- hello")

    def test_run_prefix(self):
        set_run_context("abcdef1234")
        set_stage_context("check_stylesheet")
        line = TextFormatter().format(_record())
        assert "[run abcdef12]" in line
        assert "(check_stylesheet)" in line


class TestSetupLogging:
    def test_console_only(self):
        setup_logging(level="DEBUG")
        root = logging.getLogger(ROOT_LOGGER)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_no_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger(ROOT_LOGGER).handlers) == 1

    def test_json_with_file(self, tmp_path):
        log_file = tmp_path / "app.log"
        setup_logging(log_format="json", log_file=log_file)
        root = logging.getLogger(ROOT_LOGGER)
        assert len(root.handlers) == 2
        assert all(isinstance(h.formatter, JsonFormatter) for h in root.handlers)

        logging.getLogger("stylemorph.test").info("written")
        for h in root.handlers:
            h.flush()
        assert json.loads(log_file.read_text().strip())["message"] == "written"
        for h in root.handlers:
            h.close()
