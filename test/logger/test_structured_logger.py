"""Tests for the structured logger and the timing decorator."""

import json
import logging

import pytest

from symcalc.logger import StructuredLogger, session_logger
from symcalc.logger.decorators import log_execution_time


class TestStructuredLogger:
    def test_text_format_appends_fields(self, capsys):
        logger = StructuredLogger(name="symcalc.test.text")
        logger.info("Registry built", functions=42)
        out = capsys.readouterr().out
        assert "[INFO]" in out
        assert "Registry built" in out
        assert "functions=42" in out
        assert f"session:{logger.get_session_id()}" in out

    def test_json_format(self, capsys):
        logger = StructuredLogger(name="symcalc.test.json", json_format=True)
        logger.warning("Invalid rule", function="f", reason="missing target")
        record = json.loads(capsys.readouterr().out.strip())
        assert record["level"] == "WARNING"
        assert record["message"] == "Invalid rule"
        assert record["function"] == "f"
        assert record["session_id"] == logger.get_session_id()

    def test_reserved_field_names_are_prefixed(self, capsys):
        logger = StructuredLogger(name="symcalc.test.reserved", json_format=True)
        logger.info("Starting", args=["x"], name="sin")
        record = json.loads(capsys.readouterr().out.strip())
        assert record["_args"] == ["x"]
        assert record["_name"] == "sin"

    def test_disabled_level_is_skipped(self, capsys):
        logger = StructuredLogger(name="symcalc.test.level", level=logging.WARNING)
        logger.debug("hidden")
        logger.info("hidden too")
        assert capsys.readouterr().out == ""
        assert not logger.is_enabled_for(logging.DEBUG)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "symcalc.log"
        logger = StructuredLogger(name="symcalc.test.file", log_file=str(log_file))
        logger.error("Something failed", code="X")
        assert "Something failed" in log_file.read_text()

    def test_unwritable_log_file_keeps_console(self, tmp_path, capsys):
        logger = StructuredLogger(
            name="symcalc.test.badfile", log_file=str(tmp_path / "missing" / "x.log")
        )
        logger.info("still logging")
        assert "still logging" in capsys.readouterr().out

    def test_session_logger_is_shared(self):
        from symcalc.logger import session_logger as again

        assert again is session_logger


class TestLogExecutionTime:
    def test_returns_result(self):
        @log_execution_time
        def double(value):
            return value * 2

        assert double(21) == 42
        assert double.__name__ == "double"

    def test_reraises(self):
        @log_execution_time
        def broken():
            raise ValueError("boom")

        with pytest.raises(ValueError, match="boom"):
            broken()
