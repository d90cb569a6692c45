"""Unit tests for collapsesimulator logging configuration."""

from __future__ import annotations

import json
import logging
from unittest import mock

import collapsesimulator
from collapsesimulator.config import SimulationConfig
from collapsesimulator.core.simulation import Simulation
from collapsesimulator.logging_config import LOGGER_NAME, JsonFormatter, _to_level


def _get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


class TestSilentByDefault:
    """Tests that the library is silent by default."""

    def test_import_produces_no_log_output(self, capfd):
        """Importing collapsesimulator should not produce any log output."""
        import importlib

        importlib.reload(collapsesimulator)

        captured = capfd.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_logger_has_null_handler(self):
        """The logger should have a NullHandler by default."""
        logger = logging.getLogger(LOGGER_NAME)
        assert any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    def test_run_without_logging_is_silent(self, capfd, scripted_random):
        """A simulation run writes nothing when logging is not enabled."""
        Simulation(SimulationConfig(arrival_rate=1.0, simulation_ticks=5), random=scripted_random()).run()

        captured = capfd.readouterr()
        assert captured.err == ""


class TestEnableConsoleLogging:
    """Tests for enable_console_logging."""

    def test_sets_level_and_handler(self):
        collapsesimulator.enable_console_logging(level="DEBUG")

        logger = _get_logger()
        assert logger.level == logging.DEBUG
        assert any(type(h) is logging.StreamHandler for h in logger.handlers)

    def test_outputs_to_stderr(self, capfd):
        collapsesimulator.enable_console_logging(level="INFO")

        logging.getLogger(f"{LOGGER_NAME}.test").info("test message")

        assert "test message" in capfd.readouterr().err

    def test_repeated_calls_replace_handler(self):
        collapsesimulator.enable_console_logging(level="INFO")
        collapsesimulator.enable_console_logging(level="DEBUG")

        handlers = [h for h in _get_logger().handlers if not isinstance(h, logging.NullHandler)]
        assert len(handlers) == 1
        assert _get_logger().level == logging.DEBUG


class TestJsonLogging:
    """Tests for JSON output."""

    def test_formatter_outputs_json(self):
        record = logging.LogRecord(
            name=f"{LOGGER_NAME}.core", level=logging.INFO, pathname="", lineno=1,
            msg="hello %s", args=("world",), exc_info=None,
        )

        data = json.loads(JsonFormatter().format(record))

        assert data["level"] == "INFO"
        assert data["logger"] == f"{LOGGER_NAME}.core"
        assert data["message"] == "hello world"
        assert "timestamp" in data

    def test_json_console_output(self, capfd):
        collapsesimulator.enable_console_logging(level="INFO", json_output=True)

        logging.getLogger(f"{LOGGER_NAME}.test").info("json message")

        line = capfd.readouterr().err.strip().splitlines()[-1]
        assert json.loads(line)["message"] == "json message"


class TestConfigureFromEnv:
    """Tests for configure_from_env."""

    def test_no_env_does_nothing(self):
        with mock.patch.dict("os.environ", {}, clear=True):
            collapsesimulator.configure_from_env()

        handlers = [h for h in _get_logger().handlers if not isinstance(h, logging.NullHandler)]
        assert handlers == []

    def test_level_enables_console(self):
        with mock.patch.dict("os.environ", {"CS_LOGGING": "warning"}, clear=True):
            collapsesimulator.configure_from_env()

        assert _get_logger().level == logging.WARNING

    def test_json_flag_uses_json_formatter(self):
        with mock.patch.dict("os.environ", {"CS_LOGGING": "INFO", "CS_LOG_JSON": "1"}, clear=True):
            collapsesimulator.configure_from_env()

        assert any(isinstance(h.formatter, JsonFormatter) for h in _get_logger().handlers)

    def test_json_flag_without_level_does_nothing(self):
        with mock.patch.dict("os.environ", {"CS_LOG_JSON": "1"}, clear=True):
            assert collapsesimulator.configure_from_env() is None

        handlers = [h for h in _get_logger().handlers if not isinstance(h, logging.NullHandler)]
        assert handlers == []


class TestLevels:
    """Tests for level name parsing."""

    def test_to_level(self):
        assert _to_level("debug") == logging.DEBUG
        assert _to_level(logging.ERROR) == logging.ERROR
        assert _to_level("bogus") == logging.INFO


class TestSimulationLogs:
    """Tests for the engine's own log records."""

    def test_run_logs_start_and_finish(self, caplog, scripted_random):
        caplog.set_level(logging.INFO, logger=LOGGER_NAME)

        Simulation(SimulationConfig(arrival_rate=1.0, simulation_ticks=5), random=scripted_random()).run()

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Simulation started") for m in messages)
        assert any(m.startswith("Simulation finished") for m in messages)

    def test_empty_run_warns(self, caplog, scripted_random):
        caplog.set_level(logging.WARNING, logger=LOGGER_NAME)

        Simulation(SimulationConfig(arrival_rate=1.0, simulation_ticks=0), random=scripted_random()).run()

        assert any(r.levelno == logging.WARNING for r in caplog.records)
