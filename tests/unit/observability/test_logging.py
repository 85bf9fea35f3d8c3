"""Unit tests for structlog configuration and get_logger."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from teamsync.config.settings import EngineSettings
from teamsync.observability import configure_from_settings, configure_logging, get_logger


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    def test_sets_root_level_from_string(self) -> None:
        configure_logging("warning")
        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_string_falls_back_to_info(self) -> None:
        configure_logging("chatty")
        assert logging.getLogger().level == logging.INFO

    def test_installs_single_handler(self) -> None:
        configure_logging(logging.DEBUG)
        configure_logging(logging.DEBUG)
        assert len(logging.getLogger().handlers) == 1

    def test_json_rendering(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.INFO, json=True)
        get_logger("teamsync.test").info("query.derived", total=3, filtered=1)
        line = capsys.readouterr().err.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "query.derived"
        assert payload["total"] == 3
        assert payload["level"] == "info"
        assert payload["logger"] == "teamsync.test"
        assert "timestamp" in payload

    def test_console_rendering(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.INFO)
        get_logger("teamsync.test").info("hello", view="tasks")
        output = capsys.readouterr().err
        assert "hello" in output
        assert "view=tasks" in output

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(logging.INFO, json=True)
        get_logger("teamsync.test").debug("hidden")
        assert "hidden" not in capsys.readouterr().err



class TestConfigureFromSettings:
    def test_applies_level_and_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_from_settings(EngineSettings(log_level="warning", log_json=True))
        assert logging.getLogger().level == logging.WARNING
        log = get_logger("teamsync.test")
        log.info("quiet")
        log.warning("feed.built", rows=2)
        lines = capsys.readouterr().err.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["feed.built"]

    def test_console_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_from_settings(EngineSettings())
        assert logging.getLogger().level == logging.INFO
        get_logger("teamsync.test").info("hello", view="users")
        assert "view=users" in capsys.readouterr().err

class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        with capture_logs() as logs:
            get_logger("x", view="teams").info("evt")
        assert logs == [{"event": "evt", "view": "teams", "log_level": "info"}]

    def test_unbound_logger(self) -> None:
        with capture_logs() as logs:
            get_logger().warning("careful", n=1)
        assert logs == [{"event": "careful", "n": 1, "log_level": "warning"}]
