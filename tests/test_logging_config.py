"""
日志配置测试
"""

import logging
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent))

from logging_config import (
    CONSOLE_HANDLER_NAME, FILE_HANDLER_NAME, resolve_log_path, setup_logging, teardown_logging,
)


@pytest.fixture(autouse=True)
def _clean_handlers(monkeypatch):
    monkeypatch.delenv("THREETRIOS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("THREETRIOS_LOG_FILE", raising=False)
    teardown_logging()
    yield
    teardown_logging()


def _ours():
    return [h for h in logging.getLogger().handlers
            if h.name in (FILE_HANDLER_NAME, CONSOLE_HANDLER_NAME)]


class TestSetupLogging:

    def test_writes_utf8_file(self, tmp_path):
        log_file = tmp_path / "logs" / "game.log"
        setup_logging(log_file=str(log_file))
        logging.getLogger("game.state").info("红方先手")
        for handler in _ours():
            handler.flush()
        assert "红方先手" in log_file.read_text(encoding="utf-8")

    def test_idempotent(self, tmp_path):
        log_file = str(tmp_path / "game.log")
        setup_logging(log_file=log_file)
        setup_logging(log_file=log_file, level="DEBUG")
        handlers = _ours()
        assert len(handlers) == 1
        assert handlers[0].level == logging.DEBUG

    def test_console_is_opt_in(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"))
        assert [h.name for h in _ours()] == [FILE_HANDLER_NAME]
        setup_logging(log_file=str(tmp_path / "a.log"), enable_console=True, console_level="ERROR")
        console = [h for h in _ours() if h.name == CONSOLE_HANDLER_NAME]
        assert console[0].level == logging.ERROR

    def test_env_overrides(self, tmp_path, monkeypatch):
        log_file = tmp_path / "env.log"
        monkeypatch.setenv("THREETRIOS_LOG_LEVEL", "warning")
        monkeypatch.setenv("THREETRIOS_LOG_FILE", str(log_file))
        setup_logging(level="DEBUG")
        handler = _ours()[0]
        assert handler.level == logging.WARNING
        assert Path(handler.baseFilename) == log_file

    def test_unknown_level_falls_back_to_info(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"), level="chatty")
        assert _ours()[0].level == logging.INFO


class TestHelpers:

    def test_relative_path_is_anchored_to_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert resolve_log_path("x/y.log") == tmp_path / "x" / "y.log"
        assert resolve_log_path(None) == tmp_path / "logs" / "threetrios.log"

    def test_teardown_counts_removed(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"), enable_console=True)
        assert teardown_logging() == 2
        assert _ours() == []
