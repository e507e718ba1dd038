import logging
from pathlib import Path

from risp import config


def test_history_file_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("RISP_HISTORY_FILE", str(tmp_path / "hist"))
    assert config.get_history_file() == tmp_path / "hist"


def test_history_file_default(monkeypatch):
    monkeypatch.delenv("RISP_HISTORY_FILE", raising=False)
    assert config.get_history_file() == Path.home() / ".risp_history"


def test_history_length(monkeypatch):
    monkeypatch.setenv("RISP_HISTORY_LENGTH", "50")
    assert config.get_history_length() == 50
    monkeypatch.setenv("RISP_HISTORY_LENGTH", "lots")
    assert config.get_history_length() == 1000


def test_log_level(monkeypatch):
    monkeypatch.setenv("RISP_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("RISP_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING
    monkeypatch.delenv("RISP_LOG_LEVEL")
    assert config.get_log_level() == logging.WARNING
