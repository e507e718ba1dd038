from __future__ import annotations
import logging
import os
from pathlib import Path

# Defaults
_DEFAULT_HISTORY_FILE = Path.home() / '.risp_history'
_DEFAULT_HISTORY_LENGTH = 1000
_DEFAULT_LOG_LEVEL = 'WARNING'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip()).expanduser()


def get_history_file() -> Path:
    return path_from_env('RISP_HISTORY_FILE', _DEFAULT_HISTORY_FILE)


def get_history_length() -> int:
    raw = os.environ.get('RISP_HISTORY_LENGTH', '')
    try:
        return int(raw)
    except ValueError:
        return _DEFAULT_HISTORY_LENGTH


def get_log_level() -> int:
    name = os.environ.get('RISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING
