import pytest

from risp.interpreter import Interpreter
from risp.types.environment import EnvironmentStack


@pytest.fixture
def interpreter():
    """Fresh interpreter, so no definitions leak between tests."""
    return Interpreter()


@pytest.fixture
def env_stack():
    return EnvironmentStack()


@pytest.fixture
def run(interpreter):
    """Evaluate every expression in a source string, returning the last value."""
    return interpreter.eval


@pytest.fixture
def isolated_history(tmp_path, monkeypatch):
    # Keep the REPL from touching the real ~/.risp_history
    monkeypatch.setenv("RISP_HISTORY_FILE", str(tmp_path / "history"))
