from __future__ import annotations

import logging
import os
from pathlib import Path

from risp.errors import RispIOError
from risp.evaluation.evaluator import evaluate
from risp.reader.nodes import ASTNode
from risp.reader.parser import TokenStream
from risp.reader.tokenizer import lex, tokenize
from risp.types.environment import EnvironmentStack
from risp.types.nil import Nil
from risp.types.value import Value

logger = logging.getLogger(__name__)

# Names for the ways reading a source file can fail
_IO_ERROR_KINDS: dict[type[OSError], str] = {
    FileNotFoundError: "NotFound",
    PermissionError: "PermissionDenied",
    IsADirectoryError: "IsADirectory",
    NotADirectoryError: "NotADirectory",
}


class Interpreter:
    """
    Evaluates RISP code against one long-lived EnvironmentStack, so that
    `define` and `defn` persist between calls (for example across REPL lines).
    """

    def __init__(self):
        self.environment_stack: EnvironmentStack = EnvironmentStack()

    def evaluate(self, node: ASTNode) -> Value:
        return evaluate(node, self.environment_stack)

    def eval(self, code: str) -> Value:
        """Evaluate every expression in `code` in order and return the last value."""
        stream = TokenStream(lex(code))
        result: Value = Nil
        for node in stream.parse_all():
            result = self.evaluate(node)
        return result

    def evaluate_file(self, path: str | os.PathLike[str]) -> Value:
        """Read a UTF-8 source file and evaluate it like `eval`."""
        path = Path(path)
        logger.info("loading %s", path)
        try:
            code = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            raise RispIOError("InvalidData", str(path)) from e
        except OSError as e:
            kind = _IO_ERROR_KINDS.get(type(e), "Other")
            raise RispIOError(kind, str(path)) from e
        return self.eval(code)


def parse_and_evaluate(source: str, interpreter: Interpreter | None = None) -> Value:
    """Tokenize `source`, parse one expression from it and evaluate it."""
    if interpreter is None:
        interpreter = Interpreter()
    stream = TokenStream(tokenize(source))
    return interpreter.evaluate(stream.parse_node())
