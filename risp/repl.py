"""Interactive RISP shell. Uses cmd as backend."""

from __future__ import annotations

import cmd
import logging
from types import ModuleType
from typing import Optional

from termcolor import colored

from risp.config import get_history_file, get_history_length
from risp.errors import RispError
from risp.evaluation.builtins import BUILTIN_SIGNATURES
from risp.interpreter import Interpreter
from risp.reader.parser import parse
from risp.reader.tokenizer import tokenize
from risp.types.value import to_display_string

readline: Optional[ModuleType]
try:
    # REPL history support, not available on every platform.
    import readline
except ImportError:
    readline = None

logger = logging.getLogger(__name__)

SHELL_COMMANDS = ("help", "exit", "EOF")


def format_error(error: BaseException) -> str:
    """Debug form of an error, highlighted when writing to a terminal."""
    text = repr(error) if isinstance(error, RispError) else f"{type(error).__name__}: {error}"
    return colored(text, "red", attrs=["bold"])


class Shell(cmd.Cmd):
    """RISP read-eval-print loop."""
    intro = "Welcome to RISP 🎉\n"
    prompt = "> "

    def __init__(self, interpreter: Interpreter | None = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()

    def preloop(self):
        if readline is None:
            return
        history = get_history_file()
        if history.exists():
            try:
                readline.read_history_file(history)
            except OSError as e:
                logger.warning("could not read history file %s: %s", history, e)

    def postloop(self):
        if readline is None:
            return
        history = get_history_file()
        readline.set_history_length(get_history_length())
        try:
            readline.write_history_file(history)
        except OSError as e:
            logger.warning("could not write history file %s: %s", history, e)

    def onecmd(self, line):
        # Only a bare command word is a shell command; RISP names such as
        # exit-code or help-text are evaluated
        command = line.strip()
        if command in SHELL_COMMANDS:
            return super().onecmd(command)
        if not command:
            return self.emptyline()
        self.default(line)
        return False

    def default(self, line):
        """Evaluates each expression on the line and prints its value."""
        try:
            nodes = parse(tokenize(line))
            for node in nodes:
                print(to_display_string(self.interpreter.evaluate(node)))
        except (RispError, RecursionError) as e:
            # cmd.Cmd exits on an uncaught exception; report and keep the session
            print(format_error(e))

    def do_help(self, arg):
        """Lists the builtin forms."""
        print("RISP builtins:")
        for signature in BUILTIN_SIGNATURES.values():
            print(f"  {signature}")
        print("Special forms: (if cond then else) (defn name [params] body) (list ...)")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits the shell."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits the shell."""
        return True
