"""Command line entry point: run a RISP file, or start the REPL when no file is given."""

from __future__ import annotations

import argparse
import logging
import sys

from risp import __version__
from risp.config import get_log_level
from risp.errors import RispError
from risp.interpreter import Interpreter
from risp.repl import Shell, format_error


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="risp", description="RISP interpreter")
    parser.add_argument("filename", help="file to run (if empty, starts the REPL)", nargs="?")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    interpreter = Interpreter()

    if args.filename is not None:
        try:
            interpreter.evaluate_file(args.filename)
        except (RispError, RecursionError) as e:
            print(format_error(e))
            return 1
        return 0

    Shell(interpreter).cmdloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
