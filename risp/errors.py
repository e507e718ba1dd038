"""Error hierarchy for the RISP interpreter.

Every failure raised by the reader, the evaluator or the interpreter derives
from RispError. The repr of an error is its debug form, which is what the shell
prints when an evaluation fails.
"""

from __future__ import annotations

from typing import Any


class RispError(Exception):
    """ Base class for all RISP errors"""

    error_kind = "Error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.error_kind)
        self.message = message

    def __repr__(self) -> str:
        return self.error_kind


class RispParseError(RispError):
    """ Raised when a token sequence is not a valid RISP program"""

    error_kind = "ParseError"


class RispUnexpectedToken(RispParseError):
    """ Raised when the parser sees a token that cannot start or continue the current rule"""

    error_kind = "UnexpectedToken"

    def __init__(self, token: Any, message: str = ""):
        super().__init__(message or f"Unexpected token {token!r}")
        self.token = token

    def __repr__(self) -> str:
        return f"{self.error_kind}({self.token!r})"


class RispMissingToken(RispParseError):
    """ Raised when input ends before a required token"""

    error_kind = "MissingToken"


class RispUndefinedFunction(RispError):
    """ Raised when a call names a function that is not bound"""

    error_kind = "UndefinedFunction"

    def __init__(self, name: str):
        super().__init__(f"Undefined function {name}")
        self.name = name

    def __repr__(self) -> str:
        return f'{self.error_kind}("{self.name}")'


class RispNotAFunction(RispError):
    """ Raised when a bound value that is not a function is called"""

    error_kind = "NotAFunction"

    def __init__(self, name: str):
        super().__init__(f"{name} is not a function")
        self.name = name

    def __repr__(self) -> str:
        return f'{self.error_kind}("{self.name}")'


class RispArgumentError(RispError):
    """ Raised when a builtin is called with the wrong shape of arguments"""

    error_kind = "ArgumentError"


class RispTooFewArguments(RispError):
    """ Raised when a call does not supply the arguments a function needs"""

    error_kind = "TooFewArguments"


class RispTypeError(RispError):
    """ Raised when a value of the wrong runtime type is supplied"""

    error_kind = "TypeError"

    def __init__(self, expected: Any, actual: Any, message: str = ""):
        super().__init__(message or f"Expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual

    def __repr__(self) -> str:
        return f"{self.error_kind} {{ expected: {self.expected}, actual: {self.actual} }}"


class RispIOError(RispError):
    """ Raised when a source file cannot be read"""

    error_kind = "IOError"

    def __init__(self, kind: str, path: str | None = None):
        super().__init__(f"{kind}: {path}" if path else kind)
        self.kind = kind
        self.path = path

    def __repr__(self) -> str:
        return f"{self.error_kind}({self.kind})"
