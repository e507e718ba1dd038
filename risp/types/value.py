"""Runtime values of the RISP language.

RISP values are plain Python objects:

    - Number   -> int
    - String   -> str
    - Boolean  -> bool
    - List     -> list of values
    - Function -> risp.types.function.Function
    - Nil      -> risp.types.nil.Nil

n.b. bool is a subclass of int in Python, so every check here tests for bool
before int, and `values_equal` compares RISP types before comparing contents.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from risp.types.function import Function
from risp.types.nil import Nil, NilType

# Runtime value alias
Value = Any


class Type(Enum):
    NUMBER = "Number"
    STRING = "String"
    BOOLEAN = "Boolean"
    LIST = "List"
    FUNCTION = "Function"
    NIL = "Nil"

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return self.value


def value_type(value: Value) -> Type:
    """Return the RISP type tag of `value`."""
    if isinstance(value, bool):
        return Type.BOOLEAN
    if isinstance(value, int):
        return Type.NUMBER
    if isinstance(value, str):
        return Type.STRING
    if isinstance(value, list):
        return Type.LIST
    if isinstance(value, Function):
        return Type.FUNCTION
    if isinstance(value, NilType):
        return Type.NIL
    raise TypeError(f"{value!r} is not a RISP value")


def is_truthy(value: Value) -> bool:
    match value_type(value):
        case Type.NUMBER:
            return value > 0
        case Type.BOOLEAN:
            return value
        case Type.STRING | Type.LIST:
            return len(value) > 0
        case Type.FUNCTION:
            return True
    return False


def to_display_string(value: Value) -> str:
    """Human readable form, as printed by the REPL and `println`."""
    match value_type(value):
        case Type.BOOLEAN:
            return "true" if value else "false"
        case Type.NUMBER:
            return str(value)
        case Type.STRING:
            return value
        case Type.LIST:
            return f"({' '.join(to_display_string(v) for v in value)})"
        case Type.FUNCTION:
            return str(value)
    return "nil"


def values_equal(a: Value, b: Value) -> bool:
    # Recursively check equality, never treating true as 1
    if a is b:
        return True
    if value_type(a) != value_type(b):
        return False
    if isinstance(a, list):
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    return a == b


def is_nil(value: Value) -> bool:
    return value is Nil
