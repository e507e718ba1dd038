# RISP: a small Lisp-like expression language.
#
# Pipeline: tokenize -> parse -> evaluate, against one EnvironmentStack that a
# long-lived Interpreter owns across calls.

__version__ = "0.1.0"

from risp.errors import (
    RispArgumentError,
    RispError,
    RispIOError,
    RispMissingToken,
    RispNotAFunction,
    RispParseError,
    RispTooFewArguments,
    RispTypeError,
    RispUndefinedFunction,
    RispUnexpectedToken,
)
from risp.reader.tokenizer import Token, TokenKind, tokenize
from risp.reader.parser import TokenStream, parse, parse_node
from risp.types.nil import Nil
from risp.types.function import Function
from risp.types.value import Type, Value, is_truthy, to_display_string, value_type, values_equal
from risp.types.environment import Environment, EnvironmentStack
from risp.evaluation.evaluator import evaluate
from risp.interpreter import Interpreter, parse_and_evaluate
