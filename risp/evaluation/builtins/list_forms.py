"""List inspection and construction builtins.

All of these return new lists; a list value is never modified in place.
"""

from risp.errors import RispArgumentError, RispTypeError
from risp.evaluation.apply import EvaluatorFn, evaluate_arguments
from risp.reader.nodes import ASTNode
from risp.types.environment import EnvironmentStack
from risp.types.nil import Nil
from risp.types.value import Type, Value, is_nil, value_type


def _arguments(
    name: str,
    count: int,
    arguments: list[ASTNode],
    env_stack: EnvironmentStack,
    evaluate_fn: EvaluatorFn,
) -> list[Value]:
    if len(arguments) != count:
        raise RispArgumentError(f"{name} requires exactly {count} argument(s)")
    return evaluate_arguments(arguments, env_stack, evaluate_fn)


def _require_list(value: Value) -> list:
    actual = value_type(value)
    if actual is not Type.LIST:
        raise RispTypeError(Type.LIST, actual)
    return value


def car_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    """(car xs) -> first element of xs, nil when xs is empty"""
    [xs] = _arguments("car", 1, arguments, env_stack, evaluate_fn)
    xs = _require_list(xs)
    return xs[0] if xs else Nil


def cdr_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    """(cdr xs) -> every element of xs but the first"""
    [xs] = _arguments("cdr", 1, arguments, env_stack, evaluate_fn)
    return list(_require_list(xs)[1:])


def is_empty_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    [xs] = _arguments("is-empty", 1, arguments, env_stack, evaluate_fn)
    return len(_require_list(xs)) == 0


def is_nil_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    [value] = _arguments("is-nil", 1, arguments, env_stack, evaluate_fn)
    return is_nil(value)


def append_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    """(append xs value) -> xs with value added at the end"""
    xs, value = _arguments("append", 2, arguments, env_stack, evaluate_fn)
    return [*_require_list(xs), value]


def prepend_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    """(prepend xs value) -> xs with value added at the front"""
    xs, value = _arguments("prepend", 2, arguments, env_stack, evaluate_fn)
    return [value, *_require_list(xs)]
