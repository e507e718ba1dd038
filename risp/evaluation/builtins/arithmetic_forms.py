from risp.errors import RispTooFewArguments, RispTypeError
from risp.evaluation.apply import EvaluatorFn
from risp.reader.nodes import ASTNode
from risp.reader.tokenizer import INT64_MIN
from risp.types.environment import EnvironmentStack
from risp.types.value import Type, Value, value_type


def wrap_int64(number: int) -> int:
    """Two's complement wrap-around into the signed 64-bit Number range."""
    return (number - INT64_MIN) % 2**64 + INT64_MIN


def number_arguments(
    name: str,
    arguments: list[ASTNode],
    env_stack: EnvironmentStack,
    evaluate_fn: EvaluatorFn,
) -> list[int]:
    """Evaluate arguments in order, stopping at the first one that is not a number."""
    numbers: list[int] = []
    for argument in arguments:
        value = evaluate_fn(argument, env_stack)
        actual = value_type(value)
        if actual is not Type.NUMBER:
            raise RispTypeError(
                Type.NUMBER, actual, f"{name} requires all arguments to be Numbers"
            )
        numbers.append(value)

    if not numbers:
        raise RispTooFewArguments(f"{name} requires at least 1 argument")
    return numbers


def add_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    """(add n1 n2 ...)"""
    return wrap_int64(sum(number_arguments("add", arguments, env_stack, evaluate_fn)))


def subtract_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    """(subtract n1 n2 ...) folds from the left: n1 - n2 - ..."""
    first, *rest = number_arguments("subtract", arguments, env_stack, evaluate_fn)
    result = first
    for x in rest:
        result -= x
    return wrap_int64(result)
