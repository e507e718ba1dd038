"""Application engine for RISP.

Calls of user-defined functions go through `apply_function`, which owns the
arity check, argument evaluation and call-frame management. Builtins use
`evaluate_arguments` for their own left-to-right argument evaluation.
"""

from __future__ import annotations

import logging
from typing import Callable

from risp.errors import RispTooFewArguments
from risp.reader.nodes import ASTNode
from risp.types.environment import EnvironmentStack
from risp.types.function import Function
from risp.types.value import Value

logger = logging.getLogger(__name__)

# Evaluator function type, passed into builtins and the application engine
EvaluatorFn = Callable[[ASTNode, EnvironmentStack], Value]


def evaluate_arguments(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> list[Value]:
    """Evaluate argument expressions left to right in the current scope."""
    return [evaluate_fn(argument, env_stack) for argument in arguments]


def apply_function(
    fn: Function,
    arguments: list[ASTNode],
    env_stack: EnvironmentStack,
    evaluate_fn: EvaluatorFn,
) -> Value:
    """Call a user-defined function.

    - The argument count must equal the parameter count, otherwise
      RispTooFewArguments is raised before anything is evaluated.
    - Arguments are evaluated in the caller's scope.
    - A call frame binding the parameters is pushed for the body and popped
      afterwards, whether the body returns or raises.
    """
    if fn.arity != len(arguments):
        raise RispTooFewArguments(
            f"{fn.identifier} expects {fn.arity} argument(s), got {len(arguments)}"
        )

    values = evaluate_arguments(arguments, env_stack, evaluate_fn)
    logger.debug("calling %s with %s", fn.identifier, values)

    with env_stack.call_frame(dict(zip(fn.parameter_list, values))):
        return evaluate_fn(fn.body, env_stack)
