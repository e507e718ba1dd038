"""Core evaluator for the RISP interpreter.

Walks one AST node against an EnvironmentStack. Builtins are dispatched from
the BUILTINS table before user bindings are consulted; everything else that is
called must be a Function bound in the active scope.
"""

from __future__ import annotations

from risp.errors import RispNotAFunction, RispUndefinedFunction
from risp.evaluation.apply import apply_function
from risp.evaluation.builtins import BUILTINS
from risp.reader.nodes import (
    ASTNode,
    BooleanLiteral,
    CallExpression,
    FunctionDeclaration,
    Identifier,
    IfExpression,
    ListExpression,
    NumberLiteral,
    StringLiteral,
)
from risp.types.environment import EnvironmentStack
from risp.types.function import Function
from risp.types.nil import Nil
from risp.types.value import Value, is_truthy


def evaluate(node: ASTNode, env_stack: EnvironmentStack) -> Value:
    match node:
        case NumberLiteral(value) | BooleanLiteral(value) | StringLiteral(value):
            return value

        case Identifier(name):
            # Unbound identifiers are nil, not an error
            value = env_stack.get(name)
            return Nil if value is None else value

        case ListExpression(elements):
            return [evaluate(element, env_stack) for element in elements]

        case IfExpression(condition, when_true, when_false):
            if is_truthy(evaluate(condition, env_stack)):
                return evaluate(when_true, env_stack)
            return evaluate(when_false, env_stack)

        case FunctionDeclaration(identifier, parameter_list, body):
            function = Function.from_declaration(identifier, parameter_list, body)
            env_stack.set(identifier, function)
            return function

        case CallExpression(name, arguments):
            return evaluate_call_expression(name, arguments, env_stack)

    raise TypeError(f"Cannot evaluate {node!r}")


def evaluate_call_expression(
    name: str, arguments: list[ASTNode], env_stack: EnvironmentStack
) -> Value:
    builtin = BUILTINS.get(name)
    if builtin is not None:
        return builtin(arguments, env_stack, evaluate)

    head = env_stack.get(name)
    if head is None:
        raise RispUndefinedFunction(name)
    if not isinstance(head, Function):
        raise RispNotAFunction(name)
    return apply_function(head, arguments, env_stack, evaluate)
