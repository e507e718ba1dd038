from risp.errors import RispArgumentError
from risp.evaluation.apply import EvaluatorFn
from risp.reader.nodes import ASTNode, Identifier
from risp.types.environment import EnvironmentStack
from risp.types.value import Value


def define_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    """
    (define name value)
    Binds in the innermost call frame when called inside a function body,
    otherwise globally. Returns the bound value.
    """
    match arguments:
        case [Identifier(name), value_node]:
            value = evaluate_fn(value_node, env_stack)
            env_stack.set(name, value)
            return value

    raise RispArgumentError("define requires a name and exactly one value")
