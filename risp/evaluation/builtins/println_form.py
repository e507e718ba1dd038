from risp.evaluation.apply import EvaluatorFn, evaluate_arguments
from risp.reader.nodes import ASTNode
from risp.types.environment import EnvironmentStack
from risp.types.value import Value, to_display_string


def println_form(
    arguments: list[ASTNode], env_stack: EnvironmentStack, evaluate_fn: EvaluatorFn
) -> Value:
    """Print space-separated display forms of the arguments followed by newline; returns them as a list."""
    values = evaluate_arguments(arguments, env_stack, evaluate_fn)
    print(" ".join(to_display_string(v) for v in values))
    return values
