from typing import TextIO

from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.debug_utils.pprint import show
from conslisp.types.environment import Environment


def print_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
    out: TextIO,
) -> LispValue:
    """
    (print expr...)
    Evaluates each argument in order and writes its rendering on its own line.
    """
    for expr in tail:
        value = evaluate_fn(expr)
        out.write(show(value))
        out.write("\n")
    return True
