from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.types.errors import InvalidArguments
from conslisp.types.environment import Environment


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (do a b ...)
    Evaluates every argument in order and returns the value of the second.
    """
    if len(tail) < 2:
        raise InvalidArguments("do requires at least 2 arguments")
    results = [evaluate_fn(e) for e in tail]
    return results[1]
