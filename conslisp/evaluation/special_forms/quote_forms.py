from conslisp import SExpression, LispValue, EvaluatorFn
from conslisp.types.errors import InvalidArguments
from conslisp.types.environment import Environment


def quote_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    if len(tail) != 1:
        raise InvalidArguments("quote expects exactly 1 argument")
    return tail[0]
