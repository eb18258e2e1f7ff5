from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.types.errors import InvalidArguments
from conslisp.types.environment import Environment


def eval_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (eval expr)
    Evaluates `expr` to obtain a form, then evaluates that form.
    """
    if len(tail) != 1:
        raise InvalidArguments("eval expects exactly 1 argument")
    expr_to_eval = evaluate_fn(tail[0])
    return evaluate_fn(expr_to_eval)
