from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.types.errors import InvalidArguments, TypeMismatch
from conslisp.types.symbol import Symbol
from conslisp.types.environment import Environment


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Inserts or overwrites the binding and returns the bound value.
    """
    if len(tail) != 2:
        raise InvalidArguments("def requires exactly 2 arguments: (def name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise TypeMismatch(f"def first argument must be a symbol, got {name!r}")
    value = evaluate_fn(val_expr)
    env.define(name, value)
    return value
