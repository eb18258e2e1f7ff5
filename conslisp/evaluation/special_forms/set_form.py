from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.types.errors import InvalidArguments, TypeMismatch
from conslisp.types.symbol import Symbol
from conslisp.types.environment import Environment


def set_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 2:
        raise InvalidArguments("set! requires exactly 2 arguments: (set! name value)")
    var_sym, val_expr = tail
    if not isinstance(var_sym, Symbol):
        raise TypeMismatch(f"set! first argument must be a symbol, got {var_sym!r}")
    value = evaluate_fn(val_expr)
    env.set(var_sym, value)

    return value


def get_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise InvalidArguments("get requires exactly 1 argument: (get name)")
    var_sym = tail[0]
    if not isinstance(var_sym, Symbol):
        raise TypeMismatch(f"get argument must be a symbol, got {var_sym!r}")
    return env.lookup(var_sym)
