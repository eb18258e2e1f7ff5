from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.types.errors import InvalidArguments
from conslisp.types.environment import Environment
from conslisp.types.operators import BinaryOp, BinaryPred, SpecialForm
from conslisp.types.persistent_list import PersistentList
from conslisp.types.symbol import Symbol


def type_name(value: LispValue) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Symbol):
        return "symbol"
    if isinstance(value, PersistentList):
        return "list"
    if isinstance(value, SpecialForm):
        return "special-form"
    if isinstance(value, BinaryOp):
        return "binary-op"
    if isinstance(value, BinaryPred):
        return "binary-pred"
    raise TypeError(f"Not a conslisp value: {value!r}")


def typeof_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) != 1:
        raise InvalidArguments("typeof expects exactly 1 argument")
    return type_name(evaluate_fn(tail[0]))
