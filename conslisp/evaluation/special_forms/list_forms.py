"""List special forms: car, cdr and cons.

Each evaluates its operands before use. ``cons`` never copies: the new pair
shares the evaluated list as its tail.
"""

from conslisp import EvaluatorFn
from conslisp import SExpression, LispValue
from conslisp.debug_utils.pprint import show
from conslisp.types.errors import InvalidArguments, TypeMismatch
from conslisp.types.environment import Environment
from conslisp.types.persistent_list import EMPTY, Pair, PersistentList


def _evaluate_pair(name: str, tail: list[SExpression], evaluate_fn: EvaluatorFn) -> Pair:
    if len(tail) != 1:
        raise InvalidArguments(f"{name} requires exactly 1 argument")
    value = evaluate_fn(tail[0])
    if not isinstance(value, PersistentList):
        raise TypeMismatch(f"{name} expects a list, got {show(value)}")
    if value.is_empty():
        raise InvalidArguments(f"Cannot take {name} of an empty list")
    return value


def car_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    return _evaluate_pair("car", tail, evaluate_fn).head


def cdr_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    return _evaluate_pair("cdr", tail, evaluate_fn).tail


def cons_form(
    tail: list[SExpression], env: Environment, evaluate_fn: EvaluatorFn
) -> LispValue:
    """
    (cons a b)
    A non-list `b` is treated as the one-element list (b), so two scalars
    build a two-element list rather than a dotted pair.
    """
    if len(tail) != 2:
        raise InvalidArguments("cons requires exactly 2 arguments")
    head = evaluate_fn(tail[0])
    rest = evaluate_fn(tail[1])
    if not isinstance(rest, PersistentList):
        rest = EMPTY.cons(rest)
    return rest.cons(head)
