"""Binary operators and predicates.

Both operands arrive already evaluated. Integer/Integer pairs use signed
64-bit integer arithmetic with truncating division; any pair involving a
Float is computed in floating point. A zero divisor is always an error,
never an IEEE infinity or NaN.
"""

from __future__ import annotations

import math

from conslisp import LispValue
from conslisp.debug_utils.pprint import show
from conslisp.types.limits import INT64_MAX, INT64_MIN
from conslisp.types.errors import DivisionByZero, IntegerOverflow, TypeMismatch
from conslisp.types.operators import BinaryOp, BinaryPred


def is_integer(value: LispValue) -> bool:
    # bool is an int subclass but is not a conslisp Integer
    return isinstance(value, int) and not isinstance(value, bool)


def is_number(value: LispValue) -> bool:
    return is_integer(value) or isinstance(value, float)


def as_float(value: LispValue) -> float | None:
    """Numeric coercion used by the predicates; Bool counts as 1.0/0.0."""
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if is_number(value):
        return float(value)
    return None


# -------------------------------
# Arithmetic
# -------------------------------
def _checked(op: BinaryOp, result: int) -> int:
    if not INT64_MIN <= result <= INT64_MAX:
        raise IntegerOverflow(f"{op.spelling} result {result} does not fit in 64 bits")
    return result


def _truncating_div(x: int, y: int) -> int:
    q = abs(x) // abs(y)
    return q if (x < 0) == (y < 0) else -q


def _truncating_rem(x: int, y: int) -> int:
    r = abs(x) % abs(y)
    return -r if x < 0 else r


def integer_op(op: BinaryOp, x: int, y: int) -> int:
    match op:
        case BinaryOp.ADD:
            return _checked(op, x + y)
        case BinaryOp.SUB:
            return _checked(op, x - y)
        case BinaryOp.MUL:
            return _checked(op, x * y)
        case BinaryOp.DIV:
            if y == 0:
                raise DivisionByZero()
            return _checked(op, _truncating_div(x, y))
        case BinaryOp.MOD:
            if y == 0:
                raise DivisionByZero()
            if x == INT64_MIN and y == -1:
                # the paired quotient overflows, so the remainder is undefined too
                raise IntegerOverflow(f"{op.spelling} of {x} by -1")
            return _truncating_rem(x, y)
    raise TypeMismatch(f"{op.spelling} is not an integer operator")


def float_op(op: BinaryOp, x: float, y: float) -> float:
    match op:
        case BinaryOp.ADD:
            return x + y
        case BinaryOp.SUB:
            return x - y
        case BinaryOp.MUL:
            return x * y
        case BinaryOp.DIV:
            if y == 0.0:
                raise DivisionByZero()
            return x / y
        case BinaryOp.MOD:
            if y == 0.0:
                raise DivisionByZero()
            return math.fmod(x, y)
    raise TypeMismatch(f"{op.spelling} is not a float operator")


def apply_binary_op(op: BinaryOp, a: LispValue, b: LispValue) -> LispValue:
    if op is BinaryOp.SCONCAT:
        if isinstance(a, str) and isinstance(b, str):
            return a + b
        raise TypeMismatch(f"++ requires two strings, got {show(a)} and {show(b)}")

    if is_integer(a) and is_integer(b):
        return integer_op(op, a, b)
    if is_number(a) and is_number(b):
        return float_op(op, float(a), float(b))
    raise TypeMismatch(
        f"{op.spelling} requires numeric operands, got {show(a)} and {show(b)}"
    )


# -------------------------------
# Comparison
# -------------------------------
def apply_binary_pred(pred: BinaryPred, a: LispValue, b: LispValue) -> bool:
    if isinstance(a, str) and isinstance(b, str):
        match pred:
            case BinaryPred.EQ:
                return a == b
            case BinaryPred.NOEQ:
                return a != b
        raise TypeMismatch(f"{pred.spelling} is not defined on strings")

    x, y = as_float(a), as_float(b)
    if x is None or y is None:
        raise TypeMismatch(
            f"{pred.spelling} operands must be numbers or strings, got {show(a)} and {show(b)}"
        )
    match pred:
        case BinaryPred.GT:
            return x > y
        case BinaryPred.GTE:
            return x >= y
        case BinaryPred.LT:
            return x < y
        case BinaryPred.LTE:
            return x <= y
        case BinaryPred.EQ:
            return x == y
        case BinaryPred.NOEQ:
            return x != y
    raise TypeMismatch(f"Unknown predicate {pred!r}")
