"""Core tree-walking evaluator for conslisp.

An Evaluator owns one Environment for its whole lifetime. ``evaluate``
reduces a value recursively: symbols are looked up, lists are applied by
dispatching on the tag of their head, everything else evaluates to itself.
Errors propagate as exceptions from the first failing sub-expression.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

from conslisp import SExpression, LispValue
from conslisp.debug_utils.pprint import show
from conslisp.evaluation.operators import apply_binary_op, apply_binary_pred
from conslisp.evaluation.special_forms import dispatch_special_form
from conslisp.types.environment import Environment
from conslisp.types.errors import InvalidArguments, TypeMismatch
from conslisp.types.operators import BinaryOp, BinaryPred, SpecialForm
from conslisp.types.persistent_list import PersistentList
from conslisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Evaluator:
    """Reduces conslisp values against a single mutable Environment."""

    def __init__(self, env: Optional[Environment] = None, out: Optional[TextIO] = None):
        self.env = env if env is not None else Environment()
        # Sink for the print form; resolved lazily so redirected stdout is honoured
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def evaluate(self, expr: SExpression) -> LispValue:
        match expr:
            case PersistentList():
                return self._evaluate_list(expr)
            case Symbol():
                return self.env.lookup(expr)
        # --- Atoms and operator tags return as-is ---
        return expr

    def _evaluate_list(self, expr: PersistentList) -> LispValue:
        if expr.is_empty():
            raise InvalidArguments("cannot evaluate an empty list")
        head, *tail = expr
        return self._apply(head, tail)

    def _apply(self, head: LispValue, tail: list[SExpression]) -> LispValue:
        match head:
            case SpecialForm():
                logger.debug("special form %s with %d operand(s)", head.spelling, len(tail))
                return dispatch_special_form(head, tail, self.env, self.evaluate, self.out)

            case BinaryOp():
                a, b = self._evaluate_operands(head.spelling, tail)
                return apply_binary_op(head, a, b)

            case BinaryPred():
                a, b = self._evaluate_operands(head.spelling, tail)
                return apply_binary_pred(head, a, b)

            case Symbol():
                raise TypeMismatch(f"Cannot apply operator to symbol: {head}")

            case PersistentList():
                # Evaluate the head expression and re-dispatch on its value
                return self._apply(self._evaluate_list(head), tail)

        raise TypeMismatch(
            f"The first element of a list must be a special form, operator or predicate, got {show(head)}"
        )

    def _evaluate_operands(self, name: str, tail: list[SExpression]) -> tuple[LispValue, LispValue]:
        if len(tail) != 2:
            raise InvalidArguments(f"{name} requires exactly 2 arguments, got {len(tail)}")
        a = self.evaluate(tail[0])
        b = self.evaluate(tail[1])
        return a, b
