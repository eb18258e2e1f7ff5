"""Built-in operator tags.

Each tag's enum value is its source spelling, so the enum itself is the
bidirectional spelling table: ``BinaryOp("+")`` parses, ``BinaryOp.ADD.spelling``
displays. Adding an operator means a new member here plus one match arm in
the evaluator.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class _OperatorTag(Enum):

    @property
    def spelling(self) -> str:
        return self.value

    @classmethod
    def from_spelling(cls, text: str) -> Optional[_OperatorTag]:
        try:
            return cls(text)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


class BinaryOp(_OperatorTag):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    MOD = "%"
    SCONCAT = "++"


class BinaryPred(_OperatorTag):
    GT = ">"
    GTE = ">="
    LT = "<"
    LTE = "<="
    EQ = "=="
    NOEQ = "!="


class SpecialForm(_OperatorTag):
    DEF = "def"
    SET = "set!"
    GET = "get"
    QUOTE = "quote"
    EVAL = "eval"
    PRINT = "print"
    CAR = "car"
    CDR = "cdr"
    CONS = "cons"
    DO = "do"
    TYPEOF = "typeof"
    COND = "cond"
