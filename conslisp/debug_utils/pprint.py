from __future__ import annotations

from typing import Optional

from conslisp import LispValue
from conslisp.types.operators import BinaryOp, BinaryPred, SpecialForm
from conslisp.types.persistent_list import PersistentList
from conslisp.types.symbol import Symbol

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_STRING = "\033[92m"
COLOR_NUMBER = "\033[95m"
COLOR_BOOL = "\033[96m"
COLOR_SPECIAL_FORM = "\033[90m"
COLOR_OPERATOR = "\033[93m"
COLOR_ERROR = "\033[91m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "color_symbols": True,
    "color_strings": True,
    "color_numbers": True,
    "color_bools": True,
    "color_special_forms": True,
    "color_operators": True,
}


def show(value: LispValue) -> str:
    """Human-readable rendering of a value.

    Strings are single-quoted, booleans print as true/false, operator tags by
    their spelling and lists as a parenthesised, space-separated sequence.
    """
    return render(value, None)


def colorize(value: LispValue, options: Optional[dict] = None) -> str:
    """Like ``show`` but wraps each atom in an ANSI color for the REPL."""
    return render(value, DEFAULT_OPTIONS if options is None else options)


def render(value: LispValue, options: Optional[dict]) -> str:
    if isinstance(value, PersistentList):
        return "(" + " ".join(render(item, options) for item in value) + ")"
    text, color, option = _atom(value)
    if options and options.get(option, True):
        return f"{color}{text}{RESET}"
    return text


def _atom(value: LispValue) -> tuple[str, str, str]:
    if isinstance(value, bool):
        return ("true" if value else "false"), COLOR_BOOL, "color_bools"
    if isinstance(value, (int, float)):
        return repr(value), COLOR_NUMBER, "color_numbers"
    if isinstance(value, str):
        return f"'{value}'", COLOR_STRING, "color_strings"
    if isinstance(value, Symbol):
        return str(value), COLOR_SYMBOL, "color_symbols"
    if isinstance(value, SpecialForm):
        return value.spelling, COLOR_SPECIAL_FORM, "color_special_forms"
    if isinstance(value, (BinaryOp, BinaryPred)):
        return value.spelling, COLOR_OPERATOR, "color_operators"
    return str(value), "", "color_symbols"


def format_error(error: Exception, color: bool = False) -> str:
    """One-line report naming the error kind and its message."""
    text = f"{type(error).__name__}: {error}"
    if color:
        return f"{COLOR_ERROR}{text}{RESET}"
    return text
