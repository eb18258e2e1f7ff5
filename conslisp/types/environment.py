"""Runtime environment for conslisp.

A single flat table from Symbols to evaluated values. Each evaluator owns
exactly one Environment for its whole lifetime; ``def`` and ``set!``
mutate it in place and there are no nested scopes.
"""

from __future__ import annotations

import logging
from io import StringIO

from conslisp import LispValue
from conslisp.types.errors import TypeMismatch, UndefinedSymbol
from conslisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


class Environment:
    """Mapping from Symbols to Lisp values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[Symbol, LispValue] = {}

    def define(self, name: Symbol, value: LispValue) -> None:
        """Bind `name` to `value`, replacing any previous binding.

        Raises TypeMismatch if `name` is not a Symbol.
        """
        if not isinstance(name, Symbol):
            raise TypeMismatch(f"Cannot define {name!r} as a symbol")
        logger.debug("define %s", name)
        self.vars[name] = value

    def set(self, name: Symbol, value: LispValue) -> None:
        """Update an existing binding for `name`.

        Raises UndefinedSymbol if the symbol is not bound.
        """
        if name not in self.vars:
            raise UndefinedSymbol(name.name)
        logger.debug("set %s", name)
        self.vars[name] = value

    def lookup(self, name: Symbol) -> LispValue:
        try:
            return self.vars[name]
        except KeyError:
            raise UndefinedSymbol(name.name) from None

    def __contains__(self, name: object) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write("{")
            buffer.write(", ".join(f"{k}: {v!r}" for k, v in self.vars.items()))
            buffer.write("}")
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"<Environment {self}>"
