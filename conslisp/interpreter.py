from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, TextIO

from conslisp import LispValue
from conslisp.evaluation.evaluator import Evaluator
from conslisp.reader.parser import read
from conslisp.types.environment import Environment
from conslisp.types.persistent_list import EMPTY

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Reads and evaluates conslisp source text.
    One Evaluator (and so one Environment) persists across calls.
    """

    def __init__(self, env: Optional[Environment] = None, out: Optional[TextIO] = None):
        self.evaluator = Evaluator(env, out)

    @property
    def env(self) -> Environment:
        return self.evaluator.env

    def eval(self, code: str) -> LispValue:
        """Evaluate every top-level form in `code`; return the last value.

        Blank or comment-only input returns the empty list.
        """
        program = read(code)
        result: LispValue = EMPTY
        for expr in program:
            result = self.evaluator.evaluate(expr)
        return result

    def load(self, path: str | Path) -> LispValue:
        """Evaluate a whole file as one source blob."""
        path = Path(path)
        logger.info("loading %s", path)
        return self.eval(path.read_text(encoding="utf-8"))
