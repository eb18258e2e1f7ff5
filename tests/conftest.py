import io

import pytest

from conslisp.evaluation.evaluator import Evaluator
from conslisp.interpreter import Interpreter


@pytest.fixture
def out():
    """Captures what the print form writes."""
    return io.StringIO()


@pytest.fixture
def evaluator(out):
    """Fresh evaluator (and environment) for each test."""
    return Evaluator(out=out)


@pytest.fixture
def interp(out):
    return Interpreter(out=out)
