import pytest

from conslisp.evaluation.evaluator import Evaluator
from conslisp.types.environment import Environment
from conslisp.types.errors import InvalidArguments, TypeMismatch, UndefinedSymbol
from conslisp.types.operators import BinaryOp, BinaryPred, SpecialForm
from conslisp.types.persistent_list import EMPTY, PersistentList
from conslisp.types.symbol import Symbol


# -----------------------------------------------------
# Tests
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value",
    [1, -3, 2.5, "hello", True, False, BinaryOp.ADD, BinaryPred.EQ, SpecialForm.QUOTE],
)
def test_self_evaluating(evaluator, value):
    assert evaluator.evaluate(value) is value


def test_symbol_lookup():
    env = Environment()
    env.define(Symbol("x"), 42)
    evaluator = Evaluator(env)
    assert evaluator.evaluate(Symbol("x")) == 42
    with pytest.raises(UndefinedSymbol) as exc:
        evaluator.evaluate(Symbol("z"))
    assert exc.value.name == "z"


def test_empty_list_cannot_be_evaluated(evaluator):
    with pytest.raises(InvalidArguments):
        evaluator.evaluate(EMPTY)


def test_simple_expression(evaluator):
    expr = PersistentList.from_iterable([BinaryOp.ADD, 1, 2])
    assert evaluator.evaluate(expr) == 3


@pytest.mark.parametrize(
    "source",
    ["(foo 1 2)", "(1 2)", '("f" 1)', "(2.5)", "((> 2 1) 1 2)"],
)
def test_invalid_operator_position(interp, source):
    with pytest.raises(TypeMismatch):
        interp.eval(source)


def test_symbol_bound_to_operator_is_not_applied(interp):
    # Operator position is dispatched on the raw tag, symbols are never looked up
    interp.eval("(def plus (quote +))")
    with pytest.raises(TypeMismatch):
        interp.eval("(plus 1 2)")


@pytest.mark.parametrize(
    "source,expected",
    [
        ("((quote +) 1 2)", 3),
        ("((car (quote (+ -))) 5 3)", 8),
        ("((car (cdr (quote (+ -)))) 5 3)", 2),
        ("((quote ==) 1 1)", True),
        ("((quote quote) x)", Symbol("x")),
        ("((quote (quote *)) 2 3)", 6),
    ],
)
def test_nested_list_in_operator_position(interp, source, expected):
    assert interp.eval(source) == expected


def test_empty_list_in_operator_position(interp):
    with pytest.raises(InvalidArguments):
        interp.eval("(() 1)")


def test_environment_persists_across_calls(interp):
    interp.eval("(def counter 0)")
    for _ in range(3):
        interp.eval("(set! counter (+ counter 1))")
    assert interp.eval("counter") == 3


def test_separate_evaluators_do_not_share_state():
    first, second = Evaluator(), Evaluator()
    first.evaluate(PersistentList.from_iterable([SpecialForm.DEF, Symbol("x"), 1]))
    assert Symbol("x") in first.env
    assert Symbol("x") not in second.env


def test_print_defaults_to_stdout(capsys):
    Evaluator().evaluate(PersistentList.from_iterable([SpecialForm.PRINT, "hi"]))
    assert capsys.readouterr().out == "'hi'\n"
