import io

import pytest

from conslisp.__main__ import main
from conslisp.interpreter import Interpreter
from conslisp.repl import handle_line, repl


@pytest.fixture
def session():
    return Interpreter(out=io.StringIO()), io.StringIO()


def scripted(lines):
    """input() replacement feeding `lines` then signalling end of input."""
    it = iter(lines)

    def _input(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return _input


def test_handle_line_prints_result(session):
    interp, out = session
    assert handle_line(interp, "(+ 1 2)", out) is True
    assert out.getvalue() == "3\n"


def test_handle_line_quit(session):
    interp, out = session
    assert handle_line(interp, ":q", out) is False


def test_handle_line_reports_errors_and_continues(session):
    interp, out = session
    assert handle_line(interp, "(get zz)", out) is True
    assert out.getvalue() == "UndefinedSymbol: Undefined symbol: zz\n"
    assert handle_line(interp, "(def zz 1)", out) is True
    assert out.getvalue().endswith("1\n")


def test_handle_line_load(session, tmp_path):
    interp, out = session
    path = tmp_path / "lib.lisp"
    path.write_text('(def greeting "hi")\n', encoding="utf-8")
    assert handle_line(interp, f":l {path}", out) is True
    assert out.getvalue() == "'hi'\n"
    assert interp.eval("greeting") == "hi"


def test_handle_line_load_missing_file(session, tmp_path):
    interp, out = session
    assert handle_line(interp, f":l {tmp_path / 'missing.lisp'}", out) is True
    assert out.getvalue().startswith("FileNotFoundError")


def test_handle_line_load_usage(session):
    interp, out = session
    handle_line(interp, ":l", out)
    assert out.getvalue() == "usage: :l <path>\n"


def test_repl_session(session):
    interp, out = session
    repl(interp, scripted(["(def x 2)", "", "(* x 21)", ":q", "(def never 1)"]), out)
    assert out.getvalue() == "2\n42\n"
    assert "never" not in str(interp.env)


def test_repl_stops_at_end_of_input(session):
    interp, out = session
    repl(interp, scripted(["(> 2 1)"]), out)
    assert out.getvalue() == "true\n\n"


def test_main_runs_file(tmp_path, capsys):
    path = tmp_path / "main.lisp"
    path.write_text("(print 1)\n(+ 1 1)", encoding="utf-8")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "1\n2\n"


def test_main_reports_errors(tmp_path, capsys):
    path = tmp_path / "bad.lisp"
    path.write_text("(/ 1 0)", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "DivisionByZero" in capsys.readouterr().err


def test_handle_line_survives_oversized_literal(session):
    interp, out = session
    assert handle_line(interp, "(def n " + "1" * 5000 + ")", out) is True
    assert out.getvalue().startswith("UnexpectedChar")
    assert handle_line(interp, "(+ 1 1)", out) is True
    assert out.getvalue().endswith("2\n")
