import pytest
from hypothesis import given, strategies as st

from conslisp.reader.scanner import Scanner, TokenKind, lex
from conslisp.types.limits import INT64_MAX, INT64_MIN
from conslisp.types.errors import (
    ConsLispLexError,
    UnexpectedChar,
    UnexpectedEof,
    UnmatchedParen,
)


def kinds_and_values(source):
    return [(t.kind, t.value) for t in lex(source)]


@pytest.mark.parametrize(
    "source,expected",
    [
        ("()", [(TokenKind.LPAREN, "("), (TokenKind.RPAREN, ")")]),
        ("42", [(TokenKind.INTEGER, 42)]),
        ("-7", [(TokenKind.INTEGER, -7)]),
        ("+7", [(TokenKind.INTEGER, 7)]),
        ("3.25", [(TokenKind.FLOAT, 3.25)]),
        ("-0.5", [(TokenKind.FLOAT, -0.5)]),
        ("2.", [(TokenKind.FLOAT, 2.0)]),
        ('"hello world"', [(TokenKind.STRING, "hello world")]),
        ('""', [(TokenKind.STRING, "")]),
        ("; note", [(TokenKind.COMMENT, " note")]),
        ("-", [(TokenKind.SYMBOL, "-")]),
        ("+", [(TokenKind.SYMBOL, "+")]),
        ("++", [(TokenKind.SYMBOL, "++")]),
        ("==", [(TokenKind.SYMBOL, "==")]),
        ("%", [(TokenKind.SYMBOL, "%")]),
        ("set!", [(TokenKind.SYMBOL, "set!")]),
        ("'atom", [(TokenKind.SYMBOL, "'atom")]),
        ("x1", [(TokenKind.SYMBOL, "x1")]),
        ("- 5", [(TokenKind.SYMBOL, "-"), (TokenKind.INTEGER, 5)]),
        (
            "(+ 1 (* 2 3))",
            [
                (TokenKind.LPAREN, "("),
                (TokenKind.SYMBOL, "+"),
                (TokenKind.INTEGER, 1),
                (TokenKind.LPAREN, "("),
                (TokenKind.SYMBOL, "*"),
                (TokenKind.INTEGER, 2),
                (TokenKind.INTEGER, 3),
                (TokenKind.RPAREN, ")"),
                (TokenKind.RPAREN, ")"),
            ],
        ),
        (
            "1 ; trailing\n2",
            [(TokenKind.INTEGER, 1), (TokenKind.COMMENT, " trailing"), (TokenKind.INTEGER, 2)],
        ),
    ],
)
def test_scanner_tokens(source, expected):
    assert kinds_and_values(source) == expected


def test_positions_track_lines_and_columns():
    tokens = list(lex("(def x\n  5)"))
    assert [(t.line, t.column) for t in tokens] == [(1, 1), (1, 2), (1, 6), (2, 3), (2, 4)]


def test_unbalanced_input_yields_tokens_then_fails():
    scanner = Scanner("(1 2")
    assert scanner.next_token().kind is TokenKind.LPAREN
    assert scanner.next_token().value == 1
    assert scanner.next_token().value == 2
    with pytest.raises(UnmatchedParen):
        scanner.next_token()


def test_balanced_input_ends_with_none():
    scanner = Scanner("(1)")
    assert [scanner.next_token().kind for _ in range(3)] == [
        TokenKind.LPAREN,
        TokenKind.INTEGER,
        TokenKind.RPAREN,
    ]
    assert scanner.next_token() is None
    assert scanner.next_token() is None


def test_extra_close_paren_is_positioned():
    with pytest.raises(UnmatchedParen) as exc:
        list(lex("(1))"))
    assert (exc.value.line, exc.value.column) == (1, 4)


def test_second_dot_is_unexpected_char():
    with pytest.raises(UnexpectedChar) as exc:
        list(lex("1.2.3"))
    assert exc.value.char == "."
    assert exc.value.column == 4


@pytest.mark.parametrize(
    "source",
    [
        "12abc",
        "3-4",
        "99999999999999999999",
        "-9223372036854775809",
        "1" * 5000,
        "-" + "9" * 5000,
    ],
)
def test_malformed_numerals(source):
    with pytest.raises(UnexpectedChar):
        list(lex(source))


@pytest.mark.parametrize("source", ["#", "[", "@x", "a . b"])
def test_unexpected_characters(source):
    with pytest.raises(UnexpectedChar):
        list(lex(source))


@pytest.mark.parametrize("source", ['"open', '"line\nbreak"'])
def test_bad_strings(source):
    with pytest.raises(UnexpectedEof):
        list(lex(source))


def test_int64_bounds_accepted():
    assert kinds_and_values(f"{INT64_MAX} {INT64_MIN}") == [
        (TokenKind.INTEGER, INT64_MAX),
        (TokenKind.INTEGER, INT64_MIN),
    ]


@pytest.mark.parametrize("source", ["", "   ", "\n\n", "; only a comment"])
def test_blank_sources_do_not_crash(source):
    tokens = list(lex(source))
    assert all(t.kind is TokenKind.COMMENT for t in tokens)


@given(st.integers(min_value=INT64_MIN, max_value=INT64_MAX))
def test_integer_literals(n):
    assert kinds_and_values(str(n)) == [(TokenKind.INTEGER, n)]


@given(st.text())
def test_scanner_fails_only_with_lex_errors(source):
    try:
        list(lex(source))
    except ConsLispLexError:
        pass


def test_leading_zeros_do_not_count_toward_the_digit_limit():
    assert kinds_and_values("0" * 30 + "42") == [(TokenKind.INTEGER, 42)]


def test_long_float_literal():
    assert kinds_and_values("1" * 5000 + ".5")[0][0] is TokenKind.FLOAT
