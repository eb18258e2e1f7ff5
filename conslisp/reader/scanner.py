"""
  conslisp lexical scanner

- Character-at-a-time scanner with line/column bookkeeping
- Lazy: ``Scanner.next_token()`` returns one Token per call, ``None`` at end
- Tracks parenthesis depth so an unbalanced ')' or a missing ')' at end of
  input is reported as a lexical error

Token kinds:

    - (  )          -> LPAREN / RPAREN
    - 12, -3, +4    -> INTEGER (signed 64-bit)
    - 1.5, -0.25    -> FLOAT
    - "text"        -> STRING (verbatim, no escapes, no raw newline)
    - ; to eol      -> COMMENT
    - def, +, ==    -> SYMBOL (operator spellings are plain symbols here)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Union

from conslisp.types.errors import UnexpectedChar, UnexpectedEof, UnmatchedParen
from conslisp.types.limits import INT64_MAX, INT64_MAX_DIGITS, INT64_MIN

logger = logging.getLogger(__name__)

SYMBOL_CHARS = "'=+!-*/><%"
DIGITS = "0123456789"


class TokenKind(Enum):
    LPAREN = "lparen"
    RPAREN = "rparen"
    INTEGER = "integer"
    FLOAT = "float"
    SYMBOL = "symbol"
    STRING = "string"
    COMMENT = "comment"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Union[str, int, float]
    line: int
    column: int

    @property
    def text(self) -> str:
        """Source-like spelling, used in diagnostics."""
        if self.kind is TokenKind.STRING:
            return f'"{self.value}"'
        if self.kind is TokenKind.COMMENT:
            return f";{self.value}"
        return str(self.value)


def is_symbol_start(c: str) -> bool:
    return c.isalpha() or c in SYMBOL_CHARS


def is_symbol_part(c: str) -> bool:
    return c.isalnum() or c in SYMBOL_CHARS


class Scanner:
    """Turns source text into positioned Tokens, one call at a time."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self.paren_depth = 0

    # ------------------------------------------------------------------
    # Character cursor
    # ------------------------------------------------------------------
    def _peek(self, offset: int = 0) -> Optional[str]:
        i = self.pos + offset
        if i < len(self.source):
            return self.source[i]
        return None

    def _advance(self) -> str:
        c = self.source[self.pos]
        self.pos += 1
        if c == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def next_token(self) -> Optional[Token]:
        """Return the next Token, or None at end of input.

        Raises UnmatchedParen, UnexpectedChar or UnexpectedEof on malformed input.
        """
        self._skip_whitespace()

        c = self._peek()
        if c is None:
            if self.paren_depth != 0:
                raise UnmatchedParen(
                    f"{self.paren_depth} unclosed '(' at end of input",
                    self.line,
                    self.column,
                )
            return None

        line, column = self.line, self.column

        if c == "(":
            self._advance()
            self.paren_depth += 1
            return Token(TokenKind.LPAREN, "(", line, column)

        if c == ")":
            if self.paren_depth == 0:
                raise UnmatchedParen("Unmatched ')'", line, column)
            self._advance()
            self.paren_depth -= 1
            return Token(TokenKind.RPAREN, ")", line, column)

        if c == '"':
            return self._read_string(line, column)

        if c == ";":
            return self._read_comment(line, column)

        nxt = self._peek(1)
        if c in DIGITS or (c in "+-" and nxt is not None and nxt in DIGITS):
            return self._read_number(line, column)

        if is_symbol_start(c):
            return self._read_symbol(line, column)

        raise UnexpectedChar(c, line, column)

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.next_token()
            if token is None:
                return
            yield token

    # ------------------------------------------------------------------
    # Token readers
    # ------------------------------------------------------------------
    def _read_number(self, line: int, column: int) -> Token:
        chars = [self._advance()]
        seen_dot = False
        while (c := self._peek()) is not None:
            if c in DIGITS:
                chars.append(self._advance())
            elif c == ".":
                if seen_dot:
                    raise UnexpectedChar(c, self.line, self.column)
                seen_dot = True
                chars.append(self._advance())
            elif is_symbol_part(c):
                # e.g. 12abc or 3-4: a numeral glued to symbol characters
                raise UnexpectedChar(c, self.line, self.column)
            else:
                break

        text = "".join(chars)
        if seen_dot:
            return Token(TokenKind.FLOAT, float(text), line, column)
        # Bound the digit count before int(), which rejects very long strings itself
        if len(text.lstrip("+-").lstrip("0")) > INT64_MAX_DIGITS:
            raise UnexpectedChar(text[-1], self.line, self.column - 1)
        value = int(text)
        if not INT64_MIN <= value <= INT64_MAX:
            raise UnexpectedChar(text[-1], self.line, self.column - 1)
        return Token(TokenKind.INTEGER, value, line, column)

    def _read_string(self, line: int, column: int) -> Token:
        self._advance()  # opening quote
        chars = []
        while (c := self._peek()) is not None:
            if c == '"':
                self._advance()
                return Token(TokenKind.STRING, "".join(chars), line, column)
            if c == "\n":
                raise UnexpectedEof(
                    "Newline inside string literal", self.line, self.column
                )
            chars.append(self._advance())
        raise UnexpectedEof("Unterminated string literal", self.line, self.column)

    def _read_comment(self, line: int, column: int) -> Token:
        self._advance()  # ';'
        chars = []
        while (c := self._peek()) is not None and c != "\n":
            chars.append(self._advance())
        return Token(TokenKind.COMMENT, "".join(chars), line, column)

    def _read_symbol(self, line: int, column: int) -> Token:
        chars = []
        while (c := self._peek()) is not None and is_symbol_part(c):
            chars.append(self._advance())
        return Token(TokenKind.SYMBOL, "".join(chars), line, column)


def lex(source: str) -> Iterator[Token]:
    """Token generator over `source`; errors surface when the bad token is reached."""
    for token in Scanner(source):
        logger.debug("token %s %r at %d:%d", token.kind.value, token.value, token.line, token.column)
        yield token
