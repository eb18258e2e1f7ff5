"""
  conslisp parser

Builds a PersistentList tree from a flat token stream:

    - ( ... )       -> nested PersistentList element
    - integers      -> int
    - floats        -> float
    - strings       -> str
    - symbols       -> BinaryPred / SpecialForm / BinaryOp tag, tried in that
                       order, else Symbol
    - comments      -> dropped

The whole input maps to one top-level PersistentList whose elements mirror
the parenthesis structure. ``parse`` assumes balanced braces; run
``check_balanced`` (or ``read``, which does both) on untrusted token lists.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from conslisp import SExpression
from conslisp.reader.scanner import Token, TokenKind, lex
from conslisp.types.errors import UnmatchedBrace
from conslisp.types.operators import BinaryOp, BinaryPred, SpecialForm
from conslisp.types.persistent_list import EMPTY, PersistentList
from conslisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def parse_symbol(text: str) -> SExpression:
    """Resolve bare-word text to an operator tag or a plain Symbol."""
    for table in (BinaryPred, SpecialForm, BinaryOp):
        tag = table.from_spelling(text)
        if tag is not None:
            return tag
    return Symbol(text)


def parse_token(token: Token) -> SExpression:
    match token.kind:
        case TokenKind.INTEGER | TokenKind.FLOAT | TokenKind.STRING:
            return token.value
        case TokenKind.SYMBOL:
            return parse_symbol(token.value)
    raise ValueError(f"Token {token.kind.value} has no value form")


def _parse_list(tokens: Iterator[Token]) -> PersistentList:
    # Prepending yields reverse order; reverse once the level is complete.
    result: PersistentList = EMPTY
    for token in tokens:
        match token.kind:
            case TokenKind.LPAREN:
                result = result.cons(_parse_list(tokens))
            case TokenKind.RPAREN:
                break
            case TokenKind.COMMENT:
                continue
            case _:
                result = result.cons(parse_token(token))
    return result.reversed()


def parse(tokens: Iterable[Token]) -> PersistentList:
    """Parse a balanced token sequence into one top-level PersistentList."""
    tree = _parse_list(iter(tokens))
    logger.debug("parsed %s", tree)
    return tree


def check_balanced(tokens: Iterable[Token]) -> list[Token]:
    """Verify brace nesting with a stack of open-paren tokens.

    Returns the tokens as a list so the caller can hand them to ``parse``.
    Raises UnmatchedBrace naming the offending token.
    """
    stack: list[Token] = []
    seen: list[Token] = []
    for token in tokens:
        seen.append(token)
        if token.kind is TokenKind.LPAREN:
            stack.append(token)
        elif token.kind is TokenKind.RPAREN:
            if not stack:
                raise UnmatchedBrace(token)
            stack.pop()
    if stack:
        raise UnmatchedBrace(stack[-1])
    return seen


def read(source: str) -> PersistentList:
    """Scan, balance-check and parse `source` in one step."""
    return parse(check_balanced(lex(source)))
