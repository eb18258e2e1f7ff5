from conslisp.reader.scanner import Scanner, Token, TokenKind, lex
from conslisp.reader.parser import parse, check_balanced, read
