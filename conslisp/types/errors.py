from __future__ import annotations


class ConsLispError(Exception):
    """ Base class for all conslisp errors"""
    pass


# ---------------------------------------------------------------------------
# Lexical errors (scanner phase)
# ---------------------------------------------------------------------------

class ConsLispLexError(ConsLispError):
    """ Raised by the scanner; carries the 1-based line and column of the fault"""

    def __init__(self, message: str, line: int, column: int):
        super().__init__(f"{message} at line {line}, column {column}")
        self.line = line
        self.column = column


class UnmatchedParen(ConsLispLexError):
    """ Raised on a ')' with no open '(' or on end of input with open '('"""


class UnexpectedChar(ConsLispLexError):
    """ Raised on a character that cannot start or continue a token"""

    def __init__(self, char: str, line: int, column: int):
        super().__init__(f"Unexpected character {char!r}", line, column)
        self.char = char


class UnexpectedEof(ConsLispLexError):
    """ Raised when input ends (or a line ends) inside a string literal"""


# ---------------------------------------------------------------------------
# Syntax errors (caller-side structure checks before parsing)
# ---------------------------------------------------------------------------

class ConsLispSyntaxError(ConsLispError):
    """ Raised when the token stream has an invalid structure"""


class UnmatchedBrace(ConsLispSyntaxError):
    """ Raised by the brace-balance check, naming the offending token"""

    def __init__(self, token):
        if token is None:
            super().__init__("Unmatched brace at end of input")
        else:
            super().__init__(
                f"Unmatched brace {token.text!r} at line {token.line}, column {token.column}"
            )
        self.token = token


# ---------------------------------------------------------------------------
# Evaluation errors
# ---------------------------------------------------------------------------

class ConsLispEvalError(ConsLispError):
    """ Base class for errors raised while evaluating"""


class UndefinedSymbol(ConsLispEvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, name: str):
        super().__init__(f"Undefined symbol: {name}")
        self.name = name


class InvalidArguments(ConsLispEvalError):
    """ Raised on wrong arity or a structurally invalid operand"""

    def __init__(self, context: str):
        super().__init__(f"Invalid arguments: {context}")
        self.context = context


class TypeMismatch(ConsLispEvalError):
    """ Raised when an operand kind is incompatible with its operator or form"""

    def __init__(self, context: str):
        super().__init__(f"Type mismatch: {context}")
        self.context = context


class DivisionByZero(ConsLispEvalError):
    """ Raised by / and % with a zero divisor, integer or float"""

    def __init__(self):
        super().__init__("Division by zero")


class IntegerOverflow(ConsLispEvalError):
    """ Raised when integer arithmetic leaves the signed 64-bit range"""

    def __init__(self, context: str):
        super().__init__(f"Integer overflow: {context}")
        self.context = context
