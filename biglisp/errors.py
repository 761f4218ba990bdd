from __future__ import annotations


class BigLispError(Exception):
    """ Base class for all BigLisp errors"""
    pass


# -------------------------------
# Reader errors
# -------------------------------
class BigLispParseError(BigLispError):
    """ Raised by the reader when source text is structurally malformed"""

    def __init__(self, message: str, position: int = 0, line: int = 1, column: int = 1, token: str | None = None):
        self.message = message
        self.position = position
        self.line = line
        self.column = column
        self.token = token
        super().__init__(f"{message} (line {line}, column {column})")


class UnbalancedDelimiter(BigLispParseError):
    """ Raised on an unmatched ')' or ']' or on premature end of input"""


class InvalidOperator(BigLispParseError):
    """ Raised when a form's operator position does not hold a symbol"""


class MalformedBindings(BigLispParseError):
    """ Raised when a let binding vector is not a sequence of name/expression pairs"""


class UnexpectedToken(BigLispParseError):
    """ Raised when a token appears where the grammar does not allow it"""


class NestingTooDeep(BigLispParseError):
    """ Raised when forms and vectors nest deeper than the configured depth cap"""


# -------------------------------
# Evaluation errors
# -------------------------------
class BigLispEvalError(BigLispError):
    """ Base class for errors raised while evaluating an expression"""
    pass


class UnboundSymbol(BigLispEvalError):
    """ Raised when a symbol is used before it is bound"""

    def __init__(self, symbol: str, message: str | None = None):
        self.symbol = symbol
        super().__init__(message or f"Cannot lookup unbound symbol {symbol}")


class TypeMismatch(BigLispEvalError):
    """ Raised when the types of arguments passed to an operator are incorrect"""


class DivisionByZero(BigLispEvalError):
    """ Raised on division or remainder by zero"""


class ArityMismatch(BigLispEvalError):
    """ Raised when the number of arguments passed to a form or function is incorrect"""


class EmptyList(BigLispEvalError):
    """ Raised when taking the head of an empty list"""


class RecursionLimit(BigLispEvalError):
    """ Raised when evaluation nests deeper than the configured depth cap"""


class UnknownForm(BigLispEvalError):
    """ Raised when a form names neither a special form, a builtin, nor a function in scope"""

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Unknown form: {symbol}")
