from __future__ import annotations
from typing import Any, Optional


class PolynomialError(Exception):
    "Base exception for everything raised while lexing, parsing or computing polynomials."
    pass


class RingError(PolynomialError):
    "A ring was misconfigured or asked to do something it cannot."
    pass


class LexerError(PolynomialError):
    "An unrecognized character was found in the source line."

    def __init__(self, message: str, position: int, line: str, token: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.line = line
        self.token = token

    @property
    def char(self) -> str:
        if 0 <= self.position < len(self.line):
            return self.line[self.position]
        return ""


class ParserError(PolynomialError):
    """Base class of the parse failures.

    `position` is the lexer cursor when the failure was detected and `line` is
    the input line, which is enough for a caller to print the line and
    put a caret under the offending column.
    """

    def __init__(self, message: str, position: int = 0, line: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.position = position
        self.line = line

    def __str__(self) -> str:
        return self.message


class ExpectedTokenError(ParserError):
    "A mandatory token was missing (closing parenthesis, exponent digits)."
    pass


class UnexpectedTokenError(ParserError):
    "A token of the wrong class appeared where a specific set was required."
    pass


class TokenizeError(ParserError):
    "The lexer failed while the parser was asking it for a token."

    def __init__(
        self, message: str, position: int = 0, line: str = "", cause: Optional[LexerError] = None
    ) -> None:
        super().__init__(message, position, line)
        self.cause = cause


class InvalidSyntaxError(ParserError):
    "Structural rejection: an operator with no operand or unconsumed trailing input."
    pass
