from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from errors import LexerError
from rings import VARIABLE_SYMBOLS

_logger = logging.getLogger(__name__)

# Single-line lexer with one token of lookahead.


class TokenKind(Enum):
    END = "END"
    NEWLINE = "NEWLINE"
    NUMBER = "NUMBER"
    VARIABLE = "VARIABLE"
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    CARET = "^"
    LPAREN = "("
    RPAREN = ")"
    EQUAL = "="
    PERIOD = "."
    UNKNOWN = "UNKNOWN"


_PUNCT = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "=": TokenKind.EQUAL,
    ".": TokenKind.PERIOD,
}
_BLANKS = " \t\r"
_DIGITS = "0123456789"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str = ""

    def __str__(self) -> str:
        if self.kind in (TokenKind.NUMBER, TokenKind.VARIABLE):
            return f"{self.kind.value}({self.text})"
        return self.kind.value


class Lexer:
    """Turns one source line into tokens, one `advance()` at a time.

    `token` is the current token and `position` the cursor just past it.
    `peek()` scans the following token without touching either; the result
    is cached together with the cursor it ends at, and the next `advance()`
    consumes the cache instead of scanning again.
    """

    def __init__(self, line: str, symbols: str = VARIABLE_SYMBOLS) -> None:
        self.line = line
        self.symbols = symbols
        self.position = 0
        self.token = Token(TokenKind.END)
        self._peeked: Optional[Tuple[int, Token]] = None

    def advance(self) -> Token:
        if self._peeked is not None:
            self.position, self.token = self._peeked
            self._peeked = None
        else:
            self.position, self.token = self._scan(self.position)
        _logger.debug("token %s, cursor at %d", self.token, self.position)
        return self.token

    def peek(self) -> Token:
        if self._peeked is None:
            self._peeked = self._scan(self.position)
        return self._peeked[1]

    def _scan(self, pos: int) -> Tuple[int, Token]:
        s, n = self.line, len(self.line)
        while pos < n and s[pos] in _BLANKS:
            pos += 1
        if pos >= n:
            return n, Token(TokenKind.END)
        c = s[pos]
        if c == "\n":
            return pos + 1, Token(TokenKind.NEWLINE, c)
        if c in self.symbols:
            return pos + 1, Token(TokenKind.VARIABLE, c)
        if c in _DIGITS:
            j = pos
            while j < n and s[j] in _DIGITS:
                j += 1
            # the '.' only belongs to the number when digits follow it
            if j + 1 < n and s[j] == "." and s[j + 1] in _DIGITS:
                j += 1
                while j < n and s[j] in _DIGITS:
                    j += 1
            return j, Token(TokenKind.NUMBER, s[pos:j])
        kind = _PUNCT.get(c)
        if kind is not None:
            return pos + 1, Token(kind, c)
        _logger.debug("unknown character %r at %d", c, pos)
        raise LexerError(f"Unknown character {c!r}", pos, s, Token(TokenKind.UNKNOWN, c))


def tokenize(line: str, symbols: str = VARIABLE_SYMBOLS) -> List[Token]:
    """All tokens of `line` up to and including the first END or NEWLINE."""
    lexer = Lexer(line, symbols)
    toks: List[Token] = []
    while True:
        tok = lexer.advance()
        toks.append(tok)
        if tok.kind in (TokenKind.END, TokenKind.NEWLINE):
            return toks
