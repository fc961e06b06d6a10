from __future__ import annotations
import logging
import time
from typing import Type

from errors import (
    ExpectedTokenError,
    InvalidSyntaxError,
    LexerError,
    ParserError,
    TokenizeError,
    UnexpectedTokenError,
)
from lexer import Lexer, Token, TokenKind
from monomial import Monomial
from polynomial import Polynomial
from rings import DEFAULT_RING, PolynomialRing

_logger = logging.getLogger(__name__)

# =====================
# Recursive-descent polynomial parser
# =====================
#
#   poly     := term (('+' | '-') term)*
#   term     := factor ('*' factor)*
#   factor   := '(' poly ')' ['^' INT]
#             | '-' factor
#             | monomial (('+' | '-') monomial)*     flat run
#   monomial := ['-'] [NUMBER] (VAR ['^' INT])*
#
# The flat run only continues past a '+' or '-' when the token after it is a
# number or a variable; anything else (usually '(') is left to `poly`.

_OPERAND_START = (TokenKind.NUMBER, TokenKind.VARIABLE)
_LINE_END = (TokenKind.END, TokenKind.NEWLINE)


class Parser:
    def __init__(self, line: str, ring: PolynomialRing = DEFAULT_RING) -> None:
        self.ring = ring
        self.lexer = Lexer(line)
        self._advance()

    @property
    def line(self) -> str:
        return self.lexer.line

    @property
    def position(self) -> int:
        return self.lexer.position

    @property
    def token(self) -> Token:
        return self.lexer.token

    def _kind(self) -> TokenKind:
        return self.lexer.token.kind

    def _error(self, cls: Type[ParserError], msg: str) -> ParserError:
        _logger.debug("%s at %d: %s", cls.__name__, self.position, msg)
        return cls(msg, self.position, self.line)

    def _wrap(self, e: LexerError, action: str) -> TokenizeError:
        msg = f"Error received while {action} from lexer: {e.message}"
        _logger.debug("%s", msg)
        return TokenizeError(msg, e.position, e.line, e)

    def _advance(self) -> Token:
        try:
            return self.lexer.advance()
        except LexerError as e:
            raise self._wrap(e, "getting next token") from e

    def _peek(self) -> Token:
        try:
            return self.lexer.peek()
        except LexerError as e:
            raise self._wrap(e, "peeking next token") from e

    def _slot(self, tok: Token) -> int:
        try:
            return self.ring.index(tok.text)
        except KeyError:
            raise self._error(
                UnexpectedTokenError,
                f"Received unknown variable '{tok.text}', expected one of {', '.join(self.ring.variables)}",
            ) from None

    def _literal(self, tok: Token):
        try:
            return self.ring.coeff_ring.from_literal(tok.text)
        except ValueError as e:
            raise self._error(
                UnexpectedTokenError, f"Literal {tok.text} is not a {self.ring.coeff_ring} value: {e}"
            ) from e

    def _exponent(self) -> int:
        # called with the cursor just past '^'
        tok = self.token
        if tok.kind is not TokenKind.NUMBER or "." in tok.text:
            raise self._error(ExpectedTokenError, f"Expected integer exponent after '^', found {tok}")
        self._advance()
        return int(tok.text)

    def expect_end(self) -> None:
        if self._kind() not in _LINE_END:
            raise self._error(InvalidSyntaxError, f"Invalid syntax: unexpected {self.token}")

    def parse_monomial(self) -> Monomial:
        cr = self.ring.coeff_ring
        negative = False
        if self._kind() is TokenKind.MINUS:
            negative = True
            self._advance()
        if self._kind() not in _OPERAND_START:
            raise self._error(ExpectedTokenError, f"Expected a number or a variable, found {self.token}")

        coeff = cr.one()
        if self._kind() is TokenKind.NUMBER:
            coeff = self._literal(self.token)
            self._advance()

        powers = [0] * self.ring.nvars
        while self._kind() is TokenKind.VARIABLE:
            slot = self._slot(self.token)
            self._advance()
            exp = 1
            if self._kind() is TokenKind.CARET:
                self._advance()
                exp = self._exponent()
            # a repeated variable overwrites its earlier power
            powers[slot] = exp

        if negative:
            coeff = cr.negate(coeff)
        return Monomial(coeff, powers, self.ring)

    def parse_monomials(self) -> Polynomial:
        poly = Polynomial([], self.ring)
        first = True
        while True:
            kind = self._kind()
            if kind in (TokenKind.PLUS, TokenKind.MINUS):
                if self._peek().kind not in _OPERAND_START:
                    _logger.debug("flat run stops at %s", self.token)
                    break
                self._advance()
                m = self.parse_monomial()
                if kind is TokenKind.PLUS:
                    poly.add_monomial(m)
                else:
                    poly.sub_monomial(m)
            elif first and kind in _OPERAND_START:
                poly.add_monomial(self.parse_monomial())
            else:
                break
            first = False
        return poly

    def parse_factor(self) -> Polynomial:
        _logger.debug("parse_factor: received token %s", self.token)
        tok = self.token
        if tok.kind is TokenKind.LPAREN:
            self._advance()
            inner = self.parse_poly()
            if self._kind() is not TokenKind.RPAREN:
                raise self._error(
                    ExpectedTokenError, "Expected closing parenthesis ')' at end of expression"
                )
            self._advance()
            if self._kind() is TokenKind.CARET:
                self._advance()
                inner = inner.pow(self._exponent())
            return inner
        if tok.kind is TokenKind.MINUS:
            nxt = self._peek()
            if nxt.kind in _OPERAND_START:
                return self.parse_monomials()
            if nxt.kind in _LINE_END:
                raise self._error(InvalidSyntaxError, "Operator '-' has no operand")
            self._advance()
            inner = self.parse_factor()
            cr = self.ring.coeff_ring
            inner.scale(cr.negate(cr.one()))
            return inner
        if tok.kind in _OPERAND_START:
            return self.parse_monomials()
        if tok.kind in _LINE_END:
            raise self._error(
                ExpectedTokenError, "Expected a number, a variable or '(' but the input ended"
            )
        if tok.kind in (TokenKind.RPAREN, TokenKind.PERIOD):
            raise self._error(UnexpectedTokenError, f"Unexpected token {tok}")
        raise self._error(InvalidSyntaxError, f"Operator '{tok.text}' has no left operand")

    def parse_term(self) -> Polynomial:
        _logger.debug("parse_term: received token %s", self.token)
        poly = self.parse_factor()
        while self._kind() is TokenKind.STAR:
            self._advance()
            poly = poly * self.parse_factor()
        return poly

    def parse_poly(self) -> Polynomial:
        _logger.debug("parse_poly: received token %s", self.token)
        poly = self.parse_term()
        while self._kind() in (TokenKind.PLUS, TokenKind.MINUS):
            kind = self._kind()
            self._advance()
            other = self.parse_term()
            poly = poly + other if kind is TokenKind.PLUS else poly - other
        return poly

    def parse(self) -> Polynomial:
        """Parse the whole line.

        Blank input yields the empty polynomial. Anything left over after a
        complete expression, other than a line terminator, is an error.
        """
        start = time.perf_counter()
        while self._kind() is TokenKind.NEWLINE:
            self._advance()
        if self._kind() is TokenKind.END:
            return Polynomial([], self.ring)
        poly = self.parse_poly()
        self.expect_end()
        _logger.debug("parsed %r in %.5fs", self.line, time.perf_counter() - start)
        return poly


def parse_polynomial(expr: str, ring: PolynomialRing = DEFAULT_RING) -> Polynomial:
    return Parser(expr, ring).parse()


def parse_monomial(expr: str, ring: PolynomialRing = DEFAULT_RING) -> Monomial:
    parser = Parser(expr, ring)
    m = parser.parse_monomial()
    parser.expect_end()
    return m
