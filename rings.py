from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Protocol, Tuple, TypeVar, runtime_checkable

import numpy as np

from errors import RingError
from rational import Rational

# Symbols the lexer recognizes as variables; a ring uses a prefix or subset of them.
VARIABLE_SYMBOLS = "xyzwuvst"
MAX_VARIABLES = 8
DEFAULT_VARIABLES: Tuple[str, ...] = ("x", "y", "z")


@runtime_checkable
class RingValue(Protocol):
    """What a coefficient must support: +, -, * and value equality (==).

    Identities, sign and text rendering are supplied by the CoefficientRing
    the value belongs to, since plain Python numbers carry no such methods.
    """

    def __add__(self, other: Any) -> Any:
        ...

    def __sub__(self, other: Any) -> Any:
        ...

    def __mul__(self, other: Any) -> Any:
        ...


T = TypeVar("T", bound=RingValue)


class CoefficientRing:
    name = "ring"

    def zero(self) -> Any:
        raise NotImplementedError

    def one(self) -> Any:
        raise NotImplementedError

    def from_literal(self, text: str) -> Any:
        """Interpret a numeric literal as lexed (digits, optionally '.' digits)."""
        raise NotImplementedError

    def from_int(self, n: int) -> Any:
        raise NotImplementedError

    def to_float(self, value: Any) -> float:
        return float(value)

    def is_zero(self, value: Any) -> bool:
        return value == self.zero()

    def is_one(self, value: Any) -> bool:
        return value == self.one()

    def is_negative(self, value: Any) -> bool:
        return value < self.zero()

    def negate(self, value: Any) -> Any:
        return self.zero() - value

    def absolute(self, value: Any) -> Any:
        return self.negate(value) if self.is_negative(value) else value

    def format(self, value: Any) -> str:
        return str(value)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def __str__(self) -> str:
        return self.name


class IntegerRing(CoefficientRing):
    name = "ZZ"

    def zero(self) -> int:
        return 0

    def one(self) -> int:
        return 1

    def from_literal(self, text: str) -> int:
        if "." in text:
            raise ValueError(f"decimal literal {text} is not an integer")
        return int(text)

    def from_int(self, n: int) -> int:
        return n


class RealField(CoefficientRing):
    name = "RR"

    def zero(self) -> float:
        return 0.0

    def one(self) -> float:
        return 1.0

    def from_literal(self, text: str) -> float:
        value = float(text)
        if not np.isfinite(value):
            raise ValueError(f"literal {text} is out of floating point range")
        return value

    def from_int(self, n: int) -> float:
        return float(n)

    def format(self, value: float) -> str:
        # positional notation keeps the output parseable ("2" not "2.0", no exponents)
        return np.format_float_positional(value, trim="-")


class RationalField(CoefficientRing):
    name = "QQ"

    def zero(self) -> Rational:
        return Rational(0, 1)

    def one(self) -> Rational:
        return Rational(1, 1)

    def from_literal(self, text: str) -> Rational:
        return Rational(text)

    def from_int(self, n: int) -> Rational:
        return Rational(n, 1)

    def format(self, value: Rational) -> str:
        # decimal literals only ever produce 2^a*5^b denominators, which print exactly
        text = value.to_decimal()
        return value.to_string() if text is None else text


@dataclass(frozen=True)
class PolynomialRing:
    """A coefficient ring together with the ordered variable alphabet.

    The position of a symbol in `variables` is its slot in every power vector,
    and slot order is the tie-break order used when sorting terms.
    """

    coeff_ring: CoefficientRing
    variables: Tuple[str, ...] = DEFAULT_VARIABLES

    def __post_init__(self) -> None:
        variables = tuple(self.variables)
        object.__setattr__(self, "variables", variables)
        if not 1 <= len(variables) <= MAX_VARIABLES:
            raise RingError(
                f"a ring needs between 1 and {MAX_VARIABLES} variables, got {len(variables)}"
            )
        if len(set(variables)) != len(variables):
            raise RingError(f"duplicate variables in {variables}")
        for v in variables:
            if len(v) != 1 or v not in VARIABLE_SYMBOLS:
                raise RingError(f"variable {v!r} is not one of {VARIABLE_SYMBOLS!r}")

    @property
    def nvars(self) -> int:
        return len(self.variables)

    def index(self, symbol: str) -> int:
        try:
            return self.variables.index(symbol)
        except ValueError:
            raise KeyError(f"Variable '{symbol}' not in ring {self}") from None

    def symbol(self, slot: int) -> str:
        return self.variables[slot]

    def __str__(self) -> str:
        return f"{self.coeff_ring}[{','.join(self.variables)}]"


DEFAULT_RING = PolynomialRing(RealField(), DEFAULT_VARIABLES)
