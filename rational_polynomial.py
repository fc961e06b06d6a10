from __future__ import annotations
from dataclasses import dataclass

from polynomial import Polynomial
from rings import DEFAULT_RING, PolynomialRing


@dataclass
class RationalPolynomial:
    """A numerator/denominator pair, kept exactly as given (no cancellation)."""

    numer: Polynomial
    denom: Polynomial

    def __post_init__(self) -> None:
        if self.denom.is_zero():
            raise ZeroDivisionError("denominator polynomial is zero")

    @staticmethod
    def from_strings(
        numer: str, denom: str, ring: PolynomialRing = DEFAULT_RING
    ) -> "RationalPolynomial":
        return RationalPolynomial(
            Polynomial.from_string(numer, ring), Polynomial.from_string(denom, ring)
        )

    def to_string(self) -> str:
        return f"({self.numer.to_string()})/({self.denom.to_string()})"

    def __str__(self) -> str:
        return self.to_string()
