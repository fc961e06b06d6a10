from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Tuple
from errors import RingError
from rings import DEFAULT_RING, PolynomialRing, T

@dataclass(eq=False)
class Monomial(Generic[T]):
	"""A coefficient times a power vector, one non-negative power per ring variable.

	The power vector is padded with zeros up to the number of ring variables,
	so two monomials of the same ring always have vectors of equal length.
	"""
	coeff: T
	powers: List[int] = field(default_factory=list)
	ring: PolynomialRing = DEFAULT_RING
	def __post_init__(self) -> None:
		powers = list(self.powers)
		n = self.ring.nvars
		if len(powers) > n:
			raise RingError(f"{len(powers)} powers given for a ring with {n} variables")
		for p in powers:
			if not isinstance(p, int) or p < 0:
				raise RingError(f"powers must be non-negative integers, got {p!r}")
		self.powers = powers + [0] * (n - len(powers))
	@staticmethod
	def constant(value: Any, ring: PolynomialRing = DEFAULT_RING) -> Monomial:
		return Monomial(value, [], ring)
	@staticmethod
	def variable(name: str, ring: PolynomialRing = DEFAULT_RING) -> Monomial:
		powers = [0] * ring.nvars
		powers[ring.index(name)] = 1
		return Monomial(ring.coeff_ring.one(), powers, ring)
	@staticmethod
	def from_string(text: str, ring: PolynomialRing = DEFAULT_RING) -> Monomial:
		# Local import to avoid circular dependency at module load time
		from parser import parse_monomial
		return parse_monomial(text, ring)
	def coefficient(self) -> T:
		return self.coeff
	def power(self, slot: int) -> int:
		return self.powers[slot] if slot < len(self.powers) else 0
	def degree(self) -> int:
		return sum(self.powers)
	def degree_var(self, var: str) -> int:
		return self.powers[self.ring.index(var)]
	def is_constant(self) -> bool:
		return self.degree() == 0
	def is_zero(self) -> bool:
		return self.ring.coeff_ring.is_zero(self.coeff)
	def vmap(self) -> Dict[str,int]:
		return {self.ring.symbol(i): p for i, p in enumerate(self.powers) if p}
	def copy(self) -> Monomial:
		return Monomial(self.coeff, list(self.powers), self.ring)
	def sort_key(self) -> Tuple[int, Tuple[int, ...]]:
		# higher degree first, then higher power in the earlier slot first
		return (-self.degree(), tuple(-p for p in self.powers))
	def compare(self, other: Monomial) -> int:
		"""-1 if self sorts before other, 1 if after, 0 if they are the same term."""
		a, b = self.sort_key(), other.sort_key()
		if a < b:
			return -1
		if a > b:
			return 1
		return 0
	def same_term(self, other: Monomial) -> bool:
		return self.compare(other) == 0
	def __lt__(self, other: Monomial) -> bool:
		return self.compare(other) < 0
	def scale(self, k: T) -> Monomial:
		return Monomial(self.coeff * k, list(self.powers), self.ring)
	def __mul__(self, other: Any) -> Monomial:
		from polynomial import Polynomial
		if isinstance(other, Polynomial):
			return NotImplemented
		if not isinstance(other, Monomial):
			return self.scale(other)
		if other.ring != self.ring:
			raise RingError(f"cannot multiply terms of {self.ring} and {other.ring}")
		coeff = self.coeff * other.coeff
		if self.ring.coeff_ring.is_zero(coeff):
			# canonical zero term
			return Monomial(coeff, [], self.ring)
		powers = [a + b for a, b in zip(self.powers, other.powers)]
		return Monomial(coeff, powers, self.ring)
	def __rmul__(self, other: Any) -> Monomial:
		return Monomial(other * self.coeff, list(self.powers), self.ring)
	def __neg__(self) -> Monomial:
		return Monomial(self.ring.coeff_ring.negate(self.coeff), list(self.powers), self.ring)
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Monomial):
			return NotImplemented
		return self.powers == other.powers and self.coeff == other.coeff
	def is_negative(self) -> bool:
		return self.ring.coeff_ring.is_negative(self.coeff)
	def term_expr(self) -> str:
		parts: List[str] = []
		for name, exp in zip(self.ring.variables, self.powers):
			if exp == 0:
				continue
			parts.append(name if exp == 1 else f"{name}^{exp}")
		return "".join(parts)
	def magnitude_expr(self) -> str:
		"""The term without its sign; a unit magnitude is dropped unless the term is constant."""
		cr = self.ring.coeff_ring
		mag = cr.absolute(self.coeff)
		vars_part = self.term_expr()
		if vars_part and cr.is_one(mag):
			return vars_part
		return f"{cr.format(mag)}{vars_part}"
	def to_string(self) -> str:
		sign = "-" if self.is_negative() else ""
		return f"{sign}{self.magnitude_expr()}"
	def __str__(self) -> str:
		return self.to_string()
