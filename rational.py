from __future__ import annotations
from fractions import Fraction

class Rational:
	__slots__ = ("_f",)
	def __init__(self, num: int | str | Fraction, den: int | None = None) -> None:
		if isinstance(num, Fraction):
			self._f = num
		elif isinstance(num, str):
			# decimal literal text, e.g. "2.25"
			self._f = Fraction(num)
		else:
			self._f = Fraction(num, 1 if den is None else den)
	@staticmethod
	def _coerce(other: Rational | int) -> Fraction:
		if isinstance(other, Rational):
			return other._f
		return Fraction(other)
	def __add__(self, other: Rational | int) -> Rational:
		return Rational(self._f + Rational._coerce(other))
	def __radd__(self, other: int) -> Rational:
		return Rational(Rational._coerce(other) + self._f)
	def __sub__(self, other: Rational | int) -> Rational:
		return Rational(self._f - Rational._coerce(other))
	def __rsub__(self, other: int) -> Rational:
		return Rational(Rational._coerce(other) - self._f)
	def __mul__(self, other: Rational | int) -> Rational:
		return Rational(self._f * Rational._coerce(other))
	def __rmul__(self, other: int) -> Rational:
		return Rational(Rational._coerce(other) * self._f)
	def __truediv__(self, other: Rational | int) -> Rational:
		f = Rational._coerce(other)
		if f == 0:
			raise ZeroDivisionError("division by zero")
		return Rational(self._f / f)
	def __neg__(self) -> Rational:
		return Rational(-self._f)
	def __abs__(self) -> Rational:
		return Rational(abs(self._f))
	def __pow__(self, exp: int) -> Rational:
		if exp == 0:
			return Rational(1,1)
		return Rational(self._f ** exp)
	def __eq__(self, other: object) -> bool:
		if isinstance(other, int):
			return self._f == other
		if not isinstance(other, Rational):
			return False
		return self._f == other._f
	def __hash__(self) -> int:
		return hash(self._f)
	def __lt__(self, other: Rational | int) -> bool:
		return self._f < Rational._coerce(other)
	def __le__(self, other: Rational | int) -> bool:
		return self._f <= Rational._coerce(other)
	def __gt__(self, other: Rational | int) -> bool:
		return self._f > Rational._coerce(other)
	def __ge__(self, other: Rational | int) -> bool:
		return self._f >= Rational._coerce(other)
	def __float__(self) -> float:
		return self._f.numerator / self._f.denominator
	def is_zero(self) -> bool:
		return self._f == 0
	def is_int(self) -> bool:
		return self._f.denominator == 1
	def numerator(self) -> int:
		return self._f.numerator
	def denominator(self) -> int:
		return self._f.denominator
	def to_string(self) -> str:
		if self._f.denominator == 1:
			return str(self._f.numerator)
		return f"{self._f.numerator}/{self._f.denominator}"
	def to_decimal(self) -> str | None:
		"""Exact positional text, or None when the denominator has a prime other than 2 or 5."""
		n, d = self._f.numerator, self._f.denominator
		if d == 1:
			return str(n)
		rest, twos, fives = d, 0, 0
		while rest % 2 == 0:
			rest //= 2
			twos += 1
		while rest % 5 == 0:
			rest //= 5
			fives += 1
		if rest != 1:
			return None
		digits = max(twos, fives)
		whole, frac = divmod(abs(n) * 10 ** digits // d, 10 ** digits)
		sign = "-" if n < 0 else ""
		return f"{sign}{whole}.{frac:0{digits}d}"
	def __str__(self) -> str:
		return self.to_string()
	def __repr__(self) -> str:
		return f"Rational({self._f.numerator}, {self._f.denominator})"
