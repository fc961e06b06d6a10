from __future__ import annotations
from bisect import bisect_left
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import numpy as np

from errors import RingError
from monomial import Monomial
from rings import DEFAULT_RING, PolynomialRing, T


@dataclass(eq=False)
class Polynomial(Generic[T]):
    """Terms kept sorted by the canonical term order, with like terms merged.

    Every term enters through `add_monomial`/`sub_monomial`, which keeps the
    list strictly ordered. Terms whose coefficient cancels to zero stay in the
    list; only rendering, equality and `prune()` look past them.
    """

    terms: List[Monomial] = field(default_factory=list)
    ring: PolynomialRing = DEFAULT_RING

    def __post_init__(self) -> None:
        given = list(self.terms)
        self.terms = []
        for m in given:
            self.add_monomial(m)

    @staticmethod
    def from_monomials(
        monoms: Iterable[Monomial], ring: Optional[PolynomialRing] = None
    ) -> "Polynomial":
        monoms = list(monoms)
        if ring is None:
            ring = monoms[0].ring if monoms else DEFAULT_RING
        return Polynomial(monoms, ring)

    @staticmethod
    def from_string(text: str, ring: PolynomialRing = DEFAULT_RING) -> "Polynomial":
        # Local import to avoid circular dependency at module load time
        from parser import parse_polynomial

        return parse_polynomial(text, ring)

    @staticmethod
    def one(ring: PolynomialRing = DEFAULT_RING) -> "Polynomial":
        return Polynomial([Monomial.constant(ring.coeff_ring.one(), ring)], ring)

    @staticmethod
    def variable(name: str, ring: PolynomialRing = DEFAULT_RING) -> "Polynomial":
        return Polynomial([Monomial.variable(name, ring)], ring)

    def copy(self) -> "Polynomial":
        p = Polynomial([], self.ring)
        p.terms = [m.copy() for m in self.terms]
        return p

    def _check_ring(self, m: Monomial) -> None:
        if m.ring != self.ring:
            raise RingError(f"term of {m.ring} does not belong to {self.ring}")

    def _locate(self, m: Monomial) -> Tuple[int, bool]:
        key = m.sort_key()
        pos = bisect_left(self.terms, key, key=Monomial.sort_key)
        found = pos < len(self.terms) and self.terms[pos].sort_key() == key
        return pos, found

    def add_monomial(self, m: Monomial) -> None:
        self._check_ring(m)
        pos, found = self._locate(m)
        if found:
            cur = self.terms[pos]
            cur.coeff = cur.coeff + m.coeff
        else:
            self.terms.insert(pos, Monomial(m.coeff, list(m.powers), self.ring))

    def sub_monomial(self, m: Monomial) -> None:
        self._check_ring(m)
        pos, found = self._locate(m)
        if found:
            cur = self.terms[pos]
            cur.coeff = cur.coeff - m.coeff
        else:
            neg = self.ring.coeff_ring.negate(m.coeff)
            self.terms.insert(pos, Monomial(neg, list(m.powers), self.ring))

    def _terms_of(self, other: Any) -> List[Monomial]:
        if isinstance(other, Polynomial):
            return other.terms
        if isinstance(other, Monomial):
            return [other]
        # a bare scalar is a constant term
        return [Monomial.constant(other, self.ring)]

    def __iadd__(self, other: Any) -> "Polynomial":
        for m in list(self._terms_of(other)):
            self.add_monomial(m)
        return self

    def __isub__(self, other: Any) -> "Polynomial":
        for m in list(self._terms_of(other)):
            self.sub_monomial(m)
        return self

    def __add__(self, rhs: Any) -> "Polynomial":
        res = self.copy()
        res += rhs
        return res

    def __radd__(self, lhs: Any) -> "Polynomial":
        return self + lhs

    def __sub__(self, rhs: Any) -> "Polynomial":
        res = self.copy()
        res -= rhs
        return res

    def __rsub__(self, lhs: Any) -> "Polynomial":
        return -self + lhs

    def __mul__(self, rhs: Any) -> "Polynomial":
        if not isinstance(rhs, (Polynomial, Monomial)):
            res = self.copy()
            res.scale(rhs)
            return res
        prod = Polynomial([], self.ring)
        for a in self.terms:
            for b in self._terms_of(rhs):
                prod.add_monomial(a * b)
        return prod

    def __rmul__(self, lhs: Any) -> "Polynomial":
        if isinstance(lhs, Monomial):
            return self * lhs
        res = self.copy()
        for m in res.terms:
            m.coeff = lhs * m.coeff
        return res

    def __neg__(self) -> "Polynomial":
        res = self.copy()
        res.scale(self.ring.coeff_ring.negate(self.ring.coeff_ring.one()))
        return res

    def scale(self, k: T) -> None:
        """Multiply every stored coefficient by `k` in place."""
        for m in self.terms:
            m.coeff = m.coeff * k

    def pow(self, exp: int) -> "Polynomial":
        if not isinstance(exp, int) or exp < 0:
            raise RingError(f"Exponent must be a non-negative integer, got {exp!r}")
        if exp == 0:
            return Polynomial.one(self.ring)
        res = self.copy()
        for _ in range(exp - 1):
            res = res * self
        return res

    def __pow__(self, exp: int) -> "Polynomial":
        return self.pow(exp)

    def prune(self) -> None:
        """Drop the terms whose coefficient is zero."""
        self.terms = [m for m in self.terms if not m.is_zero()]

    def nonzero_terms(self) -> List[Monomial]:
        return [m for m in self.terms if not m.is_zero()]

    def is_zero(self) -> bool:
        return all(m.is_zero() for m in self.terms)

    def is_constant(self) -> bool:
        return all(m.is_constant() for m in self.nonzero_terms())

    def degree(self) -> int:
        return max((m.degree() for m in self.nonzero_terms()), default=0)

    def degree_var(self, var: str) -> int:
        return max((m.degree_var(var) for m in self.nonzero_terms()), default=0)

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[Monomial]:
        return iter(self.terms)

    def __getitem__(self, idx: int) -> Monomial:
        return self.terms[idx]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return (
            self.ring == other.ring
            and self.nonzero_terms() == other.nonzero_terms()
        )

    def _power_of(self, value: Any, exp: int) -> Any:
        res = value
        for _ in range(exp - 1):
            res = res * value
        return res

    def eval(self, env: Union[Mapping, Sequence]) -> T:
        """Evaluate in the coefficient ring.

        `env` maps variable names to values, or is a sequence indexed by slot.
        """
        cr = self.ring.coeff_ring
        total = cr.zero()
        for m in self.nonzero_terms():
            r = m.coeff
            for slot, exp in enumerate(m.powers):
                if exp == 0:
                    continue
                name = self.ring.symbol(slot)
                if isinstance(env, Mapping):
                    if name not in env:
                        raise KeyError(f"Variable '{name}' not in env")
                    value = env[name]
                else:
                    value = env[slot]
                r = r * self._power_of(value, exp)
            total = total + r
        return total

    def eval_many(self, points: Any) -> np.ndarray:
        """Float evaluation at many points at once.

        `points` has shape (n, nvars); a 1-d array is accepted for a
        single-variable ring.
        """
        pts = np.asarray(points, dtype=float)
        if pts.ndim == 1 and self.ring.nvars == 1:
            pts = pts.reshape(-1, 1)
        if pts.ndim != 2 or pts.shape[1] != self.ring.nvars:
            raise ValueError(
                f"expected points of shape (n, {self.ring.nvars}), got {pts.shape}"
            )
        cr = self.ring.coeff_ring
        out = np.zeros(pts.shape[0])
        for m in self.nonzero_terms():
            out += cr.to_float(m.coeff) * np.prod(pts ** np.asarray(m.powers), axis=1)
        return out

    def derivative(self, var: str) -> "Polynomial":
        slot = self.ring.index(var)
        cr = self.ring.coeff_ring
        res = Polynomial([], self.ring)
        for m in self.nonzero_terms():
            e = m.powers[slot]
            if e == 0:
                continue
            powers = list(m.powers)
            powers[slot] = e - 1
            res.add_monomial(Monomial(m.coeff * cr.from_int(e), powers, self.ring))
        return res

    def to_string(self) -> str:
        parts: List[str] = []
        for m in self.terms:
            if m.is_zero():
                continue
            if not parts:
                parts.append(m.to_string())
            elif m.is_negative():
                parts.append(f" - {m.magnitude_expr()}")
            else:
                parts.append(f" + {m.magnitude_expr()}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.to_string()
