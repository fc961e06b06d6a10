import itertools
import unittest

from errors import InvalidSyntaxError, RingError
from monomial import Monomial
from rational import Rational
from rings import DEFAULT_RING, PolynomialRing, RationalField

QQ = PolynomialRing(RationalField())


class TestMonomialConstruction(unittest.TestCase):

    def test_missing_slots_are_zero(self):
        m = Monomial(1.0, [1])
        self.assertEqual(m.powers, [1, 0, 0])
        self.assertEqual(m.power(2), 0)
        self.assertEqual(m.degree(), 1)
        self.assertEqual(m, Monomial(1.0, [1, 0, 0]))

    def test_invalid_powers(self):
        with self.assertRaises(RingError):
            Monomial(1.0, [-1])
        with self.assertRaises(RingError):
            Monomial(1.0, [1, 1, 1, 1])

    def test_from_string(self):
        m = Monomial.from_string("3.5x^2yz^5\n")
        self.assertEqual(m.coefficient(), 3.5)
        self.assertEqual(m.degree(), 8)
        self.assertEqual(m.powers, [2, 1, 5])
        self.assertEqual(Monomial.from_string("xyz").powers, [1, 1, 1])
        self.assertEqual(Monomial.from_string("-y").coefficient(), -1.0)

    def test_repeated_variable_overwrites(self):
        self.assertEqual(Monomial.from_string("xx").powers, [1, 0, 0])
        self.assertEqual(Monomial.from_string("x^2x^3").powers, [3, 0, 0])
        self.assertEqual(Monomial.from_string("2x^3yx").powers, [1, 1, 0])

    def test_from_string_rejects_trailing_input(self):
        with self.assertRaises(InvalidSyntaxError):
            Monomial.from_string("x + 1")

    def test_vmap(self):
        self.assertEqual(Monomial(2.0, [0, 3, 1]).vmap(), {"y": 3, "z": 1})
        self.assertEqual(Monomial(2.0, [0, 3, 1]).degree_var("y"), 3)


class TestMonomialOrdering(unittest.TestCase):

    def test_higher_degree_first(self):
        self.assertEqual(Monomial(1.0, [1, 0, 0]).compare(Monomial(1.0, [0, 2, 0])), 1)
        self.assertEqual(Monomial(1.0, [0, 2, 0]).compare(Monomial(1.0, [1, 0, 0])), -1)

    def test_earlier_slot_breaks_ties(self):
        x2 = Monomial(1.0, [2, 0, 0])
        xy = Monomial(1.0, [1, 1, 0])
        yz = Monomial(1.0, [0, 1, 1])
        z2 = Monomial(1.0, [0, 0, 2])
        self.assertEqual(x2.compare(xy), -1)
        self.assertEqual(xy.compare(yz), -1)
        self.assertEqual(yz.compare(z2), -1)
        self.assertTrue(x2 < z2)

    def test_same_term_ignores_coefficient(self):
        a = Monomial(2.0, [1, 1, 0])
        b = Monomial(-5.0, [1, 1])
        self.assertEqual(a.compare(b), 0)
        self.assertTrue(a.same_term(b))
        self.assertNotEqual(a, b)

    def test_order_is_total_and_transitive(self):
        terms = [Monomial(1.0, list(p)) for p in itertools.product(range(3), repeat=3)]
        for a, b in itertools.product(terms, repeat=2):
            self.assertEqual(a.compare(b), -b.compare(a))
            self.assertEqual(a.compare(b) == 0, a.powers == b.powers)
        for a, b, c in itertools.product(terms[:12], repeat=3):
            if a.compare(b) < 0 and b.compare(c) < 0:
                self.assertLess(a.compare(c), 0)


class TestMonomialArithmetic(unittest.TestCase):

    def test_multiplication(self):
        m = Monomial(2.0, [1, 0, 1]) * Monomial(3.0, [0, 2, 0])
        self.assertEqual(m.coefficient(), 6.0)
        self.assertEqual(m.powers, [1, 2, 1])

    def test_zero_product_collapses(self):
        m = Monomial(0.0, [1, 1, 0]) * Monomial(3.0, [2, 0, 0])
        self.assertTrue(m.is_zero())
        self.assertEqual(m.powers, [0, 0, 0])
        self.assertEqual(m.degree(), 0)

    def test_scalar(self):
        m = Monomial(2.0, [1, 0, 0])
        self.assertEqual(m.scale(3.0), Monomial(6.0, [1, 0, 0]))
        self.assertEqual(m * 3.0, Monomial(6.0, [1, 0, 0]))
        self.assertEqual(3.0 * m, Monomial(6.0, [1, 0, 0]))
        self.assertEqual(-m, Monomial(-2.0, [1, 0, 0]))
        self.assertEqual(m.coefficient(), 2.0)

    def test_rings_must_agree(self):
        xw = PolynomialRing(DEFAULT_RING.coeff_ring, ("x", "w"))
        with self.assertRaises(RingError):
            Monomial(1.0, [1], xw) * Monomial(1.0, [1])
        with self.assertRaises(RingError):
            Monomial(Rational(1, 2), [1], QQ) * Monomial(1.0, [1])

    def test_rational_coefficients(self):
        m = Monomial(Rational(1, 2), [1], QQ) * Monomial(Rational(2, 3), [0, 1], QQ)
        self.assertEqual(m.coefficient(), Rational(1, 3))
        self.assertEqual(m.to_string(), "1/3xy")


class TestMonomialRendering(unittest.TestCase):

    def test_unit_coefficient_is_dropped(self):
        self.assertEqual(Monomial(1.0, [1, 0, 0]).to_string(), "x")
        self.assertEqual(Monomial(-1.0, [0, 2, 0]).to_string(), "-y^2")

    def test_constants_keep_their_coefficient(self):
        self.assertEqual(Monomial(1.0, []).to_string(), "1")
        self.assertEqual(Monomial(-1.0, []).to_string(), "-1")
        self.assertEqual(Monomial(0.0, []).to_string(), "0")

    def test_general_terms(self):
        self.assertEqual(Monomial(-3.5, [2, 1, 5]).to_string(), "-3.5x^2yz^5")
        self.assertEqual(str(Monomial(2.0, [1, 0, 1])), "2xz")
        self.assertEqual(Monomial(2.0, [1, 0, 1]).magnitude_expr(), "2xz")
        self.assertEqual(Monomial(-2.0, [1, 0, 1]).magnitude_expr(), "2xz")


if __name__ == "__main__":
    unittest.main()
