import unittest

from errors import RingError
from rational import Rational
from rings import (
    DEFAULT_RING,
    DEFAULT_VARIABLES,
    MAX_VARIABLES,
    IntegerRing,
    PolynomialRing,
    RationalField,
    RealField,
    RingValue,
    T,
)


class TestCoefficientRings(unittest.TestCase):

    def test_identities(self):
        for ring in (IntegerRing(), RealField(), RationalField()):
            self.assertTrue(ring.is_zero(ring.zero()))
            self.assertTrue(ring.is_one(ring.one()))
            self.assertEqual(ring.one() + ring.zero(), ring.one())
            self.assertEqual(ring.negate(ring.one()) + ring.one(), ring.zero())
            self.assertTrue(ring.is_negative(ring.negate(ring.one())))
            self.assertEqual(ring.absolute(ring.negate(ring.from_int(3))), ring.from_int(3))

    def test_literals(self):
        self.assertEqual(IntegerRing().from_literal("42"), 42)
        with self.assertRaises(ValueError):
            IntegerRing().from_literal("4.2")
        self.assertEqual(RealField().from_literal("4.25"), 4.25)
        self.assertEqual(RationalField().from_literal("2.25"), Rational(9, 4))

    def test_real_format(self):
        f = RealField()
        self.assertEqual(f.format(2.0), "2")
        self.assertEqual(f.format(0.5), "0.5")
        self.assertEqual(f.format(1e-07), "0.0000001")
        self.assertEqual(f.format(1e20), "100000000000000000000")

    def test_rational_format(self):
        self.assertEqual(RationalField().format(Rational(3, 6)), "0.5")
        self.assertEqual(RationalField().format(Rational(4, 2)), "2")
        self.assertEqual(RationalField().format(Rational(-3, 40)), "-0.075")
        self.assertEqual(RationalField().format(Rational(1, 3)), "1/3")

    def test_real_literal_out_of_range(self):
        with self.assertRaises(ValueError):
            RealField().from_literal("1" * 400)

    def test_ring_equality(self):
        self.assertEqual(RealField(), RealField())
        self.assertNotEqual(RealField(), RationalField())
        self.assertEqual(DEFAULT_RING, PolynomialRing(RealField()))

    def test_ring_value_protocol(self):
        self.assertIs(T.__bound__, RingValue)
        self.assertIsInstance(3, RingValue)
        self.assertIsInstance(2.5, RingValue)
        self.assertIsInstance(Rational(1, 2), RingValue)


class TestPolynomialRing(unittest.TestCase):

    def test_default(self):
        self.assertEqual(DEFAULT_RING.variables, DEFAULT_VARIABLES)
        self.assertEqual(DEFAULT_RING.nvars, 3)
        self.assertEqual(DEFAULT_RING.index("z"), 2)
        self.assertEqual(DEFAULT_RING.symbol(1), "y")
        self.assertEqual(str(DEFAULT_RING), "RR[x,y,z]")
        with self.assertRaises(KeyError):
            DEFAULT_RING.index("w")

    def test_eight_variables(self):
        ring = PolynomialRing(IntegerRing(), tuple("xyzwuvst"))
        self.assertEqual(ring.nvars, MAX_VARIABLES)

    def test_invalid_alphabets(self):
        with self.assertRaises(RingError):
            PolynomialRing(RealField(), ())
        with self.assertRaises(RingError):
            PolynomialRing(RealField(), ("x", "x"))
        with self.assertRaises(RingError):
            PolynomialRing(RealField(), ("a",))
        with self.assertRaises(RingError):
            PolynomialRing(RealField(), ("xy",))


class TestRational(unittest.TestCase):

    def test_arithmetic(self):
        self.assertEqual(Rational(1, 3) + Rational(1, 3), Rational(2, 3))
        self.assertEqual(Rational(4, 5) - Rational(6, 7), Rational(-2, 35))
        self.assertEqual(Rational(3, 2) * Rational(-1, 2), Rational(-3, 4))
        self.assertEqual(Rational(2, 3) / Rational(3, 4), Rational(8, 9))
        self.assertEqual(2 * Rational(1, 4), Rational(1, 2))
        self.assertEqual(Rational(1, 2) ** 3, Rational(1, 8))
        self.assertEqual(abs(Rational(-1, 2)), Rational(1, 2))

    def test_division_by_zero(self):
        with self.assertRaises(ZeroDivisionError):
            Rational(1, 2) / Rational(0, 1)

    def test_ordering_and_strings(self):
        self.assertLess(Rational(5, 3), Rational(7, 4))
        self.assertEqual(Rational("0.75").to_string(), "3/4")
        self.assertEqual(repr(Rational(3, 4)), "Rational(3, 4)")
        self.assertEqual(Rational(-5, 4).to_decimal(), "-1.25")
        self.assertEqual(Rational(7, 1).to_decimal(), "7")
        self.assertIsNone(Rational(2, 7).to_decimal())
        self.assertEqual(float(Rational(3, 4)), 0.75)


if __name__ == "__main__":
    unittest.main()
