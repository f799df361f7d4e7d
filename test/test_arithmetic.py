from decimal import Decimal
import itertools
import unittest

from sympy import Rational

from mixfrac.fraction import Fraction, InvalidDenominator


def to_rational(f):
    return Rational(f.numerator() * f.sign_multiplier(), f.denominator())


class TestArithmetic(unittest.TestCase):
    def setUp(self):
        terms = [(0, 1), (1, 2), (-2, 3), (3, 4), (-7, 5), (12, 8), (5, -9), (-10, -4)]
        self.fractions = [Fraction(a, b) for a, b in terms]

    def test_add(self):
        f = Fraction(2, 3).add(Fraction(1, 4))
        assert f.parts() == (11, 12)
        assert not f.is_negative()
        assert Fraction(1, 5).add(Fraction(1, -5)) == Fraction(0, 1)

    def test_subtract(self):
        f = Fraction(2, 3).subtract(Fraction(2, 8))
        assert f.parts() == (5, 12)
        f = Fraction(1, 4).subtract(Fraction(2, 3))
        assert f.is_negative() and f.parts() == (5, 12)

    def test_multiply(self):
        f = Fraction(1, 2).multiply(Fraction(4, 16))
        assert f.parts() == (1, 8)
        assert Fraction(2, 3).multiply(Fraction(-1, 2)) == Fraction(-1, 3)
        assert Fraction(-2, 3).multiply(Fraction(-1, 2)) == Fraction(1, 3)

    def test_divide(self):
        f = Fraction(1, 2).divide(Fraction(1, 4))
        assert f.parts() == (2, 1)
        assert Fraction(1, 2).divide(Fraction(-1, 4)) == Fraction(-2, 1)

    def test_divide_by_zero(self):
        with self.assertRaises(InvalidDenominator):
            Fraction(1, 2).divide(Fraction(0, 3))
        with self.assertRaises(InvalidDenominator):
            Fraction(1, 2) / 0

    def test_results_are_new(self):
        x, y = Fraction(1, 2), Fraction(0, 1)
        for res in [x.add(y), x.subtract(y), x.multiply(Fraction(1, 1)), x.divide(Fraction(1, 1))]:
            assert res == x and res is not x
        assert x.parts() == (1, 2)

    def test_against_sympy(self):
        for x, y in itertools.product(self.fractions, repeat=2):
            rx, ry = to_rational(x), to_rational(y)
            self.assertEqual(to_rational(x.add(y)), rx + ry)
            self.assertEqual(to_rational(x.subtract(y)), rx - ry)
            self.assertEqual(to_rational(x.multiply(y)), rx * ry)
            if ry != 0:
                res = x.divide(y)
                self.assertEqual(to_rational(res), rx / ry)
                self.assertEqual(res.denominator(), (rx / ry).q)

    def test_operators(self):
        for x, y in itertools.product(self.fractions, repeat=2):
            assert x + y == x.add(y)
            assert x - y == x.subtract(y)
            assert x * y == x.multiply(y)
            if y:
                assert x / y == x.divide(y)

    def test_mixed_operands(self):
        assert Fraction(1, 2) + 1 == Fraction(3, 2)
        assert 1 + Fraction(1, 2) == Fraction(3, 2)
        assert 1 - Fraction(1, 4) == Fraction(3, 4)
        assert Fraction(1, 4) - 1 == Fraction(-3, 4)
        assert 2 * Fraction(1, 6) == Fraction(1, 3)
        assert 1 / Fraction(2, 3) == Fraction(3, 2)
        assert Fraction(1, 2) * 0.5 == Fraction(1, 4)
        assert 0.25 + Fraction(1, 2) == Fraction(3, 4)
        assert Fraction(1, 2) + Decimal('0.5') == Fraction(1, 1)
        assert Decimal('1.25') - Fraction(1, 4) == Fraction(1, 1)
        assert Fraction(1, 3) * Decimal('0.3') == Fraction(1, 10)
        with self.assertRaises(TypeError):
            Fraction(1, 2) + 'x'


if __name__ == "__main__":
    unittest.main()
