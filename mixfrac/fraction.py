from decimal import Decimal
import logging
import numbers

from .utils import is_real, simplify, get_float_to_int_multiple
from .glyphs import MINUS_SIGN, compose_fraction


class InvalidDenominator(ZeroDivisionError):
    """Fraction would get a zero denominator."""


def resolve_sign(a, b, sign=None):
    """
    Decide the sign of a fraction being built.

    sign may be:
        None    -- sign of a/b, i.e., a and b of different signs
        bool    -- taken as is
        number  -- negative iff sign < 0
    anything else is coerced by its truthiness.
    """
    if sign is None:
        return (a < 0) != (b < 0)
    # bool first: it is an Integral too
    if isinstance(sign, bool):
        return sign
    if is_real(sign):
        return sign < 0
    return bool(sign)


class Fraction:
    """
    Exact rational number: sign, numerator and denominator.

    Immutable and hashable.
    Always kept reduced: n >= 0, d > 0, gcd(n, d) = 1, and zero is 0/1.
    The sign is stored apart in .negative, so n and d are magnitudes.
    Terms may be given as decimals, e.g., Fraction(1, 1.5) is 2/3.

    Arithmetic operators accept int, float and Decimal operands on either side;
    ==, < and friends compare Fractions only, so Fraction(2, 1) == 2 is False.
    """

    ascii_minus = '-'
    unicode_minus = MINUS_SIGN

    def __init__(self, a, b, sign=None):
        """
        Create a Fraction instance.

        Params:
            a, b:   numerator and denominator, ints or decimals (float, Decimal)
            sign:   None to take the sign of a/b, or a bool/number forcing it
                    (see resolve_sign)

        Raises InvalidDenominator if b == 0, ValueError for inf, nan or a rational
        without a finite decimal expansion, and OverflowError when a scaled
        float leaves the float range, e.g., Fraction(1e308, 0.5).
        """
        if b == 0:
            raise InvalidDenominator("Denominator cannot be zero")

        self.negative = resolve_sign(a, b, sign)

        a = abs(a)
        b = abs(b)
        multiple = get_float_to_int_multiple(a, b)
        if multiple != 1:
            logging.debug('scale decimal terms %s/%s by %d', a, b, multiple)
        self.n, self.d = simplify(int(round(a * multiple)), int(round(b * multiple)))

    @classmethod
    def from_decimal(cls, x):
        return cls(x, 1)

    @classmethod
    def _coerce(cls, x):
        """Promote an operand of arithmetic; None if it is not supported."""
        if isinstance(x, cls):
            return x
        elif isinstance(x, numbers.Integral):
            return cls(x, 1)
        elif isinstance(x, (float, Decimal)):
            return cls.from_decimal(x)
        return None

    def is_negative(self):
        return self.negative

    def sign_multiplier(self):
        return -1 if self.negative else 1

    def numerator(self):
        return self.n

    def denominator(self):
        return self.d

    def mixed_integer(self):
        """Whole part of a mixed number, e.g., 1 for 3/2."""
        return self.n // self.d if self.n > self.d else 0

    def mixed_numerator(self):
        """Numerator of the proper part of a mixed number, e.g., 1 for 3/2."""
        return self.n % self.d if self.n > self.d else self.n

    def parts(self):
        return (self.n, self.d)

    def mixed_parts(self):
        return (self.mixed_integer(), self.mixed_numerator(), self.d)

    def to_float(self):
        return (self.n / self.d) * self.sign_multiplier()

    def clone(self):
        return type(self)(self.n, self.d, self.negative)

    def absolute(self):
        return type(self)(self.n, self.d, False)

    def _signed_n(self):
        return self.n * self.sign_multiplier()

    #
    # arithmetic: raw terms go through __init__ again, which reduces them
    #

    def add(self, other):
        a1, b1 = self._signed_n(), self.d
        a2, b2 = other._signed_n(), other.d
        return type(self)(a1 * b2 + a2 * b1, b1 * b2)

    def subtract(self, other):
        a1, b1 = self._signed_n(), self.d
        a2, b2 = other._signed_n(), other.d
        return type(self)(a1 * b2 - a2 * b1, b1 * b2)

    def multiply(self, other):
        return type(self)(self.n * other.n, self.d * other.d, self.negative != other.negative)

    def divide(self, other):
        """Multiply by the reciprocal; InvalidDenominator if other is zero."""
        return type(self)(self.n * other.d, self.d * other.n, self.negative != other.negative)

    #
    # rendering
    #

    def to_string(self):
        """Plain-text mixed number: '1/2', '1 1/2', '-3'."""
        prefix = self.ascii_minus if self.negative else ''
        if self.d == 1:
            return prefix + str(self.n)

        i = self.mixed_integer()
        if i > 0:
            prefix += '{} '.format(i)

        return prefix + '{}/{}'.format(self.mixed_numerator(), self.d)

    def to_unicode_string(self):
        """Unicode mixed number: '½', '1½', '−²⁄₄₃'."""
        prefix = self.unicode_minus if self.negative else ''
        if self.d == 1:
            return prefix + str(self.n)

        i = self.mixed_integer()
        if i > 0:
            prefix += str(i)

        return prefix + compose_fraction(self.mixed_numerator(), self.d)

    #
    # python protocol
    #

    def __add__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __neg__(self):
        return type(self)(self.n, self.d, not self.negative)

    def __pos__(self):
        return self.clone()

    def __abs__(self):
        return self.absolute()

    def __float__(self):
        return self.to_float()

    # truncates toward zero, like int(float)
    def __int__(self):
        return (self.n // self.d) * self.sign_multiplier()

    def __bool__(self):
        return self.n != 0

    def _key(self):
        return (self._signed_n(), self.d)

    def __eq__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __lt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._signed_n() * other.d < other._signed_n() * self.d

    def __le__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._signed_n() * other.d <= other._signed_n() * self.d

    def __gt__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._signed_n() * other.d > other._signed_n() * self.d

    def __ge__(self, other):
        if not isinstance(other, Fraction):
            return NotImplemented
        return self._signed_n() * other.d >= other._signed_n() * self.d

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        if self.negative and self.n == 0:
            return 'Fraction(0, 1, True)'
        return 'Fraction({}, {})'.format(self._signed_n(), self.d)
