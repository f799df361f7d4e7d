from decimal import Decimal
import math
import numbers


def is_real(x):
    """Real number, Decimal included (it is not registered as numbers.Real)."""
    return isinstance(x, (numbers.Real, Decimal))


def get_gcd(a, b):
    """Greatest common divisor of two non-negative integers, Euclid's way."""
    assert a >= 0 and b >= 0
    if a < b:
        a, b = b, a
    if b == 0:
        return a
    r = a % b
    while r > 0:
        a, b = b, r
        r = a % b
    return b


def simplify(a, b):
    """Divide both terms by their gcd; (0, b) collapses to (0, 1)."""
    g = get_gcd(a, b)
    return a // g, b // g


def has_finite_decimals(x):
    """Exact rational x terminates in base 10 iff its denominator is 2^i * 5^j."""
    q = x.denominator
    for p in (2, 5):
        while q % p == 0:
            q //= p
    return q == 1


def count_decimals(x):
    """
    Minimal number of decimal places that represents x exactly.

    Integral values have 0 places. For other reals (float, Decimal) it is
    the smallest d with round(x, d) == x.
    """
    if isinstance(x, numbers.Integral):
        return 0
    if not is_real(x):
        raise TypeError("Expected a real number, got {!r}".format(x))
    if not math.isfinite(x):
        raise ValueError("Can't scale non-finite value {!r}".format(x))
    if isinstance(x, numbers.Rational) and not has_finite_decimals(x):
        raise ValueError("{!r} has no finite decimal expansion".format(x))
    d = 0
    while round(x, d) != x:
        d += 1
    return d


def get_float_to_int_multiple(a, b):
    """Power of ten that turns both a and b into integers."""
    return 10 ** max(count_decimals(a), count_decimals(b))


def get_digits(n):
    """Decimal digits of abs(n), most significant first; 0 gives [0]."""
    n = abs(n)
    if n == 0:
        return [0]
    digits = []
    while n > 0:
        n, r = divmod(n, 10)
        digits.append(r)
    digits.reverse()
    return digits
