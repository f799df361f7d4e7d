# coding: utf-8

from .utils import get_digits


MINUS_SIGN = '−'
FRACTION_SLASH = '⁄'

SUPERSCRIPT_DIGITS = (
    '⁰', '¹', '²', '³', '⁴',
    '⁵', '⁶', '⁷', '⁸', '⁹',
)
SUBSCRIPT_DIGITS = tuple(chr(0x2080 + k) for k in range(10))

# denominator -> numerator -> precomposed glyph
VULGAR_FRACTIONS = {
    2: {1: '½'},
    3: {1: '⅓', 2: '⅔'},
    4: {1: '¼', 3: '¾'},
    5: {1: '⅕', 2: '⅖', 3: '⅗', 4: '⅘'},
    6: {1: '⅙', 5: '⅚'},
    7: {1: '⅐'},
    8: {1: '⅛', 3: '⅜', 5: '⅝', 7: '⅞'},
    9: {1: '⅑'},
    10: {1: '⅒'},
}


def get_vulgar_char(n, d):
    """Single precomposed character for n/d, or None if Unicode has none."""
    return VULGAR_FRACTIONS.get(d, {}).get(n)


def to_superscript(n):
    return ''.join(SUPERSCRIPT_DIGITS[k] for k in get_digits(n))


def to_subscript(n):
    return ''.join(SUBSCRIPT_DIGITS[k] for k in get_digits(n))


def compose_fraction(n, d):
    """
    Render n/d as one Unicode token.

    Uses the precomposed vulgar fraction when there is one, e.g. ½,
    otherwise superscript numerator, fraction slash, subscript denominator: ²⁄₄₃.
    """
    char = get_vulgar_char(n, d)
    if char is not None:
        return char
    return to_superscript(n) + FRACTION_SLASH + to_subscript(d)
