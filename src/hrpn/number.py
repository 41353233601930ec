'''
Hybrid rational numbers.

A number consists of several parts:

    (whole + numerator/denominator + correction) * 10**exponent

- whole is the integral part.
- numerator/denominator is a proper fraction.
- correction is a small floating point adjustment, in case the rational
  representation is not precise enough.
- exponent is a base-10 scale.

Numbers are immutable. Every operation returns a new, reduced number.
'''

from collections import namedtuple
import math

from .util import DivisionByZero


class HybridNumber(namedtuple('HybridNumber', ['whole',
                                               'numerator',
                                               'denominator',
                                               'exponent',
                                               'correction'])):
    '''
    Hybrid rational number value.

    == compares the parts exactly, the ordering operators compare values.
    '''
    __slots__ = ()

    def __new__(cls, whole=0, numerator=0, denominator=1, exponent=0,
                correction=0.0):
        return super().__new__(cls, whole, numerator, denominator, exponent,
                               correction)

    def mantissa(self):
        '''
        Value without the base-10 scale.

        Infinite when the whole part is beyond the float range.
        '''
        try:
            return self.whole + self.numerator / self.denominator \
                + self.correction
        except OverflowError:
            return math.copysign(math.inf, self.whole)

    def __float__(self):
        mantissa = self.mantissa()
        if math.isinf(mantissa) and self.whole and self.exponent < 0:
            # A huge whole part may still scale back into range
            return math.copysign(
                _pow10(math.log10(abs(self.whole)) + self.exponent),
                self.whole)
        try:
            scale = 10.0 ** self.exponent
        except OverflowError:
            return math.copysign(math.inf, mantissa) if mantissa else 0.0
        return mantissa * scale

    def __neg__(self):
        return negate(self)

    def __abs__(self):
        return negate(self) if float(self) < 0 else self

    def __add__(self, other):
        _check_operand('+', self, other)
        return add(self, other)

    # Both raise, otherwise tuple concatenation and repetition would answer
    def __radd__(self, other):
        _check_operand('+', other, self)

    def __rmul__(self, other):
        _check_operand('*', other, self)

    def __sub__(self, other):
        if not isinstance(other, HybridNumber):
            return NotImplemented
        return add(self, negate(other))

    def __mul__(self, other):
        _check_operand('*', self, other)
        return prod(self, other)

    def __truediv__(self, other):
        if not isinstance(other, HybridNumber):
            return NotImplemented
        return prod(self, inverse(other))

    def __lt__(self, other):
        if not isinstance(other, HybridNumber):
            return NotImplemented
        return float(self) < float(other)

    def __le__(self, other):
        if not isinstance(other, HybridNumber):
            return NotImplemented
        return float(self) <= float(other)

    def __gt__(self, other):
        if not isinstance(other, HybridNumber):
            return NotImplemented
        return float(self) > float(other)

    def __ge__(self, other):
        if not isinstance(other, HybridNumber):
            return NotImplemented
        return float(self) >= float(other)


ZERO = HybridNumber(0, 0, 1, 0, 0.0)
ONE = HybridNumber(1, 0, 1, 0, 0.0)


def _pow10(x):
    '''
    10.0**x, infinite past the float range.
    '''
    try:
        return 10.0 ** x
    except OverflowError:
        return math.inf


def _check_operand(symbol, left, right):
    '''
    Raise TypeError unless both operands are hybrid numbers.
    '''
    if not (isinstance(left, HybridNumber)
            and isinstance(right, HybridNumber)):
        raise TypeError(
            "unsupported operand type(s) for {}: '{}' and '{}'".format(
                symbol, type(left).__name__, type(right).__name__))


def negate(z):
    return z._replace(whole=-z.whole,
                      numerator=-z.numerator,
                      correction=-z.correction)


def reduce(z):
    '''
    Bring z into canonical form.

    Afterwards the denominator is positive, the fraction is proper and fully
    reduced, and the whole part and the fraction share a sign.

    Raises ZeroDivisionError for a zero denominator.
    '''
    whole, numerator, denominator, exponent, correction = z
    if denominator < 0:
        numerator, denominator = -numerator, -denominator
    sign = -1 if whole < 0 else 1
    whole, numerator, correction = sign * whole, sign * numerator, \
        sign * correction
    carry, rest = divmod(abs(numerator), denominator)
    if numerator < 0:
        whole, numerator = whole - carry, -rest
    else:
        whole, numerator = whole + carry, rest
    # 2 - 1/2 is written 1 + 1/2
    if whole > 0 and numerator < 0:
        whole, numerator = whole - 1, numerator + denominator
    divisor = math.gcd(numerator, denominator)
    return HybridNumber(sign * whole,
                        sign * (numerator // divisor),
                        denominator // divisor,
                        exponent,
                        sign * correction)


def scale10(z, n):
    '''
    Rewrite z with its exponent raised by n, keeping its value.

    The mantissa is divided by 10**n; the whole part's remainder moves into
    the fraction. A negative n multiplies the mantissa instead. The
    correction scales in floating point: it vanishes past the float range
    going down, and becomes infinite going up.
    '''
    whole, numerator, denominator, exponent, correction = z
    if n >= 0:
        p10n = 10 ** n
        sign = -1 if whole < 0 else 1
        carry, rest = divmod(abs(whole), p10n)
        return reduce(HybridNumber(sign * carry,
                                   numerator + sign * rest * denominator,
                                   denominator * p10n,
                                   exponent + n,
                                   correction / _pow10(n)))
    p10n = 10 ** -n
    if correction:
        correction *= _pow10(-n)
    return reduce(HybridNumber(whole * p10n,
                               numerator * p10n,
                               denominator,
                               exponent + n,
                               correction))


def add(x, y):
    if x.exponent < y.exponent:
        x = scale10(x, y.exponent - x.exponent)
    elif x.exponent > y.exponent:
        y = scale10(y, x.exponent - y.exponent)
    return reduce(HybridNumber(
        x.whole + y.whole,
        x.numerator * y.denominator + y.numerator * x.denominator,
        x.denominator * y.denominator,
        max(x.exponent, y.exponent),
        x.correction + y.correction))


#          x.a               x.n/x.d               x.f
#        -------------   ----------------  -------------
#  y.a     x.a*y.a          y.a*x.n/x.d         y.a*x.f
# y.n/y.d  x.a*y.n/y.d    x.n*y.n/x.d*y.d    x.f*y.n/y.d
#  y.f    x.a*y.f            x.n*y.f/x.d        x.f*y.f
def prod(x, y):
    '''
    Product of x and y.

    Whole and fractional parts multiply exactly; the terms involving a
    correction are evaluated in floating point, so precision is lost when
    both factors carry one.
    '''
    return reduce(HybridNumber(
        x.whole * y.whole,
        x.numerator * y.numerator
        + x.whole * y.numerator * x.denominator
        + y.whole * x.numerator * y.denominator,
        x.denominator * y.denominator,
        x.exponent + y.exponent,
        x.whole * y.correction
        + y.whole * x.correction
        + y.correction * (x.numerator / x.denominator)
        + x.correction * (y.numerator / y.denominator)
        + x.correction * y.correction))


def inverse(z, approximate=None):
    '''
    Reciprocal of z.

    Exact unless z carries a correction, in which case 1/float(z) is
    approximated anew with approximate (by default hrpn.approx.approximate).

    Raises DivisionByZero if z is zero.
    '''
    if z == ONE:
        return ONE
    if z == ZERO or float(z) == 0.0:
        raise DivisionByZero('Cannot invert zero')
    if z.correction:
        if approximate is None:
            from .approx import approximate
        return approximate(1.0 / float(z))
    return reduce(HybridNumber(0,
                               z.denominator,
                               z.numerator + z.whole * z.denominator,
                               -z.exponent,
                               0.0))


def diff(a, b):
    '''
    Absolute difference |a - b|.
    '''
    d = add(a, negate(b))
    if float(d) < 0:
        return negate(d)
    return d


# Example
# x ** 0b1101 = x ** (2**3 + 2**2 + 2**0) = x ** (2**3) * x ** (2**2) * x
#             = x**8 * x**4 * x
#             = ((x**2)**2)**2 * (x**2)**2 * x
def power(base, n):
    '''
    base**n for an integer n, by repeated squaring.
    '''
    reciprocal = n < 0
    n = abs(n)
    negative = base < 0 and n & 1
    base = abs(base)
    result = 1.0
    while n:
        if n & 1:
            result *= base
        base *= base
        n >>= 1
    if negative:
        result = -result
    if reciprocal:
        if result == 0.0:
            raise DivisionByZero('Cannot raise zero to a negative power')
        result = 1.0 / result
    return result
