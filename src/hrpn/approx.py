'''
Conversion of floats into hybrid rational numbers.

The value is scaled to engineering notation (an exponent that is a multiple
of three), split into an integral and a fractional part, and the fractional
part is approximated by a Stern-Brocot (mediant) search with a bounded
denominator. Whatever the fraction misses ends up in the correction term.
'''

import logging
import math

from .config import Config, DEFAULT_MAX_DENOMINATOR
from .number import HybridNumber, ZERO, negate, reduce
from .util import DomainError


logger = logging.getLogger(__name__)

# Keeps log10 finite, and the exponent sane, for tiny values.
EPSILON = 1e-15


def _split(x):
    '''
    Split |x| into an engineering exponent, its whole part and a fraction.

    The fraction is in [0, 1).
    '''
    try:
        x = abs(float(x))
    except OverflowError as e:
        raise DomainError('Cannot approximate {}'.format(x), e) from e
    if not math.isfinite(x):
        raise DomainError('Cannot approximate {}'.format(x))
    exponent = math.floor(math.log10(x + EPSILON) / 3.0) * 3
    y = x / 10.0 ** exponent
    whole = math.floor(y)
    return exponent, whole, y - whole


def _mediant_search(frac, max_denominator, close_enough=None):
    '''
    Approximate frac in [0, 1) by a fraction, returning (p, q).

    Narrows [0/1, 1/1] by replacing one endpoint with the mediant until the
    next mediant's denominator would reach max_denominator, then picks the
    endpoint closer to frac. Stops early at the first mediant close_enough
    accepts.
    '''
    p0, q0, p1, q1 = 0, 1, 1, 1
    while q0 + q1 < max_denominator:
        p, q = p0 + p1, q0 + q1
        mediant = p / q
        if close_enough is not None and close_enough(mediant):
            return p, q
        if mediant <= frac <= p1 / q1:
            p0, q0 = p, q
        else:
            p1, q1 = p, q
    if abs(frac - p1 / q1) < abs(frac - p0 / q0):
        return p1, q1
    return p0, q0


def _assemble(x, exponent, whole, frac, numerator, denominator):
    z = reduce(HybridNumber(whole,
                            numerator,
                            denominator,
                            exponent,
                            frac - numerator / denominator))
    if x < 0:
        z = negate(z)
    logger.debug('approximated %r as %r', x, z)
    return z


def approximate(x, max_denominator=DEFAULT_MAX_DENOMINATOR):
    '''
    Approximate x with a fraction whose denominator is below max_denominator.

    The residual goes into the correction, so float() of the result gives x
    back up to rounding.
    '''
    if x == 0:
        return ZERO
    exponent, whole, frac = _split(x)
    numerator, denominator = _mediant_search(frac, max_denominator)
    return _assemble(x, exponent, whole, frac, numerator, denominator)


def approximate_within(x, abs_tol, rel_tol=0.0,
                       max_denominator=DEFAULT_MAX_DENOMINATOR):
    '''
    Approximate x with the first mediant within a tolerance.

    The fraction is the first mediant closer than abs_tol + rel_tol * frac to
    the fractional part frac, so denominators stay small when the tolerance
    is loose. The search still gives up at max_denominator.
    '''
    if not (abs_tol > 0 or rel_tol > 0):
        raise ValueError('At least one tolerance must be positive')
    if x == 0:
        return ZERO
    exponent, whole, frac = _split(x)
    tolerance = abs_tol + rel_tol * frac
    if frac <= tolerance:
        numerator, denominator = 0, 1
    else:
        numerator, denominator = _mediant_search(
            frac, max_denominator,
            close_enough=lambda mediant: abs(mediant - frac) <= tolerance)
    return _assemble(x, exponent, whole, frac, numerator, denominator)


def exact(n):
    '''
    Represent the integer n exactly, in engineering notation.

    Integers below a thousand in magnitude keep exponent zero and denominator
    one.
    '''
    exponent = (len(str(abs(n))) - 1) // 3 * 3
    whole, rest = divmod(abs(n), 10 ** exponent)
    z = reduce(HybridNumber(whole, rest, 10 ** exponent, exponent, 0.0))
    return negate(z) if n < 0 else z


class Approximator:
    '''
    Float approximation according to a Config.

    Uses the tolerance search if the config sets a tolerance, the fixed
    denominator budget otherwise.
    '''

    def __init__(self, config=None):
        self.config = config or Config()

    def __call__(self, x):
        config = self.config
        if config.tolerant:
            return approximate_within(x,
                                      config.abs_tol or 0.0,
                                      config.rel_tol or 0.0,
                                      config.max_denominator)
        return approximate(x, config.max_denominator)
