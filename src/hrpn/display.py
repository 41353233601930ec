'''
Text forms of a number: human readable, raw, and as a plain float.

Every renderer takes the number and, optionally, the Config in use.
'''

import math

from .config import Config


# Significant digits of a number without a correction
EXACT_DIGITS = 15
# More than a double holds is noise
MAX_DIGITS = 17


def render_human(z, config=None):
    '''
    (whole ±numerator/denominator ±correction)*pow(10,exponent)  # value

    Zero fractions, negligible corrections and zero exponents are left out.
    '''
    config = config or Config()
    text = '({}'.format(z.whole)
    if z.numerator != 0:
        text += ' {:+d}/{}'.format(z.numerator, z.denominator)
    # Compared against the int, as the whole part may be beyond float range
    if (abs(z.correction) - 1e-15) * 1e15 > abs(z.whole):
        text += ' {:+.4g}'.format(z.correction)
    text += ')'
    if z.exponent != 0:
        text += config.exponent_format.format(z.exponent)
    return '{}\t# {:g}'.format(text, float(z))


def render_raw(z, config=None):
    '''
    whole;numerator;denominator;exponent  # value

    Reads back in as a rational literal, less the correction.
    '''
    return '{};{};{};{}\t# {:g}'.format(z.whole, z.numerator, z.denominator,
                                        z.exponent, float(z))


def render_double(z, config=None):
    '''
    The value alone, with as many digits as the correction justifies.
    '''
    if z.correction:
        digits = round(math.log10(abs(z.correction))) - 6
        digits = min(-digits, MAX_DIGITS) if digits < 0 else 2
    else:
        digits = EXACT_DIGITS
    return '{:.{}g}'.format(float(z), digits)


RENDERERS = {
    'human': render_human,
    'raw': render_raw,
    'double': render_double,
}
