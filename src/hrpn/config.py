'''
Process-wide calculator settings.

A Config is built once, before evaluation starts, and handed to everything
that needs it. It is never changed afterwards.
'''

from collections import namedtuple

from .util import ConfigError


# Ways of writing the base-10 exponent on output.
EXPONENT_FORMATS = {
    'pow': '*pow(10,{})',
    'exp10': '*exp10({})',
    # For use in higher-level languages
    'caret': '*10^({})',
    'latex': '\\times 10^{{{}}}',
    'unicode': '\N{MULTIPLICATION SIGN}10^({})',
}

DEFAULT_MAX_DENOMINATOR = 1000
DEFAULT_EXPONENT_FORMAT = EXPONENT_FORMATS['pow']


class Config(namedtuple('Config', ['max_denominator',
                                   'exponent_format',
                                   'abs_tol',
                                   'rel_tol',
                                   'zero_fill'])):
    '''
    Immutable calculator configuration.

    :param max_denominator: Bound on the denominator chosen when
                            approximating floats.
    :param exponent_format: str.format template for the exponent suffix of
                            human readable output.
    :param abs_tol: Absolute tolerance; enables tolerance approximation.
    :param rel_tol: Relative tolerance; enables tolerance approximation.
    :param zero_fill: Popping an empty stack yields zero instead of failing.
    '''
    __slots__ = ()

    def __new__(cls,
                max_denominator=DEFAULT_MAX_DENOMINATOR,
                exponent_format=DEFAULT_EXPONENT_FORMAT,
                abs_tol=None,
                rel_tol=None,
                zero_fill=False):
        if max_denominator < 2:
            raise ConfigError('Maximum denominator must be at least 2, '
                              'not {}'.format(max_denominator))
        for name, tol in ('abs_tol', abs_tol), ('rel_tol', rel_tol):
            if tol is not None and not tol >= 0:
                raise ConfigError('{} must not be negative, not {}'.format(
                    name, tol))
        try:
            exponent_format.format(0)
        except (IndexError, KeyError, ValueError) as e:
            raise ConfigError('Bad exponent format {}'.format(
                repr(exponent_format)), e) from e
        return super().__new__(cls, max_denominator, exponent_format,
                               abs_tol, rel_tol, zero_fill)

    @property
    def tolerant(self):
        '''
        True if floats are approximated to a tolerance, not a fixed budget.
        '''
        return bool(self.abs_tol or self.rel_tol)
