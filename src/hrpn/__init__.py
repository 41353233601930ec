'''
RPN calculator over hybrid rational numbers.

Every value is (whole + numerator/denominator + correction) * 10**exponent:
an exact fraction with a bounded denominator, a floating point correction
for whatever the fraction misses, and a base-10 scale in engineering
notation. Floats are turned into such numbers by a Stern-Brocot (mediant)
search.

Supports plain old arithmetic, comparisons, integer and real powers, and a
handful of Python's mathematical functions. Not intended to be
Turing-complete!
'''

from .approx import Approximator, approximate, approximate_within
from .cli import CLI
from .config import Config
from .lexer import Lexer
from .machine import Machine
from .number import HybridNumber, ONE, ZERO


__all__ = 'HybridNumber', 'ZERO', 'ONE', 'Config', 'Approximator', \
    'approximate', 'approximate_within', 'Machine', 'Lexer', 'CLI'
