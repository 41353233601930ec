'''
Float to hybrid number approximation tests
'''

import math

from hypothesis import given, strategies as st
from pytest import approx, mark, raises

from hrpn.approx import Approximator, approximate, approximate_within, exact
from hrpn.config import Config
from hrpn.number import HybridNumber as H, ONE, ZERO
from hrpn.util import DomainError


magnitudes = st.floats(min_value=1e-6, max_value=1e12)


@mark.parametrize('x, z', [
    (0.0, ZERO),
    (-0.0, ZERO),
    (1.0, ONE),
    (7, H(7)),
    (2.5, H(2, 1, 2)),
    (-2.5, H(-2, -1, 2)),
    (3.75, H(3, 3, 4)),
])
def test_approximate_exact(x, z):
    assert approximate(x) == z


def test_approximate_pi():
    z = approximate(math.pi)
    assert (z.whole, z.numerator, z.denominator, z.exponent) == (3, 16, 113, 0)
    assert z.correction == approx(math.pi - 3 - 16 / 113)
    assert float(z) == approx(math.pi, rel=1e-15)


def test_approximate_engineering_exponent():
    assert approximate(12345.0).exponent == 3
    assert approximate(0.5).exponent == -3
    assert approximate(-2e-7).exponent == -9
    assert float(approximate(0.5)) == approx(0.5)


def test_approximate_near_one():
    # Picks 1/1, which is folded into the whole part
    z = approximate(1.99999999)
    assert (z.whole, z.numerator, z.denominator) == (2, 0, 1)
    assert float(z) == approx(1.99999999, rel=1e-15)


@mark.parametrize('x', [math.inf, -math.inf, math.nan])
def test_approximate_not_finite(x):
    with raises(DomainError):
        approximate(x)


@given(magnitudes, st.booleans())
def test_round_trip(x, negative):
    if negative:
        x = -x
    z = approximate(x)
    assert float(z) == approx(x, rel=1e-12)
    assert (z.whole < 0) == (z.numerator < 0) or 0 in (z.whole, z.numerator)


@given(magnitudes, st.integers(min_value=2, max_value=5000))
def test_denominator_bound(x, max_denominator):
    z = approximate(x, max_denominator)
    assert 0 < z.denominator <= max_denominator
    assert float(z) == approx(x, rel=1e-12)


def test_smaller_bound_coarser_fraction():
    z = approximate(math.pi, 10)
    assert (z.numerator, z.denominator) == (1, 7)
    assert float(z) == approx(math.pi, rel=1e-15)


def test_within_stops_early():
    z = approximate_within(math.pi, 1e-3)
    assert (z.whole, z.numerator, z.denominator) == (3, 9, 64)
    assert abs(z.numerator / z.denominator - (math.pi - 3)) <= 1e-3
    assert float(z) == approx(math.pi, rel=1e-15)


def test_within_relative():
    z = approximate_within(math.pi, 0.0, rel_tol=1e-2)
    assert abs(z.numerator / z.denominator - (math.pi - 3)) \
        <= 1e-2 * (math.pi - 3)
    assert float(z) == approx(math.pi, rel=1e-15)


def test_within_near_zero():
    z = approximate_within(3.0000001, 1e-3)
    assert (z.whole, z.numerator, z.denominator) == (3, 0, 1)
    assert z.correction == approx(1e-7)


def test_within_still_bounded():
    z = approximate_within(math.pi, 1e-15, max_denominator=100)
    assert z.denominator < 100
    assert float(z) == approx(math.pi, rel=1e-15)


def test_within_negative():
    assert approximate_within(-2.5, 1e-6) == H(-2, -1, 2)


def test_within_needs_tolerance():
    with raises(ValueError):
        approximate_within(1.5, 0.0, 0.0)


@mark.parametrize('n, z', [
    (0, ZERO),
    (7, H(7)),
    (-999, H(-999)),
    (1000, H(1, 0, 1, 3)),
    (1234, H(1, 117, 500, 3)),
    (-1234567, H(-1, -234567, 1000000, 6)),
])
def test_exact(n, z):
    assert exact(n) == z


def test_approximator_fixed():
    approximator = Approximator(Config(max_denominator=10))
    assert approximator(math.pi).denominator == 7


def test_approximator_tolerant():
    approximator = Approximator(Config(abs_tol=1e-3))
    assert approximator(math.pi).denominator == 64


def test_approximator_default():
    assert Approximator()(math.pi).denominator == 113
