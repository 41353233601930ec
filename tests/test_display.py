from pytest import mark

from hrpn.config import Config, EXPONENT_FORMATS
from hrpn.display import render_double, render_human, render_raw
from hrpn.number import HybridNumber as H


@mark.parametrize('z, text', [
    (H(7), '(7)\t# 7'),
    (H(2, 1, 2), '(2 +1/2)\t# 2.5'),
    (H(-2, -1, 2), '(-2 -1/2)\t# -2.5'),
    (H(1, 1, 2, 3), '(1 +1/2)*pow(10,3)\t# 1500'),
    (H(3, 16, 113, 0, -2.667e-7), '(3 +16/113 -2.667e-07)\t# 3.14159'),
    # Negligible next to the whole part
    (H(3, 0, 1, 0, 1e-16), '(3)\t# 3'),
])
def test_human(z, text):
    assert render_human(z) == text


@mark.parametrize('name, suffix', [
    ('caret', '*10^(3)'),
    ('exp10', '*exp10(3)'),
    ('latex', '\\times 10^{3}'),
    ('unicode', '\N{MULTIPLICATION SIGN}10^(3)'),
])
def test_human_exponent_format(name, suffix):
    config = Config(exponent_format=EXPONENT_FORMATS[name])
    assert render_human(H(1, 1, 2, 3), config) == \
        '(1 +1/2)' + suffix + '\t# 1500'


def test_raw():
    assert render_raw(H(2, 1, 2)) == '2;1;2;0\t# 2.5'
    assert render_raw(H(-1, -1, 3, -3)) == '-1;-1;3;-3\t# -0.00133333'


@mark.parametrize('z, text', [
    (H(8), '8'),
    (H(0, 1, 3), '0.333333333333333'),
    (H(3, 0, 1, 0, 1e-10), '3.0000000001'),
    (H(1, 0, 1, 0, 0.5), '1.5'),
    (H(0, 0, 1, 0, 12345678.0), '1.2e+07'),
])
def test_double(z, text):
    assert render_double(z) == text


def test_human_huge_whole():
    huge = 10 ** 400
    assert render_human(H(huge, 0, 1, 0, 0.5)) == \
        '({})\t# inf'.format(huge)
