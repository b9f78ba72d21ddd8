"""
Tests for the division rules and line intersection helpers.
"""

from fractions import Fraction

import numpy as np
import pytest
from hypothesis import given
from hypothesis.strategies import integers

from utils.geometry import INF, floor_divide, divide, line_intersect


def truncating_floor(n, d):
    """Floor division written with truncation plus a sign/remainder fix-up."""
    t = abs(n) // abs(d)
    if (n < 0) != (d < 0):
        t = -t
    remainder = n - t * d
    return t - ((n ^ d) < 0 and remainder != 0)


nonzero = integers(min_value=-10**6, max_value=10**6).filter(lambda v: v != 0)


@given(integers(min_value=-10**6, max_value=10**6), nonzero)
def test_floor_divide_matches_truncation_fixup(n, d):
    assert floor_divide(n, d) == truncating_floor(n, d)


@pytest.mark.parametrize("n, d, expected", [
    (7, 2, 3),
    (-7, 2, -4),
    (7, -2, -4),
    (-7, -2, 3),
    (-6, 2, -3),
    (0, -5, 0),
])
def test_floor_divide_rounds_toward_negative_infinity(n, d, expected):
    assert floor_divide(n, d) == expected


def test_divide_picks_rule_from_operand_types():
    assert divide(-7, 2) == -4
    assert divide(-7.0, 2) == -3.5
    assert divide(Fraction(-7), 2) == Fraction(-7, 2)
    assert divide(np.int64(-7), np.int64(2)) == -4


def test_infinity_compares_with_every_numeric_type():
    assert -INF < -10**30 < INF
    assert Fraction(10**20, 3) < INF
    assert np.int64(5) < INF


def test_line_intersect():
    assert line_intersect(1, 0, -1, 2) == (1.0, 1.0)
    assert line_intersect(2, 3, 2, 5) is None

    x, y = line_intersect(Fraction(-1), Fraction(10), Fraction(2), Fraction(0))
    assert x == Fraction(10, 3)
    assert y == Fraction(20, 3)
