"""
This module provides:
    - INF
    - floor_divide
    - divide             (floor for integers, true division otherwise)
    - line_intersect
"""

import numbers


INF = float("inf")


# ----------------------------------------------------------------------
#  DIVISION RULES
# ----------------------------------------------------------------------

def floor_divide(numerator, denominator):
    """
    Integer division rounded toward -inf.

    Truncating division would move negative quotients up by one and break
    the strict ordering of boundaries:

        floor_divide(-7, 2) -> -4      (truncation gives -3)
    """
    return numerator // denominator


def divide(numerator, denominator):
    """
    Divides with the rule matching the operand types:
        - both integral (int, numpy integers) -> floor_divide
        - anything else (float, Fraction, Decimal) -> true division
    """
    if isinstance(numerator, numbers.Integral) and isinstance(denominator, numbers.Integral):
        return floor_divide(numerator, denominator)
    return numerator / denominator


# ----------------------------------------------------------------------
#  LINE INTERSECTION
# ----------------------------------------------------------------------

def line_intersect(m1, b1, m2, b2):
    """
    Compute intersection point between two lines defined by:
        y = m1 x + b1
        y = m2 x + b2

    Uses true division, so the point is exact for Fractions.

    Returns:
        (x, y) or None if parallel (m1 == m2)
    """
    if m1 == m2:
        return None
    x = (b2 - b1) / (m1 - m2)
    y = m1 * x + b1
    return x, y
