"""
Reference maxima computed by evaluating every line.

This module provides:
    • brute_force_maximum(lines, x)
    • sample_envelope(lines, xs)

Used by main.py to cross-check the containers and by the drawing code to
sample the envelope.
"""

from typing import Iterable, Sequence, Tuple

import numpy as np


def brute_force_maximum(lines: Iterable[Tuple], x):
    """
    max(a*x + b) over all lines, in plain Python arithmetic so that ints
    and Fractions stay exact.
    """
    values = [a * x + b for a, b in lines]
    if not values:
        raise ValueError("brute_force_maximum() needs at least one line")
    return max(values)


def sample_envelope(lines: Sequence[Tuple], xs) -> np.ndarray:
    """
    Evaluates the pointwise maximum at every x of `xs` at once.

    Returns:
        float64 array with the same length as xs
    """
    if len(lines) == 0:
        raise ValueError("sample_envelope() needs at least one line")

    coeffs = np.asarray(lines, dtype=np.float64).reshape(-1, 2)
    xs = np.asarray(xs, dtype=np.float64)

    # (n_lines, n_points) grid of a*x + b
    values = np.outer(coeffs[:, 0], xs) + coeffs[:, 1][:, np.newaxis]
    return values.max(axis=0)
