"""
Upper envelope for monotonic usage.

This module provides:
    • MonotonicEnvelope.insert_line(a, b)   slopes non-decreasing, amortized O(1)
    • MonotonicEnvelope.maximum(x)          x non-decreasing, amortized O(1)
"""

from collections import deque

from models.line import Line
from models.errors import EmptyContainerError, OrderViolationError
from config import get_active_params


class MonotonicEnvelope:
    """
    Envelope stored in a deque, left to right.

    Inserts only ever touch the back and queries only ever drop lines from
    the front, since a line left of the current query position can never be
    the maximizer again.

    check_order:
        True  -> decreasing slopes / query positions raise OrderViolationError
        False -> no checks (behaviour on violation is undefined)
        None  -> CHECK_MONOTONIC_ORDER from config
    """

    def __init__(self, lines=None, check_order=None):
        if check_order is None:
            check_order = get_active_params()["CHECK_MONOTONIC_ORDER"]
        self.check_order = check_order

        self._hull = deque()
        self._last_query = None

        if lines is not None:
            self.insert_lines(lines)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def insert_line(self, a, b):
        """Inserts f(x) = a*x + b; `a` must not be smaller than any earlier slope."""
        hull = self._hull

        if hull:
            back = hull[-1]
            if self.check_order and a < back.a:
                raise OrderViolationError("slope", a, back.a)
            if back.a == a:
                if back.b >= b:
                    return
                hull.pop()

        line = Line(a, b)
        if hull:
            back = hull[-1]
            back.boundary = back.boundary_with(line)
            while len(hull) >= 2 and hull[-2].boundary >= back.boundary:
                hull.pop()
                back = hull[-1]
                back.boundary = back.boundary_with(line)
        hull.append(line)

    def insert_lines(self, lines):
        for item in lines:
            line = Line.coerce(item)
            self.insert_line(line.a, line.b)

    def maximum(self, x):
        """Maximum at x; `x` must not be smaller than any earlier query."""
        if not self._hull:
            raise EmptyContainerError(type(self).__name__)
        if self.check_order and self._last_query is not None and x < self._last_query:
            raise OrderViolationError("query", x, self._last_query)
        self._last_query = x

        hull = self._hull
        while hull[0].boundary < x:
            hull.popleft()
        return hull[0].evaluate(x)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def lines(self):
        return [line.as_tuple() for line in self._hull]

    def boundaries(self):
        return [line.boundary for line in self._hull]

    def __len__(self):
        return len(self._hull)

    def __iter__(self):
        return iter(self.lines())

    def __repr__(self):
        return f"MonotonicEnvelope(lines={self.lines()!r}, check_order={self.check_order})"
