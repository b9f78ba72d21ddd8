"""
Upper envelope built once from a batch of lines.

This module provides:
    • StaticEnvelope(lines) / StaticEnvelope.construct(lines)   O(n log n)
    • StaticEnvelope.maximum(x)                                 O(log n), read-only
    • StaticEnvelope.maximum_many(xs)
"""

from bisect import bisect_left

from models.line import Line
from models.errors import EmptyContainerError


class StaticEnvelope:
    """
    Immutable hull: lines sorted by slope plus the boundary list used for
    binary search. Queries never mutate anything, so they can come in any
    order.

    Input lines (Line objects or (a, b) pairs) are copied; the caller's
    objects are never touched.
    """

    def __init__(self, lines=()):
        hull = []

        for line in sorted((Line.coerce(item) for item in lines), key=Line.sort_key):
            # Same slope, smaller or equal intercept: never maximal.
            if hull and hull[-1].a == line.a:
                hull.pop()
            # hull[-1] is dominated when its region against `line` starts before it ends
            while len(hull) >= 2 and hull[-2].boundary >= hull[-1].boundary_with(line):
                hull.pop()
            if hull:
                hull[-1].boundary = hull[-1].boundary_with(line)
            hull.append(line)

        self._hull = tuple(hull)
        self._boundaries = [line.boundary for line in self._hull]

    @classmethod
    def construct(cls, lines):
        return cls(lines)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def maximum(self, x):
        if not self._hull:
            raise EmptyContainerError(type(self).__name__)
        return self._hull[bisect_left(self._boundaries, x)].evaluate(x)

    def maximum_many(self, xs):
        """Maxima for every query point of an iterable, in input order."""
        return [self.maximum(x) for x in xs]

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def lines(self):
        return [line.as_tuple() for line in self._hull]

    def boundaries(self):
        return tuple(self._boundaries)

    def __len__(self):
        return len(self._hull)

    def __iter__(self):
        return iter(self.lines())

    def __repr__(self):
        return f"StaticEnvelope(lines={self.lines()!r})"
