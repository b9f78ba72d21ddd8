"""
Fully dynamic upper envelope.

This module provides:
    • DynamicEnvelope.insert_line(a, b)        amortized O(log n)
    • DynamicEnvelope.maximum(x)               worst case O(log n)

Lines may be inserted with any slope order and queried at any x.
"""

from operator import attrgetter

from sortedcontainers import SortedKeyList

from models.line import Line
from models.errors import EmptyContainerError
from utils.geometry import INF


class DynamicEnvelope:
    """
    Upper envelope kept in two sorted views over the same Line objects:

        _by_slope     structural order, used for neighbour walks
        _by_boundary  query order, used to find the maximizing line

    For retained lines both orders agree (boundaries strictly increase with
    slope), but while an insertion is in progress they may not, which is why
    the query view is re-sorted on every boundary update instead of being
    searched through the slope view.
    """

    def __init__(self, lines=None):
        self._by_slope = SortedKeyList(key=attrgetter("a"))
        self._by_boundary = SortedKeyList(key=attrgetter("boundary"))
        if lines is not None:
            self.insert_lines(lines)

    # ------------------------------------------------------------------
    # Explicit lookups
    # ------------------------------------------------------------------

    def position_for_slope(self, a):
        """Index a new line of slope `a` takes in the slope view (after equal slopes)."""
        return self._by_slope.bisect_key_right(a)

    def first_with_boundary_at_least(self, x):
        """First retained line whose boundary is >= x."""
        return self._by_boundary[self._by_boundary.bisect_key_left(x)]

    # ------------------------------------------------------------------
    # Boundary maintenance
    # ------------------------------------------------------------------

    def _set_boundary(self, line, value):
        self._by_boundary.remove(line)
        line.boundary = value
        self._by_boundary.add(line)

    def _settle(self, i):
        """
        Recomputes the boundary of line i against line i + 1.
        Returns True when line i + 1 is left with an empty region.
        """
        line = self._by_slope[i]
        if i + 1 == len(self._by_slope):
            self._set_boundary(line, INF)
            return False
        right = self._by_slope[i + 1]
        self._set_boundary(line, line.boundary_with(right))
        return line.boundary >= right.boundary

    def _covered(self, i):
        """True when line i is covered by its left neighbour and its right neighbour."""
        return i > 0 and self._settle(i - 1)

    def _erase(self, i):
        line = self._by_slope.pop(i)
        self._by_boundary.remove(line)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def insert_line(self, a, b):
        """
        Inserts f(x) = a*x + b and prunes every line it makes redundant.

        Each line is erased at most once in its lifetime, so the pruning
        loops cost O(log n) amortized per insertion.
        """
        i = self.position_for_slope(a)

        # Equal slopes: keep only the larger intercept.
        if i > 0 and self._by_slope[i - 1].a == a:
            if self._by_slope[i - 1].b >= b:
                return
            i -= 1
            self._erase(i)

        line = Line(a, b)
        self._by_slope.add(line)
        self._by_boundary.add(line)

        # Right neighbours swallowed by the new line
        while self._settle(i):
            self._erase(i + 1)

        # The new line itself may never be maximal
        if self._covered(i):
            self._erase(i)
            self._settle(i - 1)

        # Left neighbours swallowed by the new line
        while i > 0 and self._covered(i - 1):
            self._erase(i - 1)
            i -= 1
            self._settle(i - 1)

    def insert_lines(self, lines):
        """Inserts every (a, b) pair or Line of an iterable."""
        for item in lines:
            line = Line.coerce(item)
            self.insert_line(line.a, line.b)

    def maximum(self, x):
        """Maximum of a*x + b over every inserted line."""
        if not self._by_slope:
            raise EmptyContainerError(type(self).__name__)
        return self.first_with_boundary_at_least(x).evaluate(x)

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    def lines(self):
        """Retained (a, b) pairs, left to right along the envelope."""
        return [line.as_tuple() for line in self._by_slope]

    def boundaries(self):
        return [line.boundary for line in self._by_slope]

    def __len__(self):
        return len(self._by_slope)

    def __iter__(self):
        return iter(self.lines())

    def __repr__(self):
        return f"DynamicEnvelope(lines={self.lines()!r})"
