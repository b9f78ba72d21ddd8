from utils.geometry import INF, divide


class Line:
    """
    One linear function f(x) = a*x + b, as stored inside an envelope.

    Supports:
      - evaluation at x
      - boundary computation against the next line of an envelope
      - the "line order" (ascending slope, then ascending intercept)

    `boundary` is metadata of the line as a member of ONE envelope: the x at
    which it stops being the maximum and its right neighbour takes over.
    Containers rewrite it whenever the right neighbour changes.

    Lines compare by identity; two lines with equal (a, b) are still two
    distinct container members.
    """

    __slots__ = ("a", "b", "boundary")

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, a, b, boundary=INF):
        self.a = a
        self.b = b
        self.boundary = boundary

    @classmethod
    def coerce(cls, item):
        """
        Builds a fresh Line from a Line or an (a, b) pair.
        Never returns `item` itself, so callers' objects stay untouched.
        """
        if isinstance(item, Line):
            return cls(item.a, item.b)
        a, b = item
        return cls(a, b)

    # ------------------------------------------------------------
    # Geometry
    # ------------------------------------------------------------
    def evaluate(self, x):
        """a*x + b"""
        return self.a * x + self.b

    def boundary_with(self, other):
        """
        x at which `other` (the next line in slope order) overtakes self.

        Parallel lines have no crossing:
            self.b >  other.b -> +inf   (self dominates the pair)
            self.b <= other.b -> -inf   (self is dominated)
        """
        if self.a == other.a:
            return INF if self.b > other.b else -INF
        return divide(other.b - self.b, self.a - other.a)

    def sort_key(self):
        return (self.a, self.b)

    def as_tuple(self):
        return (self.a, self.b)

    # ------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------
    def __repr__(self):
        return f"Line(a={self.a!r}, b={self.b!r}, boundary={self.boundary!r})"
