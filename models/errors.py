"""
Exceptions raised by the envelope containers.
"""


class EnvelopeError(Exception):
    """Base class for every container error."""


class EmptyContainerError(EnvelopeError, LookupError):
    """`maximum` was called before any line was inserted."""

    def __init__(self, container_name: str):
        super().__init__(f"{container_name} is empty: insert a line before querying")
        self.container_name = container_name


class OrderViolationError(EnvelopeError, ValueError):
    """
    A monotonic container received a value smaller than the previous one.

    `kind` is "slope" (insert_line) or "query" (maximum).
    """

    def __init__(self, kind: str, value, previous):
        super().__init__(
            f"{kind} must be non-decreasing: got {value!r} after {previous!r}"
        )
        self.kind = kind
        self.value = value
        self.previous = previous
