"""
Upper Envelope Package

This package maintains the upper envelope of a set of lines f(x) = a*x + b
and answers "maximum value at x" queries, including:

- The Line model and boundary computation
- DynamicEnvelope (any insertion and query order)
- MonotonicEnvelope (sorted slopes and queries, amortized O(1))
- StaticEnvelope (batch construction, binary-search queries)
- Envelope visualization utilities
"""
__all__ = [
    "config",
    "main",
    "envelopes",
    "models",
    "utils",
    "visualization",
]
