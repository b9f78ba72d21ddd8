"""
Envelopes Package

Contains the three upper-envelope containers:
- DynamicEnvelope    (any insertion order, any query order)
- MonotonicEnvelope  (non-decreasing slopes and query positions)
- StaticEnvelope     (built once from a batch)
"""

from .dynamic_envelope import DynamicEnvelope
from .monotonic_envelope import MonotonicEnvelope
from .static_envelope import StaticEnvelope

__all__ = [
    "DynamicEnvelope",
    "MonotonicEnvelope",
    "StaticEnvelope",
]
