"""
Data Models

Defines the core data structures:
- Line
- EnvelopeError, EmptyContainerError, OrderViolationError
"""

from .line import Line
from .errors import EnvelopeError, EmptyContainerError, OrderViolationError

__all__ = ["Line", "EnvelopeError", "EmptyContainerError", "OrderViolationError"]
