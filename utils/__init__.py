"""
Utility Functions

Provides numeric/geometry helpers, the brute-force reference maximum and
image I/O utilities.
"""

from .geometry import INF, floor_divide, divide, line_intersect
from .brute_force import brute_force_maximum, sample_envelope
from .image_io import ensure_output_dir, save_image

__all__ = [
    "INF",
    "floor_divide",
    "divide",
    "line_intersect",
    "brute_force_maximum",
    "sample_envelope",
    "ensure_output_dir",
    "save_image",
]
