"""
Visualization Tools

Provides drawing utilities for:
- Inserted lines
- The upper envelope and its breakpoints
- Saving renderings to disk
"""

from .draw_envelope import (
    world_to_pixel,
    draw_lines,
    draw_envelope,
    envelope_vertices,
    render_envelope,
)
from .save_outputs import save_envelope, save_all_outputs

__all__ = [
    "world_to_pixel",
    "draw_lines",
    "draw_envelope",
    "envelope_vertices",
    "render_envelope",
    "save_envelope",
    "save_all_outputs",
]
