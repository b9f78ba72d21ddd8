"""
Visualization utilities for rendering lines and their upper envelope.

This module provides:
    • world_to_pixel(x, y, x_range, y_range, shape_hw)
    • draw_lines(img, lines, x_range, y_range, color, thickness)
    • draw_envelope(img, envelope, x_range, y_range, color, thickness)
    • render_envelope(envelope, x_range, lines=None, shape_hw=None)

It is used by:
    - main.py
"""

from typing import List, Optional, Tuple

import cv2
import numpy as np

from models.errors import EmptyContainerError
from utils.brute_force import sample_envelope
from utils.geometry import line_intersect
from config import (
    get_active_params,
    COLOR_LINE,
    COLOR_ENVELOPE,
    COLOR_BREAKPOINT,
    COLOR_BACKGROUND,
)


# Keeps int32 pixel coordinates valid for cv2 when a point is far off-canvas
PIXEL_LIMIT = 1 << 20


# ---------------------------------------------------------------------
#  COORDINATE MAPPING
# ---------------------------------------------------------------------

def world_to_pixel(x, y, x_range, y_range, shape_hw, margin=0):
    """
    Maps world coordinates to (col, row) pixels; y grows upwards in world
    space and downwards in the image.
    """
    h, w = shape_hw
    x0, x1 = x_range
    y0, y1 = y_range

    col = margin + (np.asarray(x, dtype=np.float64) - x0) / (x1 - x0) * (w - 1 - 2 * margin)
    row = margin + (y1 - np.asarray(y, dtype=np.float64)) / (y1 - y0) * (h - 1 - 2 * margin)

    col = np.clip(np.rint(col), -PIXEL_LIMIT, PIXEL_LIMIT).astype(np.int32)
    row = np.clip(np.rint(row), -PIXEL_LIMIT, PIXEL_LIMIT).astype(np.int32)
    return col, row


def _visible_span(a, b, x_range, y_range):
    """
    Part of x_range where a*x + b stays inside y_range, or None.
    """
    lo, hi = float(x_range[0]), float(x_range[1])
    y0, y1 = float(y_range[0]), float(y_range[1])
    a, b = float(a), float(b)

    if a == 0:
        return (lo, hi) if y0 <= b <= y1 else None

    xa, xb = sorted(((y0 - b) / a, (y1 - b) / a))
    lo, hi = max(lo, xa), min(hi, xb)
    return (lo, hi) if lo <= hi else None


# ---------------------------------------------------------------------
#  BASIC: Draw every inserted line in a single color
# ---------------------------------------------------------------------

def draw_lines(
    image,
    lines: List[Tuple],
    x_range,
    y_range,
    color: Tuple[int, int, int] = COLOR_LINE,
    thickness: int = 1,
    margin: int = 0,
):
    """
    Draws (a, b) lines clipped to the visible window.

    Args:
        image: BGR numpy array (modified in-place)
        lines: iterable of (a, b)
        x_range, y_range: world window shown by the image
        color: (B, G, R)
        thickness: pixel width
    """
    shape_hw = image.shape[:2]

    for a, b in lines:
        span = _visible_span(a, b, x_range, y_range)
        if span is None:
            continue
        xs = np.array(span)
        cols, rows = world_to_pixel(xs, float(a) * xs + float(b), x_range, y_range, shape_hw, margin)
        cv2.line(
            image,
            (int(cols[0]), int(rows[0])),
            (int(cols[1]), int(rows[1])),
            color,
            thickness
        )
    return image


# ---------------------------------------------------------------------
#  HIGH-LEVEL: Draw the envelope polyline with its breakpoints
# ---------------------------------------------------------------------

def envelope_vertices(retained: List[Tuple], x_range) -> np.ndarray:
    """
    World-space vertices of the envelope inside x_range: both window ends
    plus every crossing between consecutive retained lines.
    """
    lo, hi = float(x_range[0]), float(x_range[1])
    xs = [lo]
    for (a1, b1), (a2, b2) in zip(retained, retained[1:]):
        hit = line_intersect(a1, b1, a2, b2)
        if hit is not None and lo < float(hit[0]) < hi:
            xs.append(float(hit[0]))
    xs.append(hi)

    xs = np.array(sorted(xs))
    return np.column_stack([xs, sample_envelope(retained, xs)])


def draw_envelope(
    image,
    envelope,
    x_range,
    y_range,
    color: Tuple[int, int, int] = COLOR_ENVELOPE,
    thickness: int = 2,
    margin: int = 0,
):
    """
    Draws the current envelope of any container exposing lines().
    """
    retained = envelope.lines()
    if not retained:
        raise EmptyContainerError(type(envelope).__name__)

    vertices = envelope_vertices(retained, x_range)
    cols, rows = world_to_pixel(vertices[:, 0], vertices[:, 1], x_range, y_range, image.shape[:2], margin)
    pts = np.column_stack([cols, rows]).reshape(-1, 1, 2)

    cv2.polylines(image, [pts], False, color, thickness)
    for col, row in zip(cols[1:-1], rows[1:-1]):
        cv2.circle(image, (int(col), int(row)), thickness + 2, COLOR_BREAKPOINT, -1)
    return image


def render_envelope(
    envelope,
    x_range,
    lines: Optional[List[Tuple]] = None,
    shape_hw: Optional[Tuple[int, int]] = None,
):
    """
    Renders a fresh BGR image of the envelope, optionally over all the
    inserted lines. The y window is fitted to the envelope with 10% padding.
    """
    params = get_active_params()
    if shape_hw is None:
        shape_hw = params["CANVAS_SIZE"]
    margin = params["CANVAS_MARGIN"]

    retained = envelope.lines()
    if not retained:
        raise EmptyContainerError(type(envelope).__name__)

    ys = sample_envelope(retained, np.linspace(float(x_range[0]), float(x_range[1]), 64))
    y_lo, y_hi = float(ys.min()), float(ys.max())
    pad = (y_hi - y_lo) * 0.1 or 1.0
    y_range = (y_lo - pad, y_hi + pad)

    h, w = shape_hw
    image = np.full((h, w, 3), COLOR_BACKGROUND, dtype=np.uint8)

    if lines is not None:
        draw_lines(image, lines, x_range, y_range, margin=margin)
    draw_envelope(image, envelope, x_range, y_range, margin=margin)
    return image
