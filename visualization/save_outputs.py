"""
Centralized output-saving utilities for the envelope demo.

This module provides:
    • save_envelope(...)
    • save_all_outputs(...)

Uses draw_envelope to render and utils.image_io for filesystem handling.
"""

from typing import Dict, List, Tuple

from visualization.draw_envelope import render_envelope
from utils.image_io import save_image, ensure_output_dir


def save_envelope(path: str, envelope, x_range, lines: List[Tuple] = None) -> bool:
    """
    Renders one container (over the inserted lines, if given) and saves it.
    """
    image = render_envelope(envelope, x_range, lines=lines)
    return save_image(path, image)


def save_all_outputs(
    output_dir: str,
    run_id: str,
    envelopes: Dict[str, object],
    lines: List[Tuple],
    x_range,
) -> List[str]:
    """
    Saves one rendering per container.

    Example output:
        <id>_dynamic.png
        <id>_monotonic.png
        <id>_static.png

    Returns:
        list of written paths
    """
    ensure_output_dir(output_dir)

    written = []
    for name, envelope in envelopes.items():
        path = f"{output_dir}/{run_id}_{name}.png"
        if save_envelope(path, envelope, x_range, lines=lines):
            written.append(path)
    return written
