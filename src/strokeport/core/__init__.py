"""Core export algorithms for strokeport.

This module contains the export pipeline:

- Render pipeline (background pass, content pass, print optimization)
- Snapshot generation (SVG document moved to the origin)

Key functions:
- draw_stroke_content: Draw stroke content onto a render backend
- should_optimize_stroke: Decide print optimization for one stroke
- generate_svg: Render stroke content into an Svg document
"""

from strokeport.core.pipeline import (
    draw_stroke_content,
    image_bounds,
    should_optimize_stroke,
)
from strokeport.core.snapshot import generate_svg

__all__ = [
    "draw_stroke_content",
    "generate_svg",
    "image_bounds",
    "should_optimize_stroke",
]
