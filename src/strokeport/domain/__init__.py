"""Domain models for strokeport.

This module contains the domain models representing exportable stroke
content: bounds, colors, strokes, backgrounds and the content container.

- Strokes are shared by reference and never mutated in place
- Serializable to plain dictionaries for JSON and clipboard transfer
- Drawing goes through the SVG recording backend in strokeport.render

Key classes:
- Aabb: Axis-aligned bounding box
- Color / XoppColor: Normalized and 8-bit interchange colors
- Stroke: Base of BrushStroke, ShapeStroke, BitmapImage, VectorImage
- Background: Fill color with optional pattern
- StrokeContent: Strokes with optional bounds and background
"""

from strokeport.domain.aggregation import content_size, effective_bounds
from strokeport.domain.background import Background, PatternStyle
from strokeport.domain.bounds import Aabb
from strokeport.domain.color import Color, XoppColor
from strokeport.domain.content import StrokeContent
from strokeport.domain.strokes import (
    BitmapImage,
    BrushStroke,
    ShapeKind,
    ShapeStroke,
    Stroke,
    VectorImage,
    stroke_from_dict,
)

__all__: list[str] = [
    # Enums
    "PatternStyle",
    "ShapeKind",
    # Geometry and color
    "Aabb",
    "Color",
    "XoppColor",
    # Strokes
    "BitmapImage",
    "BrushStroke",
    "ShapeStroke",
    "Stroke",
    "VectorImage",
    "stroke_from_dict",
    # Content
    "Background",
    "StrokeContent",
    "content_size",
    "effective_bounds",
]
