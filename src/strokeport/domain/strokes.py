"""Drawable strokes.

This module defines the strokes that can be collected into stroke content:
- BrushStroke: freehand polyline with a single color
- ShapeStroke: rectangle, ellipse or line with optional stroke and fill
- BitmapImage: encoded raster image placed in a rectangle
- VectorImage: SVG document placed in a rectangle

Outlines are produced through the fontTools pen protocol. The same drawing
routine feeds a BoundsPen for the bounds and an SVGPathPen for rendering, so
both always agree on the geometry.
"""

import base64
import binascii
import copy
import io
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from fontTools.misc.arrayTools import calcBounds
from fontTools.pens.basePen import AbstractPen
from fontTools.pens.boundsPen import BoundsPen
from fontTools.pens.svgPathPen import SVGPathPen
from PIL import Image, UnidentifiedImageError

from strokeport.domain.bounds import Aabb
from strokeport.domain.color import Color
from strokeport.exceptions import RenderError
from strokeport.render.context import SvgRenderContext, fmt

# Control point distance for approximating a quarter ellipse with a cubic
_KAPPA = 0.5522847498


def _path_data(draw_outline: Any) -> str:
    pen = SVGPathPen(None, ntos=fmt)
    draw_outline(pen)
    return pen.getCommands()


def _outline_bounds(draw_outline: Any) -> Aabb:
    pen = BoundsPen(None)
    draw_outline(pen)
    if pen.bounds is None:
        return Aabb.new_invalid()
    return Aabb.from_rect(pen.bounds)


class Stroke(ABC):
    """A drawable unit of stroke content.

    Strokes are shared between the live document and export snapshots and
    must not be mutated through a shared reference. Callers that need a
    modified stroke use clone() first.
    """

    kind: ClassVar[str]

    @property
    def is_image(self) -> bool:
        """True for strokes backed by an image."""
        return False

    @abstractmethod
    def bounds(self) -> Aabb:
        """Bounds of everything the stroke draws."""

    @abstractmethod
    def draw(self, ctx: SvgRenderContext, image_scale: float) -> None:
        """Draw the stroke.

        Args:
            ctx: Render backend to draw on
            image_scale: Resolution scale for raster content

        Raises:
            RenderError: If drawing fails
        """

    @abstractmethod
    def set_to_darkest_color(self) -> None:
        """Replace all colors of this stroke with its darkest color."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, including the kind field."""

    def clone(self) -> "Stroke":
        """Return an independent deep copy of the stroke."""
        return copy.deepcopy(self)


@dataclass
class BrushStroke(Stroke):
    """A freehand stroke along a polyline.

    Attributes:
        points: Polyline points in document coordinates
        color: Stroke color
        width: Stroke width in document units
    """

    kind: ClassVar[str] = "brush"

    points: list[tuple[float, float]]
    color: Color = Color.BLACK
    width: float = 1.0

    def draw_outline(self, pen: AbstractPen) -> None:
        """Draw the centerline as an open path."""
        if not self.points:
            return
        pen.moveTo(self.points[0])
        for point in self.points[1:]:
            pen.lineTo(point)
        pen.endPath()

    def bounds(self) -> Aabb:
        if not self.points:
            return Aabb.new_invalid()
        return Aabb.from_rect(calcBounds(self.points)).loosened(self.width / 2.0)

    def draw(self, ctx: SvgRenderContext, image_scale: float) -> None:
        if len(self.points) == 1:
            ctx.draw_circle(self.points[0], self.width / 2.0, self.color)
            return
        ctx.draw_path(
            _path_data(self.draw_outline),
            stroke=self.color,
            stroke_width=self.width,
        )

    def set_to_darkest_color(self) -> None:
        """Leave the stroke unchanged.

        A brush stroke has a single color, which already is its darkest color.
        """

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "points": [list(p) for p in self.points],
            "color": self.color.to_dict(),
            "width": self.width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BrushStroke":
        """Create from dictionary.

        Raises:
            ValueError: If the stroke has no points
        """
        points = [(float(x), float(y)) for x, y in data["points"]]
        if not points:
            raise ValueError("Brush stroke without points")
        return cls(
            points=points,
            color=Color.from_dict(data["color"]) if "color" in data else Color.BLACK,
            width=float(data.get("width", 1.0)),
        )


class ShapeKind(str, Enum):
    """Geometric shape of a ShapeStroke."""

    RECTANGLE = "rectangle"
    ELLIPSE = "ellipse"
    LINE = "line"


@dataclass
class ShapeStroke(Stroke):
    """A geometric shape with optional outline and fill.

    Attributes:
        shape: Shape kind
        rect: Box the shape is inscribed in; a line runs from mins to maxs
        stroke_color: Outline color, None for no outline
        fill_color: Fill color, None for no fill
        stroke_width: Outline width in document units
    """

    kind: ClassVar[str] = "shape"

    shape: ShapeKind
    rect: Aabb
    stroke_color: Color | None = Color.BLACK
    fill_color: Color | None = None
    stroke_width: float = 1.0

    def draw_outline(self, pen: AbstractPen) -> None:
        """Draw the shape outline."""
        (x0, y0), (x1, y1) = self.rect.mins, self.rect.maxs

        if self.shape == ShapeKind.LINE:
            pen.moveTo((x0, y0))
            pen.lineTo((x1, y1))
            pen.endPath()
        elif self.shape == ShapeKind.RECTANGLE:
            pen.moveTo((x0, y0))
            pen.lineTo((x1, y0))
            pen.lineTo((x1, y1))
            pen.lineTo((x0, y1))
            pen.closePath()
        else:
            cx, cy = (x0 + x1) / 2.0, (y0 + y1) / 2.0
            rx, ry = (x1 - x0) / 2.0, (y1 - y0) / 2.0
            kx, ky = rx * _KAPPA, ry * _KAPPA
            pen.moveTo((cx + rx, cy))
            pen.curveTo((cx + rx, cy + ky), (cx + kx, cy + ry), (cx, cy + ry))
            pen.curveTo((cx - kx, cy + ry), (cx - rx, cy + ky), (cx - rx, cy))
            pen.curveTo((cx - rx, cy - ky), (cx - kx, cy - ry), (cx, cy - ry))
            pen.curveTo((cx + kx, cy - ry), (cx + rx, cy - ky), (cx + rx, cy))
            pen.closePath()

    def bounds(self) -> Aabb:
        outline = _outline_bounds(self.draw_outline)
        if self.stroke_color is None:
            return outline
        return outline.loosened(self.stroke_width / 2.0)

    def draw(self, ctx: SvgRenderContext, image_scale: float) -> None:
        fill = self.fill_color if self.shape != ShapeKind.LINE else None
        ctx.draw_path(
            _path_data(self.draw_outline),
            fill=fill,
            stroke=self.stroke_color,
            stroke_width=self.stroke_width,
            line_cap="butt" if self.shape == ShapeKind.RECTANGLE else "round",
            line_join="miter" if self.shape == ShapeKind.RECTANGLE else "round",
        )

    def set_to_darkest_color(self) -> None:
        present = [c for c in (self.stroke_color, self.fill_color) if c is not None]
        darkest = Color.darkest(present)
        if darkest is None:
            return
        if self.stroke_color is not None:
            self.stroke_color = darkest.with_alpha(self.stroke_color.a)
        if self.fill_color is not None:
            self.fill_color = darkest.with_alpha(self.fill_color.a)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "shape": self.shape.value,
            "rect": self.rect.to_dict(),
            "stroke_color": self.stroke_color.to_dict() if self.stroke_color else None,
            "fill_color": self.fill_color.to_dict() if self.fill_color else None,
            "stroke_width": self.stroke_width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeStroke":
        stroke_color = data.get("stroke_color", Color.BLACK.to_dict())
        fill_color = data.get("fill_color")
        return cls(
            shape=ShapeKind(data["shape"]),
            rect=Aabb.from_dict(data["rect"]),
            stroke_color=Color.from_dict(stroke_color) if stroke_color else None,
            fill_color=Color.from_dict(fill_color) if fill_color else None,
            stroke_width=float(data.get("stroke_width", 1.0)),
        )


@dataclass
class BitmapImage(Stroke):
    """An encoded raster image stretched to a rectangle.

    Attributes:
        rectangle: Placement of the image in document coordinates
        data: Encoded image bytes (PNG, JPEG, ...)
    """

    kind: ClassVar[str] = "bitmap_image"

    rectangle: Aabb
    data: bytes = field(repr=False)

    @property
    def is_image(self) -> bool:
        return True

    def bounds(self) -> Aabb:
        return self.rectangle

    def render_png(self, image_scale: float) -> bytes:
        """Resample the image to the rectangle size times image_scale.

        Returns:
            PNG encoded image data

        Raises:
            RenderError: If the image data cannot be decoded
        """
        width, height = self.rectangle.extents()
        target = (max(1, round(width * image_scale)), max(1, round(height * image_scale)))

        try:
            with Image.open(io.BytesIO(self.data)) as image:
                if image.size == target and image.format == "PNG":
                    return self.data
                resampled = image.convert("RGBA").resize(target, Image.Resampling.LANCZOS)
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise RenderError(f"could not decode bitmap image: {e}") from e

        buffer = io.BytesIO()
        resampled.save(buffer, format="PNG")
        return buffer.getvalue()

    def draw(self, ctx: SvgRenderContext, image_scale: float) -> None:
        ctx.draw_image(self.rectangle, self.render_png(image_scale))

    def set_to_darkest_color(self) -> None:
        """Leave the image unchanged; image content is never recolored."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "rectangle": self.rectangle.to_dict(),
            "data": base64.b64encode(self.data).decode("ascii"),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BitmapImage":
        try:
            raw = base64.b64decode(data["data"], validate=True)
        except binascii.Error as e:
            raise ValueError(f"bitmap data is not valid base64: {e}") from e
        return cls(rectangle=Aabb.from_dict(data["rectangle"]), data=raw)


@dataclass
class VectorImage(Stroke):
    """An SVG document stretched to a rectangle.

    Attributes:
        rectangle: Placement of the image in document coordinates
        svg_data: The SVG document as a string
    """

    kind: ClassVar[str] = "vector_image"

    rectangle: Aabb
    svg_data: str = field(repr=False)

    @property
    def is_image(self) -> bool:
        return True

    def bounds(self) -> Aabb:
        return self.rectangle

    def draw(self, ctx: SvgRenderContext, image_scale: float) -> None:
        try:
            root = ET.fromstring(self.svg_data)
        except ET.ParseError as e:
            raise RenderError(f"could not parse vector image: {e}") from e
        ctx.draw_svg(self.rectangle, root)

    def set_to_darkest_color(self) -> None:
        """Leave the image unchanged; image content is never recolored."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "rectangle": self.rectangle.to_dict(),
            "svg_data": self.svg_data,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VectorImage":
        return cls(rectangle=Aabb.from_dict(data["rectangle"]), svg_data=data["svg_data"])


_STROKE_TYPES: dict[str, Any] = {
    BrushStroke.kind: BrushStroke,
    ShapeStroke.kind: ShapeStroke,
    BitmapImage.kind: BitmapImage,
    VectorImage.kind: VectorImage,
}


def stroke_from_dict(data: dict[str, Any]) -> Stroke:
    """Deserialize any stroke from its dictionary form.

    Args:
        data: Dictionary with a kind field naming the stroke type

    Returns:
        Stroke instance of the matching type

    Raises:
        ValueError: If the kind is unknown
    """
    kind = data.get("kind")
    stroke_type = _STROKE_TYPES.get(kind)  # type: ignore[arg-type]
    if stroke_type is None:
        raise ValueError(f"Unknown stroke kind: {kind!r}")
    return stroke_type.from_dict(data)
