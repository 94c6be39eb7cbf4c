"""SVG recording render backend.

SvgRenderContext is the drawing backend strokes and backgrounds draw onto.
It records SVG elements into an ElementTree and keeps a stack of state
levels. Every save() opens a new group, clip_rect() nests a clipped group in
the current level and restore() drops back to the enclosing level, so clips
are undone together with their level.
"""

import base64
import uuid
import xml.etree.ElementTree as ET
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TYPE_CHECKING

from strokeport.exceptions import InvalidBoundsError, RenderError

if TYPE_CHECKING:
    from strokeport.domain.bounds import Aabb
    from strokeport.domain.color import Color

SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3

ET.register_namespace("", SVG_NS)


def svg_tag(name: str) -> str:
    """Return the namespace qualified tag for an SVG element name."""
    return f"{{{SVG_NS}}}{name}"


def fmt(value: float) -> str:
    """Format a float for SVG output with a fixed precision."""
    text = f"{float(value):.{_FLOAT_DECIMALS}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def _rect_attrs(bounds: "Aabb") -> dict[str, str]:
    width, height = bounds.extents()
    return {
        "x": fmt(bounds.mins[0]),
        "y": fmt(bounds.mins[1]),
        "width": fmt(width),
        "height": fmt(height),
    }


def _plain_length(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        return float(value.strip().removesuffix("px"))
    except ValueError:
        return None


def _paint_attrs(prefix: str, color: "Color | None") -> dict[str, str]:
    if color is None:
        return {prefix: "none"}
    attrs = {prefix: color.to_hex()}
    if color.a < 1.0:
        attrs[f"{prefix}-opacity"] = fmt(color.a)
    return attrs


class SvgRenderContext:
    """Records drawing calls as SVG elements.

    The context is not reentrant and is owned by one draw call at a time.

    Example:
        ctx = SvgRenderContext()
        with ctx.scoped():
            ctx.clip_rect(bounds)
            ctx.fill_rect(bounds, Color.WHITE)
        root = ctx.finish(bounds)
    """

    def __init__(self) -> None:
        self._defs = ET.Element(svg_tag("defs"))
        self._content = ET.Element(svg_tag("g"))
        self._targets: list[ET.Element] = [self._content]
        self._clip_count = 0
        # Generated ids never match ids of embedded documents
        self._id_prefix = f"strokeport-{uuid.uuid4().hex[:8]}-"

    @property
    def depth(self) -> int:
        """Number of currently open save() levels."""
        return len(self._targets) - 1

    @property
    def _target(self) -> ET.Element:
        return self._targets[-1]

    def save(self) -> None:
        """Open a new state level."""
        self._targets.append(ET.SubElement(self._target, svg_tag("g")))

    def restore(self) -> None:
        """Close the current state level, dropping its clips.

        Raises:
            RenderError: If there is no open level
        """
        if self.depth == 0:
            raise RenderError("restore() without matching save()")
        self._targets.pop()

    @contextmanager
    def scoped(self) -> Iterator["SvgRenderContext"]:
        """Run the enclosed drawing calls in their own state level.

        The level is restored on every exit path, including exceptions.
        """
        self.save()
        try:
            yield self
        finally:
            self.restore()

    def clip_rect(self, bounds: "Aabb") -> None:
        """Clip all following drawing of the current level to bounds.

        Raises:
            InvalidBoundsError: If bounds is not a valid box
        """
        if not bounds.is_valid():
            raise InvalidBoundsError(bounds)

        self._clip_count += 1
        clip_id = f"{self._id_prefix}clip{self._clip_count}"
        clip_path = ET.SubElement(
            self._defs, svg_tag("clipPath"), {"id": clip_id, "clipPathUnits": "userSpaceOnUse"}
        )
        ET.SubElement(clip_path, svg_tag("rect"), _rect_attrs(bounds))

        self._targets[-1] = ET.SubElement(
            self._target, svg_tag("g"), {"clip-path": f"url(#{clip_id})"}
        )

    def fill_rect(self, bounds: "Aabb", color: "Color") -> None:
        """Fill a rectangle."""
        if not bounds.is_valid():
            raise InvalidBoundsError(bounds)
        attrs = _rect_attrs(bounds)
        attrs.update(_paint_attrs("fill", color))
        ET.SubElement(self._target, svg_tag("rect"), attrs)

    def draw_path(
        self,
        d: str,
        *,
        fill: "Color | None" = None,
        stroke: "Color | None" = None,
        stroke_width: float = 1.0,
        line_cap: str = "round",
        line_join: str = "round",
    ) -> None:
        """Draw SVG path data with an optional fill and an optional stroke.

        Empty path data draws nothing.
        """
        if not d:
            return
        attrs = {"d": d}
        attrs.update(_paint_attrs("fill", fill))
        attrs.update(_paint_attrs("stroke", stroke))
        if stroke is not None:
            attrs["stroke-width"] = fmt(stroke_width)
            attrs["stroke-linecap"] = line_cap
            attrs["stroke-linejoin"] = line_join
        ET.SubElement(self._target, svg_tag("path"), attrs)

    def draw_circle(self, center: tuple[float, float], radius: float, color: "Color") -> None:
        """Fill a circle."""
        attrs = {"cx": fmt(center[0]), "cy": fmt(center[1]), "r": fmt(radius)}
        attrs.update(_paint_attrs("fill", color))
        ET.SubElement(self._target, svg_tag("circle"), attrs)

    def draw_image(self, bounds: "Aabb", data: bytes, mime_type: str = "image/png") -> None:
        """Embed encoded raster data stretched to bounds."""
        if not bounds.is_valid():
            raise InvalidBoundsError(bounds)
        encoded = base64.b64encode(data).decode("ascii")
        attrs = _rect_attrs(bounds)
        attrs["preserveAspectRatio"] = "none"
        attrs["href"] = f"data:{mime_type};base64,{encoded}"
        ET.SubElement(self._target, svg_tag("image"), attrs)

    def draw_svg(self, bounds: "Aabb", svg_root: ET.Element) -> None:
        """Embed a parsed SVG document stretched to bounds.

        The element is placed as a nested <svg> viewport; its own viewBox
        decides how the content maps onto bounds. A document without a
        viewBox gets one from its own width and height, so it is stretched
        instead of cropped.
        """
        if not bounds.is_valid():
            raise InvalidBoundsError(bounds)
        if svg_root.get("viewBox") is None:
            width = _plain_length(svg_root.get("width"))
            height = _plain_length(svg_root.get("height"))
            if width is not None and height is not None and width > 0 and height > 0:
                svg_root.set("viewBox", f"0 0 {fmt(width)} {fmt(height)}")
        svg_root.attrib.update(_rect_attrs(bounds))
        svg_root.set("preserveAspectRatio", "none")
        self._target.append(svg_root)

    def finish(self, bounds: "Aabb") -> ET.Element:
        """Build the root <svg> element for the recording.

        Args:
            bounds: Document bounds, used for the size and the viewBox

        Returns:
            Root element containing defs and all recorded drawing

        Raises:
            InvalidBoundsError: If bounds is not a valid box
        """
        if not bounds.is_valid():
            raise InvalidBoundsError(bounds)

        width, height = bounds.extents()
        root = ET.Element(
            svg_tag("svg"),
            {
                "version": "1.1",
                "width": fmt(width),
                "height": fmt(height),
                "viewBox": f"{fmt(bounds.mins[0])} {fmt(bounds.mins[1])} {fmt(width)} {fmt(height)}",
            },
        )
        if len(self._defs):
            root.append(self._defs)
        root.append(self._content)
        return root
