"""SVG documents generated from recorded drawing."""

import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass

from strokeport.domain.bounds import Aabb
from strokeport.exceptions import InvalidBoundsError, SvgError
from strokeport.render.context import SvgRenderContext, fmt, svg_tag

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'


@dataclass
class Svg:
    """A self-contained SVG document and the bounds it covers.

    Attributes:
        svg_data: The serialized <svg> element, without XML header
        bounds: Document region covered by the SVG viewBox
    """

    svg_data: str
    bounds: Aabb

    @classmethod
    def gen_with_context(
        cls,
        draw_func: Callable[[SvgRenderContext], None],
        bounds: Aabb,
    ) -> "Svg":
        """Record draw_func on a fresh context and build a document from it.

        Args:
            draw_func: Drawing routine run against the recording context
            bounds: Document region the SVG covers

        Returns:
            Svg with the recorded drawing, in document coordinates

        Raises:
            InvalidBoundsError: If bounds is not a valid box
            RenderError: If draw_func fails
        """
        if not bounds.is_valid():
            raise InvalidBoundsError(bounds)

        ctx = SvgRenderContext()
        draw_func(ctx)
        root = ctx.finish(bounds)
        return cls(svg_data=ET.tostring(root, encoding="unicode"), bounds=bounds)

    def simplify(self) -> None:
        """Move the document to the origin.

        Afterwards the bounds are mins: (0, 0), maxs: extents, and the
        content is translated by -mins.

        Raises:
            SvgError: If the document cannot be parsed or has invalid bounds
        """
        if not self.bounds.is_valid():
            raise SvgError(f"cannot simplify svg with invalid bounds {self.bounds!r}")

        try:
            root = ET.fromstring(self.svg_data)
        except ET.ParseError as e:
            raise SvgError(f"could not parse svg data: {e}") from e

        if root.tag != svg_tag("svg"):
            raise SvgError(f"unexpected root element {root.tag!r}")

        min_x, min_y = self.bounds.mins
        width, height = self.bounds.extents()

        group = ET.Element(
            svg_tag("g"), {"transform": f"translate({fmt(-min_x)} {fmt(-min_y)})"}
        )
        group.extend(list(root))
        for child in list(root):
            root.remove(child)
        root.append(group)

        root.set("width", fmt(width))
        root.set("height", fmt(height))
        root.set("viewBox", f"0 0 {fmt(width)} {fmt(height)}")

        self.svg_data = ET.tostring(root, encoding="unicode")
        self.bounds = Aabb(mins=(0.0, 0.0), maxs=(width, height))

    def to_string(self) -> str:
        """Return the document with XML header."""
        return XML_HEADER + self.svg_data + "\n"

    def to_bytes(self) -> bytes:
        """Return the UTF-8 encoded document with XML header."""
        return self.to_string().encode("utf-8")
