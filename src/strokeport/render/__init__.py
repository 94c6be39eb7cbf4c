"""SVG render backend for strokeport.

Key classes:
- SvgRenderContext: Records drawing calls as SVG elements, with scoped
  save/restore and rectangle clipping
- Svg: A generated SVG document with its bounds
"""

from strokeport.render.context import SVG_NS, SvgRenderContext, fmt, svg_tag
from strokeport.render.svg import Svg

__all__ = [
    "SVG_NS",
    "Svg",
    "SvgRenderContext",
    "fmt",
    "svg_tag",
]
