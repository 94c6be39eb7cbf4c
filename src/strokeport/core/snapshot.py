"""SVG snapshots of stroke content."""

import structlog

from strokeport.core.pipeline import draw_stroke_content
from strokeport.domain.content import StrokeContent
from strokeport.exceptions import SvgError
from strokeport.render.context import SvgRenderContext
from strokeport.render.svg import Svg

logger = structlog.get_logger(__name__)


def generate_svg(
    content: StrokeContent,
    draw_background: bool,
    draw_pattern: bool,
    optimize_printing: bool,
    margin: float,
    image_scale: float = 1.0,
) -> Svg | None:
    """Render stroke content into an SVG document moved to the origin.

    Drawing failures propagate. Failing to move the document to the origin
    is only logged, and the document is returned with its original bounds.

    Args:
        content: Stroke content to render
        draw_background: Whether to draw the background
        draw_pattern: Whether to draw the background pattern
        optimize_printing: Draw vector strokes with their darkest color only
        margin: Margin added around the content
        image_scale: Resolution scale for raster strokes, 1.0 keeps one
            pixel per document unit

    Returns:
        The generated Svg, or None if the content has no bounds

    Raises:
        RenderError: If drawing fails
    """
    bounds = content.effective_bounds()
    if bounds is None:
        return None
    bounds_loosened = bounds.loosened(margin)

    def draw(ctx: SvgRenderContext) -> None:
        draw_stroke_content(
            content,
            ctx,
            draw_background=draw_background,
            draw_pattern=draw_pattern,
            optimize_printing=optimize_printing,
            margin=margin,
            image_scale=image_scale,
        )

    svg = Svg.gen_with_context(draw, bounds_loosened)

    try:
        svg.simplify()
    except SvgError as e:
        logger.warning(
            "Simplifying svg while generating stroke content svg failed",
            error=str(e),
        )

    return svg
