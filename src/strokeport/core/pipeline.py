"""Render pipeline for stroke content.

Draws stroke content in two passes against a render backend:

1. Background pass, clipped to the bounds loosened by the margin
2. Content pass, clipped to the tight bounds

Both passes run in their own backend state level, which is restored on every
exit path. Drawing failures abort the remaining strokes and propagate after
the state has been restored.
"""

import structlog

from strokeport.domain.bounds import Aabb
from strokeport.domain.content import StrokeContent
from strokeport.domain.strokes import Stroke
from strokeport.render.context import SvgRenderContext

logger = structlog.get_logger(__name__)


def image_bounds(strokes: list[Stroke]) -> list[Aabb]:
    """Bounds of all image strokes."""
    return [stroke.bounds() for stroke in strokes if stroke.is_image]


def should_optimize_stroke(stroke_bounds: Aabb, images: list[Aabb]) -> bool:
    """Check if a stroke is reduced to its darkest color for printing.

    Strokes inside an image are assumed to be part of it and keep their
    colors. This uses bounding box containment, not exact hit testing, so a
    diagonal stroke over an image may still be reduced.

    Args:
        stroke_bounds: Bounds of the stroke
        images: Bounds of all image strokes of the content

    Returns:
        True if no image contains the stroke
    """
    return all(not image.contains(stroke_bounds) for image in images)


def draw_stroke_content(
    content: StrokeContent,
    ctx: SvgRenderContext,
    draw_background: bool,
    draw_pattern: bool,
    optimize_printing: bool,
    margin: float,
    image_scale: float,
) -> None:
    """Draw stroke content onto a render backend.

    Content without bounds draws nothing and leaves ctx untouched.

    Args:
        content: Stroke content to draw
        ctx: Render backend
        draw_background: Whether to draw the background
        draw_pattern: Whether to draw the background pattern
        optimize_printing: Draw vector strokes that are not inside an image
            with their darkest color only
        margin: Margin around the content for the background pass
        image_scale: Resolution scale for raster strokes

    Raises:
        InvalidBoundsError: If the margin inverts the bounds
        RenderError: If drawing a stroke or the background fails
    """
    bounds = content.effective_bounds()
    if bounds is None:
        return
    bounds_loosened = bounds.loosened(margin)

    with ctx.scoped():
        ctx.clip_rect(bounds_loosened)

        if draw_background and content.background is not None:
            content.background.draw(ctx, bounds_loosened, draw_pattern, optimize_printing)

    with ctx.scoped():
        ctx.clip_rect(bounds)

        images = image_bounds(content.strokes)
        optimized = 0

        for stroke in content.strokes:
            if optimize_printing and should_optimize_stroke(stroke.bounds(), images):
                darkest_color_stroke = stroke.clone()
                darkest_color_stroke.set_to_darkest_color()
                darkest_color_stroke.draw(ctx, image_scale)
                optimized += 1
            else:
                stroke.draw(ctx, image_scale)

    logger.debug(
        "Stroke content drawn",
        strokes=len(content.strokes),
        images=len(images),
        optimized=optimized,
    )
