"""Background of exported stroke content.

A background is a fill color with an optional repeating pattern. Patterns
are aligned to multiples of the pattern size in document coordinates, so the
same document region always renders the same pattern regardless of the
bounds it is drawn in.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from fontTools.pens.svgPathPen import SVGPathPen

from strokeport.domain.bounds import Aabb
from strokeport.domain.color import Color
from strokeport.exceptions import RenderError
from strokeport.render.context import SvgRenderContext, fmt

DEFAULT_PATTERN_COLOR = Color(0.6, 0.75, 0.9, 1.0)


class PatternStyle(str, Enum):
    """Repeating pattern drawn over the background color."""

    NONE = "none"
    LINES = "lines"
    GRID = "grid"
    DOTS = "dots"


@dataclass
class Background:
    """Background color and pattern.

    Attributes:
        color: Fill color
        pattern: Pattern style
        pattern_size: (width, height) of one pattern cell
        pattern_color: Color of the pattern lines or dots
        pattern_width: Line width, or dot diameter, of the pattern
    """

    color: Color = Color.WHITE
    pattern: PatternStyle = PatternStyle.NONE
    pattern_size: tuple[float, float] = (32.0, 32.0)
    pattern_color: Color = DEFAULT_PATTERN_COLOR
    pattern_width: float = 1.0

    def draw(
        self,
        ctx: SvgRenderContext,
        bounds: Aabb,
        draw_pattern: bool,
        optimize_printing: bool,
    ) -> None:
        """Draw the background covering bounds.

        Args:
            ctx: Render backend to draw on
            bounds: Region to cover
            draw_pattern: Whether to draw the pattern on top of the color
            optimize_printing: Fill with white instead of the background color

        Raises:
            RenderError: If the pattern size is not positive
        """
        fill = Color.WHITE if optimize_printing else self.color
        ctx.fill_rect(bounds, fill)

        if not draw_pattern or self.pattern == PatternStyle.NONE:
            return

        cell_w, cell_h = self.pattern_size
        if cell_w <= 0 or cell_h <= 0:
            raise RenderError(f"pattern size must be positive, got {self.pattern_size}")

        xs = _aligned_steps(bounds.mins[0], bounds.maxs[0], cell_w)
        ys = _aligned_steps(bounds.mins[1], bounds.maxs[1], cell_h)

        if self.pattern == PatternStyle.DOTS:
            for y in ys:
                for x in xs:
                    ctx.draw_circle((x, y), self.pattern_width / 2.0, self.pattern_color)
            return

        pen = SVGPathPen(None, ntos=fmt)
        for y in ys:
            pen.moveTo((bounds.mins[0], y))
            pen.lineTo((bounds.maxs[0], y))
            pen.endPath()
        if self.pattern == PatternStyle.GRID:
            for x in xs:
                pen.moveTo((x, bounds.mins[1]))
                pen.lineTo((x, bounds.maxs[1]))
                pen.endPath()

        ctx.draw_path(
            pen.getCommands(),
            stroke=self.pattern_color,
            stroke_width=self.pattern_width,
            line_cap="butt",
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "color": self.color.to_dict(),
            "pattern": self.pattern.value,
            "pattern_size": list(self.pattern_size),
            "pattern_color": self.pattern_color.to_dict(),
            "pattern_width": self.pattern_width,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Background":
        """Deserialize from dictionary. Missing fields take their defaults."""
        defaults = cls()
        size = data.get("pattern_size", defaults.pattern_size)
        return cls(
            color=Color.from_dict(data["color"]) if "color" in data else defaults.color,
            pattern=PatternStyle(data.get("pattern", defaults.pattern.value)),
            pattern_size=(float(size[0]), float(size[1])),
            pattern_color=(
                Color.from_dict(data["pattern_color"])
                if "pattern_color" in data
                else defaults.pattern_color
            ),
            pattern_width=float(data.get("pattern_width", defaults.pattern_width)),
        )


def _aligned_steps(start: float, end: float, step: float) -> list[float]:
    """Multiples of step within [start, end]."""
    first = math.ceil(start / step)
    last = math.floor(end / step)
    return [i * step for i in range(first, last + 1)]
