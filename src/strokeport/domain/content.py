"""Stroke content, the unit of export and clipboard transfer.

StrokeContent bundles strokes with optional bounds and an optional
background. It is built fresh for every export from the currently selected
or visible strokes and dropped once the export artifact exists.
"""

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar

from strokeport.domain.aggregation import content_size, effective_bounds
from strokeport.domain.background import Background
from strokeport.domain.bounds import Aabb
from strokeport.domain.strokes import Stroke, stroke_from_dict


@dataclass
class StrokeContent:
    """A collection of strokes with optional bounds and background.

    The strokes are shared with their owner and never mutated here. The
    effective bounds are recomputed on every query since the owner may change
    strokes between construction and export.

    Attributes:
        strokes: Strokes in drawing order
        bounds: Explicit bounds; when set they replace the computed bounds,
            e.g. to export a whole page even if the strokes are smaller
        background: Background drawn behind the strokes
    """

    MIME_TYPE: ClassVar[str] = "application/strokeport-stroke-content"
    CLIPBOARD_EXPORT_MARGIN: ClassVar[float] = 6.0

    strokes: list[Stroke] = field(default_factory=list)
    bounds: Aabb | None = None
    background: Background | None = None

    def with_strokes(self, strokes: list[Stroke]) -> "StrokeContent":
        """Return a copy using the given strokes."""
        return replace(self, strokes=strokes)

    def with_bounds(self, bounds: Aabb | None) -> "StrokeContent":
        """Return a copy using the given bounds override."""
        return replace(self, bounds=bounds)

    def with_background(self, background: Background | None) -> "StrokeContent":
        """Return a copy using the given background."""
        return replace(self, background=background)

    def effective_bounds(self) -> Aabb | None:
        """Bounds override if set, otherwise the merged stroke bounds.

        Returns:
            Effective bounds, or None if there is nothing to export
        """
        return effective_bounds(self.strokes, self.bounds)

    def size(self) -> tuple[float, float] | None:
        """Extents of the effective bounds, or None."""
        return content_size(self.strokes, self.bounds)

    def is_empty(self) -> bool:
        """Check if there is nothing to export."""
        return self.effective_bounds() is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with strokes, bounds and background fields
        """
        return {
            "strokes": [s.to_dict() for s in self.strokes],
            "bounds": self.bounds.to_dict() if self.bounds is not None else None,
            "background": self.background.to_dict() if self.background is not None else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StrokeContent":
        """Deserialize from dictionary.

        Every field is optional and takes its default when missing, so a
        payload with only strokes is accepted.

        Args:
            data: Dictionary representation of stroke content

        Returns:
            StrokeContent instance

        Raises:
            KeyError, ValueError, TypeError: If a present field is malformed
        """
        bounds = data.get("bounds")
        background = data.get("background")
        return cls(
            strokes=[stroke_from_dict(s) for s in data.get("strokes") or []],
            bounds=Aabb.from_dict(bounds) if bounds is not None else None,
            background=Background.from_dict(background) if background is not None else None,
        )
