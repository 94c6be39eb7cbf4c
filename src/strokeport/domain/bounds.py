"""Axis-aligned bounding boxes.

This module defines the Aabb type used for stroke bounds, clip regions and
document bounds. Rect arithmetic is delegated to fontTools' arrayTools, which
works on (xMin, yMin, xMax, yMax) tuples.
"""

import math
from dataclasses import dataclass
from typing import Any

from fontTools.misc.arrayTools import insetRect, pointInRect, unionRect

Rect = tuple[float, float, float, float]


@dataclass(frozen=True, slots=True)
class Aabb:
    """An axis-aligned bounding box in document coordinates.

    A box is valid only when mins <= maxs on both axes. The invalid box
    returned by new_invalid() is the identity of merged(), which makes it a
    suitable start value when folding the bounds of several strokes.

    Attributes:
        mins: Minimum (x, y) corner
        maxs: Maximum (x, y) corner
    """

    mins: tuple[float, float]
    maxs: tuple[float, float]

    @classmethod
    def new_invalid(cls) -> "Aabb":
        """Create the invalid box that merges as the identity."""
        return cls(mins=(math.inf, math.inf), maxs=(-math.inf, -math.inf))

    @classmethod
    def from_rect(cls, rect: Rect) -> "Aabb":
        """Create a box from an (xMin, yMin, xMax, yMax) tuple."""
        x_min, y_min, x_max, y_max = rect
        return cls(mins=(float(x_min), float(y_min)), maxs=(float(x_max), float(y_max)))

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> "Aabb":
        """Create a box from an origin and a size."""
        return cls(mins=(x, y), maxs=(x + width, y + height))

    def to_rect(self) -> Rect:
        """Convert to an (xMin, yMin, xMax, yMax) tuple."""
        return (self.mins[0], self.mins[1], self.maxs[0], self.maxs[1])

    def is_valid(self) -> bool:
        """Check that mins <= maxs on both axes."""
        return self.mins[0] <= self.maxs[0] and self.mins[1] <= self.maxs[1]

    def merged(self, other: "Aabb") -> "Aabb":
        """Return the union of this box and another one."""
        return Aabb.from_rect(unionRect(self.to_rect(), other.to_rect()))

    def loosened(self, margin: float) -> "Aabb":
        """Expand the box by margin on all four sides.

        A negative margin shrinks the box. The result is not clamped, so a
        margin larger than half the extents yields an invalid box.
        """
        return Aabb.from_rect(insetRect(self.to_rect(), -margin, -margin))

    def extents(self) -> tuple[float, float]:
        """Return the (width, height) of the box."""
        return (self.maxs[0] - self.mins[0], self.maxs[1] - self.mins[1])

    def contains(self, other: "Aabb") -> bool:
        """Check if other lies entirely inside this box (edges inclusive)."""
        rect = self.to_rect()
        return pointInRect(other.mins, rect) and pointInRect(other.maxs, rect)

    def translated(self, offset: tuple[float, float]) -> "Aabb":
        """Return the box moved by offset."""
        dx, dy = offset
        return Aabb(
            mins=(self.mins[0] + dx, self.mins[1] + dy),
            maxs=(self.maxs[0] + dx, self.maxs[1] + dy),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with mins and maxs as two-element lists
        """
        return {"mins": list(self.mins), "maxs": list(self.maxs)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Aabb":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with mins and maxs fields

        Returns:
            Aabb instance
        """
        x_min, y_min = data["mins"]
        x_max, y_max = data["maxs"]
        return cls(mins=(float(x_min), float(y_min)), maxs=(float(x_max), float(y_max)))
