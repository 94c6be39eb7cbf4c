"""Color types.

- Color: normalized RGBA color (0.0-1.0 per channel) used by strokes
- XoppColor: 8-bit RGBA color of the Xournal++ interchange format
"""

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, ClassVar


@dataclass(frozen=True, slots=True)
class Color:
    """An RGBA color with normalized channels.

    Attributes:
        r: Red channel (0.0-1.0)
        g: Green channel (0.0-1.0)
        b: Blue channel (0.0-1.0)
        a: Alpha channel (0.0-1.0)
    """

    r: float
    g: float
    b: float
    a: float = 1.0

    BLACK: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    TRANSPARENT: ClassVar["Color"]

    def luminance(self) -> float:
        """Relative luminance of the color, ignoring alpha (Rec. 709 weights)."""
        return 0.2126 * self.r + 0.7152 * self.g + 0.0722 * self.b

    def with_alpha(self, a: float) -> "Color":
        """Return the same color with a different alpha."""
        return Color(self.r, self.g, self.b, a)

    def to_hex(self) -> str:
        """Convert to #RRGGBB, dropping alpha."""
        r, g, b = (round(min(max(c, 0.0), 1.0) * 255) for c in (self.r, self.g, self.b))
        return f"#{r:02X}{g:02X}{b:02X}"

    @staticmethod
    def darkest(colors: Iterable["Color"]) -> "Color | None":
        """Return the color with the lowest luminance.

        The first color wins on ties. Returns None for an empty iterable.
        """
        darkest: Color | None = None
        for color in colors:
            if darkest is None or color.luminance() < darkest.luminance():
                darkest = color
        return darkest

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Color":
        """Deserialize from dictionary. Alpha defaults to opaque."""
        return cls(
            r=float(data["r"]),
            g=float(data["g"]),
            b=float(data["b"]),
            a=float(data.get("a", 1.0)),
        )


Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)


@dataclass(frozen=True, slots=True)
class XoppColor:
    """An RGBA color with 8-bit channels, as stored in Xournal++ files.

    Attributes:
        red: Red channel (0-255)
        green: Green channel (0-255)
        blue: Blue channel (0-255)
        alpha: Alpha channel (0-255)
    """

    red: int
    green: int
    blue: int
    alpha: int = 255
