"""Unit and color conversions.

Pure helpers used by the export glue and by interchange file formats:
- Color conversion between normalized and 8-bit Xournal++ colors
- Value and coordinate conversion between resolutions (DPI)
- Ordered half-open ranges
- Page file names and timestamps
"""

import math
from datetime import datetime
from typing import Any, NamedTuple

from strokeport.domain.color import Color, XoppColor


def color_from_xopp(xopp_color: XoppColor) -> Color:
    """Convert an 8-bit XoppColor to a normalized Color.

    Args:
        xopp_color: Color with channels in the range 0-255

    Returns:
        Color with channels in the range 0.0-1.0
    """
    return Color(
        r=xopp_color.red / 255.0,
        g=xopp_color.green / 255.0,
        b=xopp_color.blue / 255.0,
        a=xopp_color.alpha / 255.0,
    )


def _channel_to_u8(value: float) -> int:
    return min(max(math.floor(value * 255.0), 0), 255)


def xoppcolor_from_color(color: Color) -> XoppColor:
    """Convert a normalized Color to an 8-bit XoppColor.

    Channels are truncated, not rounded, so converting back with
    color_from_xopp() may be off by up to 1/255 per channel. Out of range
    channels saturate at 0 and 255.

    Args:
        color: Color with channels in the range 0.0-1.0

    Returns:
        XoppColor with channels in the range 0-255
    """
    return XoppColor(
        red=_channel_to_u8(color.r),
        green=_channel_to_u8(color.g),
        blue=_channel_to_u8(color.b),
        alpha=_channel_to_u8(color.a),
    )


def convert_value_dpi(value: float, current_dpi: float, target_dpi: float) -> float:
    """Convert a value from one DPI to another.

    Both DPI values must be positive; this is not checked.

    Args:
        value: The value to convert
        current_dpi: The current DPI of the value
        target_dpi: The target DPI to convert to

    Returns:
        The converted value in the target DPI
    """
    return (value / current_dpi) * target_dpi


def convert_coord_dpi(
    coord: tuple[float, float], current_dpi: float, target_dpi: float
) -> tuple[float, float]:
    """Convert an (x, y) coordinate from one DPI to another.

    Both DPI values must be positive; this is not checked.
    """
    return (
        convert_value_dpi(coord[0], current_dpi, target_dpi),
        convert_value_dpi(coord[1], current_dpi, target_dpi),
    )


class PositiveRange(NamedTuple):
    """Half-open range [start, end) with start <= end."""

    start: Any
    end: Any

    def __contains__(self, value: object) -> bool:
        return self.start <= value < self.end  # type: ignore[operator]

    def is_empty(self) -> bool:
        """Check if the range contains no values."""
        return not self.start < self.end

    def length(self) -> Any:
        """Return end - start."""
        return self.end - self.start


def positive_range(first: Any, second: Any) -> PositiveRange:
    """Return the half-open range between two values, smaller value first.

    Equal values give an empty range. The order is decided by first < second
    alone, so for unordered values such as NaN the arguments come back
    swapped.
    """
    if first < second:
        return PositiveRange(first, second)
    return PositiveRange(second, first)


def now_formatted_string() -> str:
    """Return the current local date and time as YYYY-MM-DD_HH:MM:SS."""
    return datetime.now().strftime("%Y-%m-%d_%H:%M:%S")


def format_page_filename(file_stem_name: str, i: int) -> str:
    """Return the file name for page i of a document.

    Example:
        format_page_filename("Notes", 3) -> "Notes - Page 03"
    """
    return f"{file_stem_name} - Page {i:02}"
