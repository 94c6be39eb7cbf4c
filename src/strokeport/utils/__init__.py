"""Utility functions for strokeport.

This module provides utility functions including:

- Logging setup and configuration
- Color conversion to and from 8-bit interchange colors
- Value and coordinate conversion between resolutions
- Page file naming
"""

from strokeport.utils.conversions import (
    PositiveRange,
    color_from_xopp,
    convert_coord_dpi,
    convert_value_dpi,
    format_page_filename,
    now_formatted_string,
    positive_range,
    xoppcolor_from_color,
)
from strokeport.utils.logging import (
    ExportLogger,
    ExportStats,
    configure_logging,
    reset_logging,
)

__all__ = [
    "ExportLogger",
    "ExportStats",
    "PositiveRange",
    "color_from_xopp",
    "configure_logging",
    "convert_coord_dpi",
    "convert_value_dpi",
    "format_page_filename",
    "now_formatted_string",
    "positive_range",
    "reset_logging",
    "xoppcolor_from_color",
]
