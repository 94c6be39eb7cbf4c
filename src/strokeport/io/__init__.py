"""Stroke content I/O layer for strokeport.

This module handles reading stroke content and writing exports.

Key responsibilities:
- Load stroke content JSON files
- Encode and decode clipboard payloads
- Write SVG snapshots with the export naming convention

Key classes:
- StrokeContentReader: Load stroke content files
- SvgWriter: Save SVG snapshots
"""

from strokeport.io.reader import StrokeContentReader, decode_stroke_content
from strokeport.io.writer import SvgWriter, encode_stroke_content

__all__ = [
    "StrokeContentReader",
    "SvgWriter",
    "decode_stroke_content",
    "encode_stroke_content",
]
