"""Writers for exported stroke content.

This module provides the SvgWriter class for saving SVG snapshots and
encode_stroke_content() for clipboard payloads.
"""

import json
from pathlib import Path

from strokeport.domain.content import StrokeContent
from strokeport.exceptions import ExportSaveError
from strokeport.render.svg import Svg


def encode_stroke_content(content: StrokeContent) -> bytes:
    """Encode stroke content as a JSON payload.

    The payload is identified by StrokeContent.MIME_TYPE on the clipboard.

    Args:
        content: Stroke content to encode

    Returns:
        UTF-8 encoded JSON
    """
    return json.dumps(content.to_dict(), separators=(",", ":")).encode("utf-8")


class SvgWriter:
    """Writes SVG snapshots to disk.

    Example:
        writer = SvgWriter(Path("selection.svg"))
        writer.save(svg)
    """

    def __init__(self, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            output_path: Path where the SVG will be saved
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Path the SVG is written to."""
        return self._output_path

    def save(self, svg: Svg) -> None:
        """Save the SVG document, creating parent directories.

        Raises:
            ExportSaveError: If the file cannot be written
        """
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_bytes(svg.to_bytes())
        except OSError as e:
            raise ExportSaveError(str(self._output_path), str(e)) from e

    @staticmethod
    def get_export_path(input_path: Path) -> Path:
        """Generate the output path for an exported content file.

        Converts: selection.json -> selection.svg
                  notes/page.strokes.json -> notes/page.strokes.svg

        Args:
            input_path: Stroke content file path

        Returns:
            Sibling path with .svg extension
        """
        return input_path.with_suffix(".svg")
