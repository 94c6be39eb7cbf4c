"""Stroke content reader.

This module provides the StrokeContentReader class for loading stroke content
files, and decode_stroke_content() for clipboard payloads.
"""

import json
from pathlib import Path

from strokeport.domain.content import StrokeContent
from strokeport.exceptions import ContentFormatError, ContentLoadError


def decode_stroke_content(data: bytes | str, source: str = "<clipboard>") -> StrokeContent:
    """Decode a serialized stroke content payload.

    Args:
        data: JSON payload, as bytes or text
        source: Name of the payload origin for error messages

    Returns:
        Decoded StrokeContent

    Raises:
        ContentFormatError: If the payload is not valid stroke content
    """
    try:
        raw = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ContentFormatError(source, f"not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ContentFormatError(source, "top level value must be an object")

    try:
        return StrokeContent.from_dict(raw)
    except (KeyError, ValueError, TypeError) as e:
        raise ContentFormatError(source, f"{type(e).__name__}: {e}") from e


class StrokeContentReader:
    """Loads stroke content from a JSON file.

    Example:
        reader = StrokeContentReader(Path("selection.json"))
        reader.load()
        print(reader.content.size())
    """

    def __init__(self, content_path: Path) -> None:
        """Initialize the reader.

        Args:
            content_path: Path to the stroke content JSON file
        """
        self._content_path = content_path
        self._content: StrokeContent | None = None

    def load(self) -> None:
        """Load the stroke content file.

        Raises:
            FileNotFoundError: If the file does not exist
            ContentLoadError: If the file cannot be read
            ContentFormatError: If the file is not valid stroke content
        """
        if not self._content_path.exists():
            raise FileNotFoundError(f"Stroke content file not found: {self._content_path}")

        try:
            data = self._content_path.read_bytes()
        except OSError as e:
            raise ContentLoadError(str(self._content_path), str(e)) from e

        self._content = decode_stroke_content(data, source=str(self._content_path))

    @property
    def content(self) -> StrokeContent:
        """Return the loaded stroke content.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._content is None:
            raise RuntimeError("Content not loaded. Call load() first.")

        return self._content

    def close(self) -> None:
        """Drop the loaded content."""
        self._content = None

    def __enter__(self) -> "StrokeContentReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
