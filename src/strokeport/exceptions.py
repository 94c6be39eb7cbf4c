"""Exception hierarchy for Strokeport."""

from typing import Any


class StrokeportError(Exception):
    """Base exception for all Strokeport errors."""

    pass


class ContentError(StrokeportError):
    """Errors related to loading stroke content."""

    pass


class ContentLoadError(ContentError):
    """Error loading a stroke content file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load stroke content '{path}': {reason}")


class ContentFormatError(ContentError):
    """Invalid or unsupported stroke content data."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid stroke content '{path}': {details}")


class RenderError(StrokeportError):
    """A drawing call against the render backend failed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Rendering failed: {reason}")


class InvalidBoundsError(RenderError):
    """Bounds with mins greater than maxs were handed to the backend."""

    def __init__(self, bounds: Any) -> None:
        self.bounds = bounds
        super().__init__(f"invalid bounds {bounds!r}")


class SvgError(StrokeportError):
    """Error post-processing a generated SVG document."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Svg processing failed: {reason}")


class ExportSaveError(StrokeportError):
    """Error writing an exported document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save export '{path}': {reason}")
