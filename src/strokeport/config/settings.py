"""Configuration settings for Strokeport."""

from pathlib import Path

from pydantic import BaseModel, Field

from strokeport.domain.content import StrokeContent


class ExportConfig(BaseModel):
    """Configuration for rendering stroke content."""

    draw_background: bool = Field(
        default=True,
        description="Draw the content background",
    )
    draw_pattern: bool = Field(
        default=True,
        description="Draw the background pattern (lines, grid, dots)",
    )
    optimize_printing: bool = Field(
        default=False,
        description="Draw vector strokes that are not inside an image with their darkest color",
    )
    margin: float = Field(
        default=0.0,
        ge=-1000.0,
        le=1000.0,
        description="Margin around the content in document units",
    )
    image_scale: float = Field(
        default=1.0,
        gt=0.0,
        le=16.0,
        description="Resolution scale for raster images",
    )

    @classmethod
    def for_clipboard(cls, **overrides: object) -> "ExportConfig":
        """Export settings used when copying content to the clipboard."""
        values: dict[str, object] = {"margin": StrokeContent.CLIPBOARD_EXPORT_MARGIN}
        values.update(overrides)
        return cls.model_validate(values)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class StrokeportSettings(BaseModel):
    """Main application settings."""

    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StrokeportSettings:
    """Get default application settings."""
    return StrokeportSettings()
