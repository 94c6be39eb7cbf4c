"""Unit tests for configuration models."""

import pytest
from pydantic import ValidationError

from strokeport.config import ExportConfig, get_default_settings


class TestExportConfig:
    """Tests for ExportConfig class."""

    def test_defaults(self) -> None:
        """Test default export settings."""
        config = ExportConfig()
        assert config.draw_background
        assert config.draw_pattern
        assert not config.optimize_printing
        assert config.margin == 0.0
        assert config.image_scale == 1.0

    def test_for_clipboard(self) -> None:
        """Test clipboard margin preset."""
        assert ExportConfig.for_clipboard().margin == 6.0

    def test_for_clipboard_overrides(self) -> None:
        """Test that explicit values win over the preset."""
        config = ExportConfig.for_clipboard(margin=0.0, optimize_printing=True)
        assert config.margin == 0.0
        assert config.optimize_printing

    def test_invalid_image_scale(self) -> None:
        """Test that the image scale must be positive."""
        with pytest.raises(ValidationError):
            ExportConfig(image_scale=0.0)

    def test_default_settings(self) -> None:
        """Test default application settings."""
        settings = get_default_settings()
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"
        assert settings.export == ExportConfig()
