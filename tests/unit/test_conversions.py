"""Unit tests for conversion helpers."""

import re

import pytest

from strokeport.domain import Color, XoppColor
from strokeport.utils import (
    color_from_xopp,
    convert_coord_dpi,
    convert_value_dpi,
    format_page_filename,
    now_formatted_string,
    positive_range,
    xoppcolor_from_color,
)


class TestColorConversion:
    """Tests for Color and XoppColor conversion."""

    def test_from_xopp(self) -> None:
        """Test 8-bit to normalized conversion."""
        color = color_from_xopp(XoppColor(red=255, green=0, blue=51, alpha=255))
        assert color == Color(1.0, 0.0, 0.2, 1.0)

    def test_to_xopp_extremes(self) -> None:
        """Test that 0.0 and 1.0 map to 0 and 255."""
        assert xoppcolor_from_color(Color(1.0, 1.0, 1.0, 1.0)) == XoppColor(255, 255, 255, 255)
        assert xoppcolor_from_color(Color(0.0, 0.0, 0.0, 0.0)) == XoppColor(0, 0, 0, 0)

    def test_to_xopp_truncates(self) -> None:
        """Test that channels are truncated."""
        assert xoppcolor_from_color(Color(0.999, 0.5, 0.0)).red == 254
        assert xoppcolor_from_color(Color(0.999, 0.5, 0.0)).green == 127

    def test_to_xopp_saturates(self) -> None:
        """Test that out of range channels saturate."""
        assert xoppcolor_from_color(Color(1.5, -0.5, 0.0)) == XoppColor(255, 0, 0, 255)

    @pytest.mark.parametrize("value", [0.1, 0.33, 0.5, 0.77, 0.999])
    def test_round_trip_within_one_step(self, value: float) -> None:
        """Test that converting back loses at most 1/255 per channel."""
        restored = color_from_xopp(xoppcolor_from_color(Color(value, value, value, value)))
        for channel in (restored.r, restored.g, restored.b, restored.a):
            assert abs(channel - value) <= 1.0 / 255.0


class TestDpiConversion:
    """Tests for DPI conversion."""

    def test_identity(self) -> None:
        """Test that equal DPI keeps the value."""
        assert convert_value_dpi(42.5, 96.0, 96.0) == pytest.approx(42.5)

    def test_value(self) -> None:
        """Test value scaling."""
        assert convert_value_dpi(96.0, 96.0, 72.0) == pytest.approx(72.0)

    def test_coord(self) -> None:
        """Test coordinate scaling."""
        assert convert_coord_dpi((96.0, 48.0), 96.0, 300.0) == pytest.approx((300.0, 150.0))


class TestPositiveRange:
    """Tests for positive_range()."""

    def test_ordered(self) -> None:
        """Test that the smaller value comes first."""
        assert positive_range(5, 2) == (2, 5)
        assert positive_range(2, 5) == (2, 5)
        assert positive_range(2.5, -1.0) == (-1.0, 2.5)

    def test_half_open(self) -> None:
        """Test half-open containment."""
        value_range = positive_range(5, 2)
        assert 2 in value_range
        assert 4 in value_range
        assert 5 not in value_range
        assert value_range.length() == 3

    def test_equal_is_empty(self) -> None:
        """Test that equal bounds give an empty range."""
        value_range = positive_range(4, 4)
        assert value_range.is_empty()
        assert 4 not in value_range


class TestNaming:
    """Tests for file name helpers."""

    def test_page_filename(self) -> None:
        """Test zero padded page numbers."""
        assert format_page_filename("Notes", 3) == "Notes - Page 03"
        assert format_page_filename("Notes", 123) == "Notes - Page 123"

    def test_now_formatted_string(self) -> None:
        """Test timestamp format."""
        assert re.fullmatch(r"\d{4}-\d{2}-\d{2}_\d{2}:\d{2}:\d{2}", now_formatted_string())
