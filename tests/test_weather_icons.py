"""Tests for condition keyword -> icon path resolution."""

import os

import pytest

from weather_icons import CUSTOM_ICONS, DEFAULT_ICON, resolve_icon


class TestResolveIcon:
    """Test resolve_icon lookups."""

    def test_rain(self):
        assert resolve_icon("Rain", icons_dir="icons") == os.path.join("icons", "rainy-day.png")

    @pytest.mark.parametrize("keyword", sorted(CUSTOM_ICONS))
    def test_every_mapped_keyword(self, keyword):
        assert resolve_icon(keyword, icons_dir="icons") == os.path.join("icons", CUSTOM_ICONS[keyword])

    @pytest.mark.parametrize("keyword", ["Tornado", "rain", "RAIN", "Drizzle", "", None])
    def test_unmapped_falls_back_to_default(self, keyword):
        assert resolve_icon(keyword, icons_dir="icons") == os.path.join("icons", DEFAULT_ICON)

    def test_six_keywords(self):
        assert set(CUSTOM_ICONS) == {"Clear", "Clouds", "Rain", "Snow", "Thunderstorm", "Mist"}
