"""Tests for request and capability models."""

import pytest

from accent_bridge.models.capability import CapabilityTier, ColorSource, detect_capability_tier
from accent_bridge.models.color_request import ColorRequest, RenderContext, ThemeMode


class TestColorRequest:
    """Tests for ColorRequest construction."""

    @pytest.mark.unit
    def test_defaults_to_light(self):
        request = ColorRequest()

        assert not request.prefer_dark
        assert request.mode is ThemeMode.LIGHT

    @pytest.mark.unit
    def test_from_arguments_dark(self):
        request = ColorRequest.from_arguments({"isDarkMode": True})

        assert request.prefer_dark
        assert request.mode is ThemeMode.DARK

    @pytest.mark.unit
    @pytest.mark.parametrize("arguments", [
        None,
        {},
        {"isDarkMode": "true"},
        {"isDarkMode": 1},
        {"isDarkMode": None},
        ["isDarkMode"],
        "isDarkMode",
    ])
    def test_from_arguments_falls_back_to_light(self, arguments):
        assert ColorRequest.from_arguments(arguments) == ColorRequest(prefer_dark=False)

    @pytest.mark.unit
    def test_is_immutable(self):
        request = ColorRequest()

        with pytest.raises(AttributeError):
            request.prefer_dark = True

    @pytest.mark.unit
    def test_render_context_defaults(self):
        context = RenderContext()

        assert context.mode is ThemeMode.LIGHT
        assert not context.adjusted
        assert not context.is_dark


class TestCapability:
    """Tests for capability tiers and source tagging."""

    @pytest.mark.unit
    def test_source_availability(self):
        assert ColorSource.DYNAMIC_PALETTE.available_on(CapabilityTier.DYNAMIC)
        assert not ColorSource.DYNAMIC_PALETTE.available_on(CapabilityTier.WALLPAPER)
        assert ColorSource.WALLPAPER.available_on(CapabilityTier.WALLPAPER)
        assert not ColorSource.WALLPAPER.available_on(CapabilityTier.LEGACY)
        assert ColorSource.THEME_ATTRIBUTE.available_on(CapabilityTier.LEGACY)

    @pytest.mark.unit
    @pytest.mark.parametrize("system, release, expected", [
        ("Windows", "10", CapabilityTier.DYNAMIC),
        ("Windows", "11", CapabilityTier.DYNAMIC),
        ("Windows", "7", CapabilityTier.WALLPAPER),
        ("Windows", "", CapabilityTier.WALLPAPER),
        ("Darwin", "14.2.1", CapabilityTier.DYNAMIC),
        ("Darwin", "10.14", CapabilityTier.DYNAMIC),
        ("Darwin", "10.13.6", CapabilityTier.LEGACY),
        ("FreeBSD", "14.0-RELEASE", CapabilityTier.LEGACY),
    ])
    def test_detect_by_release(self, system, release, expected):
        assert detect_capability_tier(system, release) is expected

    @pytest.mark.unit
    def test_detect_linux_by_settings_keys(self):
        assert detect_capability_tier("Linux", "6.8.0", has_accent_key=True) is CapabilityTier.DYNAMIC
        assert detect_capability_tier("Linux", "6.8.0", has_wallpaper_key=True) is CapabilityTier.WALLPAPER
        assert detect_capability_tier("Linux", "6.8.0") is CapabilityTier.LEGACY

    @pytest.mark.unit
    def test_override_wins(self):
        assert detect_capability_tier("Windows", "11", override="legacy") is CapabilityTier.LEGACY

    @pytest.mark.unit
    def test_unknown_override(self):
        with pytest.raises(ValueError):
            detect_capability_tier("Windows", "11", override="quantum")
