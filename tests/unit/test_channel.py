"""Tests for the theme method channel."""

import pytest
from unittest.mock import Mock

from accent_bridge.core.channel import (
    CHANNEL_NAME,
    MethodCall,
    MethodResponse,
    ThemeChannel,
)
from accent_bridge.core.resolver import AccentColorResolver
from accent_bridge.models.capability import CapabilityTier
from accent_bridge.models.color_request import ColorRequest, PaletteEntry, ThemeAttribute


class TestThemeChannel:
    """Tests for ThemeChannel dispatch."""

    @pytest.mark.unit
    def test_get_system_color(self, host_factory):
        host = host_factory(palette={PaletteEntry.ACCENT_1: 0x6750A4})
        channel = ThemeChannel(AccentColorResolver(host))

        response = channel.handle(MethodCall("getSystemColor", {"isDarkMode": False}))

        assert response == MethodResponse.success("#6750A4")
        assert response.is_success
        assert channel.name == CHANNEL_NAME

    @pytest.mark.unit
    def test_dark_mode_argument_is_forwarded(self):
        resolver = Mock(spec=AccentColorResolver)
        resolver.resolve_request.return_value = "#1F1B24"
        channel = ThemeChannel(resolver)

        response = channel.invoke("getSystemColor", {"isDarkMode": True})

        assert response.value == "#1F1B24"
        resolver.resolve_request.assert_called_once_with(ColorRequest(prefer_dark=True))

    @pytest.mark.unit
    def test_missing_or_mistyped_argument_means_light(self, host_factory):
        host = host_factory(tier=CapabilityTier.LEGACY, attributes={
            ThemeAttribute.PRIMARY_DARK: 0x1F1B24,
            ThemeAttribute.ACCENT: 0xFF4081,
        })
        channel = ThemeChannel(AccentColorResolver(host))

        assert channel.invoke("getSystemColor").value == "#FF4081"
        assert channel.invoke("getSystemColor", {"isDarkMode": "yes"}).value == "#FF4081"
        assert channel.invoke("getSystemColor", {"isDarkMode": True}).value == "#1F1B24"

    @pytest.mark.unit
    def test_unknown_method_is_not_implemented(self, host_factory):
        host = host_factory()
        channel = ThemeChannel(AccentColorResolver(host))

        response = channel.invoke("getWallpaper", {"isDarkMode": True})

        assert response == MethodResponse.not_implemented()
        assert not response.is_success
        assert response.value is None
        host.capability_tier.assert_not_called()

    @pytest.mark.unit
    def test_total_failure_still_answers_with_default(self, host_factory):
        host = host_factory()
        host.capability_tier.side_effect = RuntimeError("headless")
        channel = ThemeChannel(AccentColorResolver(host))

        assert channel.invoke("getSystemColor").to_dict() == {"status": "success", "value": "#2196F3"}
