"""Desktop implementation of the host theming API."""

import logging
import os
import platform
from typing import Dict, Optional

import cv2
from PyQt5 import QtGui, QtWidgets

from .base import ThemeHost
from . import platform_sources as sources
from ..core.exceptions import HostUnavailableError
from ..core.settings_manager import SettingsManager
from ..models.capability import CapabilityTier, detect_capability_tier
from ..models.color_request import PaletteEntry, RenderContext, ThemeAttribute, ThemeMode
from ..utils.color_utils import (
    GNOME_ACCENT_COLORS,
    MACOS_ACCENT_COLORS,
    abgr_to_color,
    color_lightness,
    dominant_color,
    rgba_bytes_to_colors,
)

# Symbolic color resources; ids are 1-based positions in this tuple
NAMED_COLOR_RESOURCES = ("accent_device_default",)

# AccentPalette holds 8 shades from lightest (0) to darkest (7); 3 is the accent itself
_PALETTE_INDEX: Dict[ThemeMode, Dict[PaletteEntry, int]] = {
    ThemeMode.LIGHT: {PaletteEntry.ACCENT_1: 3, PaletteEntry.ACCENT_2: 4, PaletteEntry.ACCENT_3: 5},
    ThemeMode.DARK: {PaletteEntry.ACCENT_1: 2, PaletteEntry.ACCENT_2: 1, PaletteEntry.ACCENT_3: 0},
}

_PALETTE_ROLES = {
    ThemeAttribute.PRIMARY: QtGui.QPalette.Highlight,
    ThemeAttribute.ACCENT: QtGui.QPalette.Link,
}


class DesktopThemeHost(ThemeHost):
    """Reads theming state from Windows, GNOME, macOS and the Qt palette."""

    def __init__(self, settings_manager: Optional[SettingsManager] = None,
                 system: Optional[str] = None, release: Optional[str] = None):
        self.settings_manager = settings_manager or SettingsManager()
        self.system = system or platform.system()
        self.release = release if release is not None else self._platform_release()
        self.timeout = self.settings_manager.get_setting('command_timeout', sources.DEFAULT_COMMAND_TIMEOUT)

        override = self.settings_manager.get_tier_override()
        has_accent_key = has_wallpaper_key = False
        if self.system == "Linux" and not override:
            has_accent_key = sources.gsettings_has_key(sources.GNOME_INTERFACE_SCHEMA, "accent-color",
                                                       self.timeout)
            has_wallpaper_key = sources.gsettings_has_key(sources.GNOME_BACKGROUND_SCHEMA, "picture-uri",
                                                          self.timeout)

        self._tier = detect_capability_tier(self.system, self.release,
                                            has_accent_key=has_accent_key,
                                            has_wallpaper_key=has_wallpaper_key,
                                            override=override)
        logging.info(f"DesktopThemeHost initialized: platform={self.system} {self.release}, "
                     f"tier={self._tier.name}")

    def _platform_release(self) -> str:
        if self.system == "Darwin":
            return platform.mac_ver()[0]
        return platform.release()

    def capability_tier(self) -> CapabilityTier:
        return self._tier

    # --- Appearance ---

    def system_mode(self) -> ThemeMode:
        try:
            mode = self._read_system_mode()
            if mode is not None:
                return mode
        except (HostUnavailableError, OSError) as e:
            logging.debug(f"System mode unavailable from host settings: {e}")

        app = QtWidgets.QApplication.instance()
        if app is not None:
            palette = app.palette()
            window = palette.color(QtGui.QPalette.Window).rgb()
            text = palette.color(QtGui.QPalette.WindowText).rgb()
            return ThemeMode.from_flag(color_lightness(window) < color_lightness(text))

        return ThemeMode.LIGHT

    def _read_system_mode(self) -> Optional[ThemeMode]:
        if self.system == "Windows":
            light = sources.read_windows_value(sources.WINDOWS_PERSONALIZE_KEY, "AppsUseLightTheme")
            return None if light is None else ThemeMode.from_flag(light == 0)

        if self.system == "Linux":
            scheme = sources.gsettings_get(sources.GNOME_INTERFACE_SCHEMA, "color-scheme", self.timeout)
            return None if scheme is None else ThemeMode.from_flag(scheme == "prefer-dark")

        if self.system == "Darwin":
            # AppleInterfaceStyle is only written while dark mode is on
            style = sources.defaults_read("AppleInterfaceStyle", self.timeout)
            return ThemeMode.from_flag(style == "Dark")

        return None

    # --- Dynamic palette ---

    def palette_color(self, entry: PaletteEntry, context: RenderContext) -> int:
        if self.system != "Windows":
            raise HostUnavailableError("AccentPalette", self.system)

        data = sources.read_windows_value(sources.WINDOWS_ACCENT_KEY, "AccentPalette")
        if data is None:
            raise LookupError("AccentPalette is not set")

        colors = rgba_bytes_to_colors(bytes(data))
        return colors[_PALETTE_INDEX[context.mode][entry]]

    # --- Named resources ---

    def lookup_color_id(self, name: str) -> int:
        if name not in NAMED_COLOR_RESOURCES:
            return 0
        if self.system not in ("Windows", "Darwin", "Linux"):
            return 0
        return NAMED_COLOR_RESOURCES.index(name) + 1

    def resolve_color(self, resource_id: int, context: RenderContext) -> int:
        if not 0 < resource_id <= len(NAMED_COLOR_RESOURCES):
            raise LookupError(f"Unknown color resource id: {resource_id}")

        color = self._read_device_accent()
        if color is None:
            raise LookupError(f"{NAMED_COLOR_RESOURCES[resource_id - 1]} is not set")
        return color

    def _read_device_accent(self) -> Optional[int]:
        if self.system == "Windows":
            abgr = sources.read_windows_value(sources.WINDOWS_ACCENT_KEY, "AccentColorMenu")
            return None if abgr is None else abgr_to_color(abgr)

        if self.system == "Linux":
            name = sources.gsettings_get(sources.GNOME_INTERFACE_SCHEMA, "accent-color", self.timeout)
            return GNOME_ACCENT_COLORS.get(name) if name else None

        if self.system == "Darwin":
            accent_id = sources.defaults_read("AppleAccentColor", self.timeout)
            return MACOS_ACCENT_COLORS.get(accent_id) if accent_id else None

        raise HostUnavailableError("device accent", self.system)

    # --- Theme attributes ---

    def resolve_attribute(self, attribute: ThemeAttribute, context: RenderContext) -> Optional[int]:
        configured = self.settings_manager.get_theme_attribute(context.mode, attribute)
        if configured is not None:
            return configured

        # The live palette only describes the ambient mode
        if context.adjusted:
            return None

        role = _PALETTE_ROLES.get(attribute)
        app = QtWidgets.QApplication.instance()
        if role is None or app is None:
            return None
        return app.palette().color(role).rgb()

    # --- Wallpaper ---

    def wallpaper_primary_color(self) -> Optional[int]:
        path = self._wallpaper_path()
        if not path or not os.path.exists(path):
            logging.debug(f"No wallpaper image found (path={path!r})")
            return None

        image = cv2.imread(path, cv2.IMREAD_COLOR)
        if image is None:
            logging.debug(f"Wallpaper could not be decoded: {path}")
            return None

        preferences = self.settings_manager.get_wallpaper_preferences()
        return dominant_color(image, clusters=preferences['clusters'],
                              sample_size=preferences['sample_size'])

    def _wallpaper_path(self) -> Optional[str]:
        if self.system == "Windows":
            return sources.read_windows_value(sources.WINDOWS_DESKTOP_KEY, "WallPaper")

        if self.system == "Linux":
            uri = None
            if self.system_mode() is ThemeMode.DARK:
                uri = sources.gsettings_get(sources.GNOME_BACKGROUND_SCHEMA, "picture-uri-dark",
                                            self.timeout)
            uri = uri or sources.gsettings_get(sources.GNOME_BACKGROUND_SCHEMA, "picture-uri",
                                               self.timeout)
            return sources.uri_to_path(uri)

        raise HostUnavailableError("wallpaper", self.system)
