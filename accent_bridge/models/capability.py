"""Capability tiers and color source variants."""

import logging
from enum import Enum
from typing import Optional, Tuple


class CapabilityTier(Enum):
    """Groups of host platforms exposing the same theming APIs.

    Ordered from least to most capable.
    """

    LEGACY = 0
    WALLPAPER = 1
    DYNAMIC = 2

    @classmethod
    def from_name(cls, name: str) -> 'CapabilityTier':
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown capability tier: {name}") from None


class ColorSource(Enum):
    """Color sources, each tagged with the tier it requires."""

    DYNAMIC_PALETTE = ("dynamic accent palette", CapabilityTier.DYNAMIC)
    NAMED_ACCENT = ("named accent resource", CapabilityTier.DYNAMIC)
    WALLPAPER = ("wallpaper primary color", CapabilityTier.WALLPAPER)
    THEME_ATTRIBUTE = ("theme attribute", CapabilityTier.LEGACY)

    def __init__(self, label: str, required_tier: CapabilityTier):
        self.label = label
        self.required_tier = required_tier

    def available_on(self, tier: CapabilityTier) -> bool:
        return tier.value >= self.required_tier.value


# First OS releases that expose accent palettes
WINDOWS_DYNAMIC_RELEASE = 10
MACOS_DYNAMIC_VERSION = (10, 14)


def _parse_version(text: str) -> Tuple[int, ...]:
    parts = []
    for piece in text.split("."):
        digits = "".join(ch for ch in piece if ch.isdigit())
        if not digits:
            break
        parts.append(int(digits))
    return tuple(parts)


def detect_capability_tier(system: str, release: str = "",
                           has_accent_key: bool = False,
                           has_wallpaper_key: bool = False,
                           override: Optional[str] = None) -> CapabilityTier:
    """
    Map platform facts to a capability tier.

    Args:
        system: ``platform.system()`` value ("Windows", "Darwin", "Linux", ...)
        release: OS release; the Windows release number or the macOS version
        has_accent_key: GNOME exposes ``org.gnome.desktop.interface accent-color``
        has_wallpaper_key: GNOME exposes ``org.gnome.desktop.background picture-uri``
        override: Tier name from settings; wins over detection

    Returns:
        The tier the lookup chain is built for
    """
    if override:
        return CapabilityTier.from_name(override)

    version = _parse_version(release)

    if system == "Windows":
        if version and version[0] >= WINDOWS_DYNAMIC_RELEASE:
            return CapabilityTier.DYNAMIC
        return CapabilityTier.WALLPAPER

    if system == "Darwin":
        if version and version >= MACOS_DYNAMIC_VERSION:
            return CapabilityTier.DYNAMIC
        return CapabilityTier.LEGACY

    if system == "Linux":
        if has_accent_key:
            return CapabilityTier.DYNAMIC
        if has_wallpaper_key:
            return CapabilityTier.WALLPAPER
        return CapabilityTier.LEGACY

    logging.debug(f"No capability mapping for platform {system!r}, using legacy tier")
    return CapabilityTier.LEGACY
