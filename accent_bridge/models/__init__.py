"""Data models for Accent Bridge."""

from .color_request import ColorRequest, RenderContext, ThemeMode, ThemeAttribute, PaletteEntry
from .capability import CapabilityTier, ColorSource, detect_capability_tier

__all__ = [
    "ColorRequest",
    "RenderContext",
    "ThemeMode",
    "ThemeAttribute",
    "PaletteEntry",
    "CapabilityTier",
    "ColorSource",
    "detect_capability_tier"
]
