"""Utility modules for Accent Bridge."""

from .color_utils import color_to_hex, hex_to_color, dominant_color

__all__ = [
    "color_to_hex",
    "hex_to_color",
    "dominant_color"
]
