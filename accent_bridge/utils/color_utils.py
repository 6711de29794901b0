"""Color value conversion and extraction utilities."""

import cv2
import numpy as np
from typing import Dict, List, Optional
import logging
import re

# Constants
RGB_MASK = 0xFFFFFF
DEFAULT_ACCENT_HEX = "#2196F3"
DEFAULT_SAMPLE_SIZE = 64
DEFAULT_CLUSTERS = 3
KMEANS_ATTEMPTS = 3

_HEX_DIGITS = re.compile(r"[0-9A-Fa-f]{6}")

# Accent names reported by GNOME 47+ (libadwaita accent colors)
GNOME_ACCENT_COLORS: Dict[str, int] = {
    "blue": 0x3584E4,
    "teal": 0x2190A4,
    "green": 0x3A944A,
    "yellow": 0xC88800,
    "orange": 0xED5B00,
    "red": 0xE62D42,
    "pink": 0xD56199,
    "purple": 0x9141AC,
    "slate": 0x6F8396,
}

# AppleAccentColor ids mapped to the system accent swatches
MACOS_ACCENT_COLORS: Dict[str, int] = {
    "-1": 0x8C8C8C,  # graphite
    "0": 0xE0383E,   # red
    "1": 0xF7821B,   # orange
    "2": 0xFFC600,   # yellow
    "3": 0x62BA46,   # green
    "4": 0x007AFF,   # blue
    "5": 0x953D96,   # purple
    "6": 0xF74F9E,   # pink
}


def color_to_hex(color: int) -> str:
    """Format a color integer as ``#RRGGBB``, discarding any alpha byte."""
    return f"#{color & RGB_MASK:06X}"


def hex_to_color(hex_color: str) -> int:
    """Parse ``#RRGGBB`` (``#`` optional) into a 24-bit color integer."""
    if not isinstance(hex_color, str):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    value = hex_color.strip().lstrip("#")
    if not _HEX_DIGITS.fullmatch(value):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    return int(value, 16)


def is_valid_hex(hex_color: str) -> bool:
    """Check whether a string is a well-formed ``#RRGGBB`` color."""
    if not isinstance(hex_color, str) or not hex_color.startswith("#"):
        return False
    try:
        hex_to_color(hex_color)
    except ValueError:
        return False
    return True


def rgb_to_color(red: int, green: int, blue: int) -> int:
    """Pack 8-bit channels into a color integer."""
    return ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def abgr_to_color(abgr: int) -> int:
    """Convert a Windows ABGR DWORD (``AccentColorMenu``) into RGB."""
    red = abgr & 0xFF
    green = (abgr >> 8) & 0xFF
    blue = (abgr >> 16) & 0xFF
    return rgb_to_color(red, green, blue)


def rgba_bytes_to_colors(data: bytes) -> List[int]:
    """Split packed RGBA quadruplets (``AccentPalette``) into RGB colors."""
    if data is None or len(data) % 4 != 0:
        raise ValueError("Palette data must be a multiple of 4 bytes")
    return [rgb_to_color(data[i], data[i + 1], data[i + 2]) for i in range(0, len(data), 4)]


def dominant_color(image: np.ndarray,
                   clusters: int = DEFAULT_CLUSTERS,
                   sample_size: int = DEFAULT_SAMPLE_SIZE) -> Optional[int]:
    """
    Find the dominant color of a BGR image with k-means clustering.

    The image is downscaled to ``sample_size`` square before clustering and
    the center of the most populated cluster is returned as an RGB integer.
    """
    if image is None or image.size == 0:
        return None

    try:
        if image.ndim == 2:
            image = cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        elif image.shape[2] == 4:
            image = cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)

        small = cv2.resize(image, (sample_size, sample_size), interpolation=cv2.INTER_AREA)
        pixels = small.reshape(-1, 3).astype(np.float32)
        k = max(1, min(clusters, len(pixels)))

        criteria = (cv2.TERM_CRITERIA_EPS + cv2.TERM_CRITERIA_MAX_ITER, 20, 1.0)
        cv2.setRNGSeed(0)
        _, labels, centers = cv2.kmeans(pixels, k, None, criteria, KMEANS_ATTEMPTS,
                                        cv2.KMEANS_PP_CENTERS)

        counts = np.bincount(labels.flatten(), minlength=k)
        blue, green, red = centers[int(np.argmax(counts))]
        return rgb_to_color(int(round(red)), int(round(green)), int(round(blue)))

    except Exception as e:
        logging.error(f"Error extracting dominant color: {e}")
        return None


def color_lightness(color: int) -> float:
    """Perceived lightness (HSL L) of a color in the 0..1 range."""
    red = ((color >> 16) & 0xFF) / 255.0
    green = ((color >> 8) & 0xFF) / 255.0
    blue = (color & 0xFF) / 255.0
    return (max(red, green, blue) + min(red, green, blue)) / 2
