"""Host theming API and its desktop implementation."""

from .base import ThemeHost
from .desktop import DesktopThemeHost

__all__ = [
    "ThemeHost",
    "DesktopThemeHost"
]
