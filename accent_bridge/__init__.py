"""
Accent Bridge - system accent color lookup for UI shells

Resolves the desktop's accent color as a #RRGGBB string through an ordered
fallback over the host's theming sources.
"""

__version__ = "1.0.0"
__author__ = "Accent Bridge Team"

from .core.resolver import AccentColorResolver
from .core.channel import ThemeChannel
from .core.settings_manager import SettingsManager
from .host.desktop import DesktopThemeHost

__all__ = [
    "AccentColorResolver",
    "ThemeChannel",
    "SettingsManager",
    "DesktopThemeHost"
]
