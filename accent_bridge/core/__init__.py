"""Core logic modules for Accent Bridge."""

from .resolver import AccentColorResolver, build_lookup_chain
from .channel import ThemeChannel, MethodCall, MethodResponse
from .settings_manager import SettingsManager, BridgeSettings

__all__ = [
    "AccentColorResolver",
    "build_lookup_chain",
    "ThemeChannel",
    "MethodCall",
    "MethodResponse",
    "SettingsManager",
    "BridgeSettings"
]
