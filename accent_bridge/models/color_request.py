"""Request and rendering-context data models."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

DARK_MODE_ARGUMENT = "isDarkMode"


class ThemeMode(Enum):
    """Light or dark appearance."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_flag(cls, dark: bool) -> 'ThemeMode':
        return cls.DARK if dark else cls.LIGHT


class ThemeAttribute(Enum):
    """Theme color attributes a host can resolve."""

    PRIMARY = "colorPrimary"
    ACCENT = "colorAccent"
    PRIMARY_DARK = "colorPrimaryDark"


class PaletteEntry(Enum):
    """Entries of the dynamic accent palette, in priority order."""

    ACCENT_1 = 1
    ACCENT_2 = 2
    ACCENT_3 = 3


@dataclass(frozen=True)
class ColorRequest:
    """A single request for the system accent color."""

    prefer_dark: bool = False

    @property
    def mode(self) -> ThemeMode:
        return ThemeMode.from_flag(self.prefer_dark)

    @classmethod
    def from_arguments(cls, arguments: Optional[Any]) -> 'ColorRequest':
        """Build a request from channel arguments.

        Only a real ``bool`` under ``isDarkMode`` is honoured; a missing key,
        a value of any other type, or arguments that are not a mapping all
        produce a light request.
        """
        if not isinstance(arguments, Mapping):
            return cls()
        value = arguments.get(DARK_MODE_ARGUMENT, False)
        return cls(prefer_dark=value if isinstance(value, bool) else False)


@dataclass(frozen=True)
class RenderContext:
    """Explicit rendering context passed to every host lookup."""

    mode: ThemeMode = ThemeMode.LIGHT
    adjusted: bool = False

    @property
    def is_dark(self) -> bool:
        return self.mode is ThemeMode.DARK
