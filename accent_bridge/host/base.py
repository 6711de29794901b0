"""Abstract host theming API consumed by the resolver."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models.capability import CapabilityTier
from ..models.color_request import PaletteEntry, RenderContext, ThemeAttribute, ThemeMode


class ThemeHost(ABC):
    """Read-only view of the host's theming state.

    Color values are integers; an alpha byte above bit 24 is allowed and
    discarded by the caller. Lookups may raise on missing resources.
    """

    @abstractmethod
    def capability_tier(self) -> CapabilityTier:
        """Tier of theming APIs this host exposes."""

    @abstractmethod
    def system_mode(self) -> ThemeMode:
        """Current system-wide appearance."""

    def derive_context(self, mode: ThemeMode) -> RenderContext:
        """Context in which lookups are evaluated as if the system were in ``mode``."""
        return RenderContext(mode=mode, adjusted=True)

    @abstractmethod
    def palette_color(self, entry: PaletteEntry, context: RenderContext) -> int:
        """Dynamic accent palette entry; raises if unavailable."""

    @abstractmethod
    def lookup_color_id(self, name: str) -> int:
        """Resolve a symbolic color resource name to an id, ``0`` if unknown."""

    @abstractmethod
    def resolve_color(self, resource_id: int, context: RenderContext) -> int:
        """Resolve a color resource id; raises if it cannot be resolved."""

    @abstractmethod
    def resolve_attribute(self, attribute: ThemeAttribute, context: RenderContext) -> Optional[int]:
        """Resolve a theme attribute, ``None`` if the theme does not define it."""

    @abstractmethod
    def wallpaper_primary_color(self) -> Optional[int]:
        """Primary color extracted from the desktop wallpaper."""
