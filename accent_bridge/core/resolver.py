"""System accent color resolution.

The resolver walks an ordered chain of color lookups and returns the first
color any of them produces. The chain is chosen once per call from the
host's capability tier and the requested mode:

    DYNAMIC   palette accent 1, 2, 3 -> accent_device_default -> primary
    WALLPAPER wallpaper -> theme attributes by mode
    LEGACY    theme attributes by mode

Theme attributes by mode are primary-dark, accent, primary for dark
requests and accent alone for light ones. When every lookup fails the
configured default color is returned; ``resolve`` never raises.
"""

import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, List, Optional

from .exceptions import LookupFailedError
from .result import Result, error, first_success, safe_call, success
from ..host.base import ThemeHost
from ..models.capability import CapabilityTier, ColorSource
from ..models.color_request import ColorRequest, PaletteEntry, RenderContext, ThemeAttribute
from ..utils.color_utils import DEFAULT_ACCENT_HEX, color_to_hex, is_valid_hex

DEVICE_ACCENT_RESOURCE = "accent_device_default"

DARK_ATTRIBUTE_ORDER = (ThemeAttribute.PRIMARY_DARK, ThemeAttribute.ACCENT, ThemeAttribute.PRIMARY)
LIGHT_ATTRIBUTE_ORDER = (ThemeAttribute.ACCENT,)


@dataclass(frozen=True)
class ColorLookup:
    """One attempt to read a color from a single host source."""

    source: ColorSource
    target: Any = None

    @property
    def name(self) -> str:
        if isinstance(self.target, (PaletteEntry, ThemeAttribute)):
            return f"{self.source.label} {self.target.name.lower()}"
        if self.target:
            return f"{self.source.label} {self.target}"
        return self.source.label


def build_lookup_chain(tier: CapabilityTier, request: ColorRequest) -> List[ColorLookup]:
    """Ordered lookups for a tier and request; the first success wins."""
    if tier is CapabilityTier.DYNAMIC:
        chain = [ColorLookup(ColorSource.DYNAMIC_PALETTE, entry) for entry in PaletteEntry]
        chain.append(ColorLookup(ColorSource.NAMED_ACCENT, DEVICE_ACCENT_RESOURCE))
        chain.append(ColorLookup(ColorSource.THEME_ATTRIBUTE, ThemeAttribute.PRIMARY))
        return chain

    chain = []
    if ColorSource.WALLPAPER.available_on(tier):
        chain.append(ColorLookup(ColorSource.WALLPAPER))

    order = DARK_ATTRIBUTE_ORDER if request.prefer_dark else LIGHT_ATTRIBUTE_ORDER
    chain.extend(ColorLookup(ColorSource.THEME_ATTRIBUTE, attribute) for attribute in order)
    return chain


class AccentColorResolver:
    """Resolves the system accent color as a ``#RRGGBB`` string."""

    def __init__(self, host: ThemeHost, default_color: str = DEFAULT_ACCENT_HEX):
        self.host = host
        if is_valid_hex(default_color):
            self.default_color = default_color.upper()
        else:
            logging.warning(f"Invalid default color {default_color!r}, using {DEFAULT_ACCENT_HEX}")
            self.default_color = DEFAULT_ACCENT_HEX

    @classmethod
    def from_settings(cls, host: ThemeHost, settings_manager) -> 'AccentColorResolver':
        return cls(host, settings_manager.get_default_color())

    def resolve(self, prefer_dark: bool = False) -> str:
        """Resolve the accent color, optionally for the dark variant."""
        return self.resolve_request(ColorRequest(prefer_dark=bool(prefer_dark)))

    def resolve_request(self, request: ColorRequest) -> str:
        mode_label = request.mode.value

        try:
            tier = self.host.capability_tier()
            context = self.render_context(request)
            logging.debug(f"Getting color for {mode_label} mode (tier={tier.name}, "
                          f"adjusted context={context.adjusted})")

            attempts = (partial(self._run_lookup, lookup, context)
                        for lookup in build_lookup_chain(tier, request))
            result = first_success(attempts)
            if result.is_success():
                return color_to_hex(result.unwrap())

        except Exception as e:
            logging.error(f"Error retrieving system accent color: {e}")

        logging.info(f"Using default color for {mode_label} mode: {self.default_color}")
        return self.default_color

    def render_context(self, request: ColorRequest) -> RenderContext:
        """Ambient context, or a derived one when the requested mode differs from the system's."""
        system_mode = self.host.system_mode()
        if request.mode is system_mode:
            return RenderContext(mode=system_mode, adjusted=False)
        return self.host.derive_context(request.mode)

    def _run_lookup(self, lookup: ColorLookup, context: RenderContext) -> Result[int, LookupFailedError]:
        result = safe_call(self._lookup_value, lookup, context)

        if result.is_error():
            cause = result.error
            failure = cause if isinstance(cause, LookupFailedError) else \
                LookupFailedError(lookup.name, str(cause) or type(cause).__name__, cause)
            logging.debug(f"{failure.message} ({failure.reason})")
            return error(failure)

        value = result.unwrap()
        if value is None or isinstance(value, bool) or not isinstance(value, int):
            logging.debug(f"Lookup failed: {lookup.name} (no color, got {value!r})")
            return error(LookupFailedError(lookup.name, "no color"))

        logging.info(f"Using {lookup.name} for {context.mode.value} mode: {color_to_hex(value)}")
        return success(value)

    def _lookup_value(self, lookup: ColorLookup, context: RenderContext) -> Optional[int]:
        source = lookup.source

        if source is ColorSource.DYNAMIC_PALETTE:
            return self.host.palette_color(lookup.target, context)

        if source is ColorSource.NAMED_ACCENT:
            resource_id = self.host.lookup_color_id(lookup.target)
            if not resource_id:
                raise LookupFailedError(lookup.name, "resource not found")
            return self.host.resolve_color(resource_id, context)

        if source is ColorSource.WALLPAPER:
            return self.host.wallpaper_primary_color()

        return self.host.resolve_attribute(lookup.target, context)
