"""Settings and configuration management for Accent Bridge."""

import json
import os
import logging
from typing import Dict, List, Optional, Any
from dataclasses import dataclass, asdict

from .exceptions import SettingsLoadError, SettingsSaveError, InvalidSettingError
from ..models.capability import CapabilityTier
from ..models.color_request import ThemeAttribute, ThemeMode
from ..utils.color_utils import DEFAULT_ACCENT_HEX, hex_to_color, is_valid_hex

# Constants
DEFAULT_SETTINGS_FILE = "accent_bridge_settings.json"
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]

# Accepted JSON types per setting
SETTING_TYPES = {
    'default_color': (str,),
    'capability_tier_override': (str, type(None)),
    'theme_attributes': (dict,),
    'wallpaper_sample_size': (int,),
    'wallpaper_clusters': (int,),
    'command_timeout': (int, float),
    'log_level': (str,),
}


def has_valid_type(key: str, value: Any) -> bool:
    """Check a setting value against its accepted types (bools are never numbers)."""
    if isinstance(value, bool):
        return False
    return isinstance(value, SETTING_TYPES.get(key, (object,)))


@dataclass
class BridgeSettings:
    """Bridge settings data structure."""

    # Resolution
    default_color: str = DEFAULT_ACCENT_HEX
    capability_tier_override: Optional[str] = None

    # Per-mode theme attribute table: {"light": {"colorAccent": "#RRGGBB"}, ...}
    theme_attributes: Dict[str, Dict[str, str]] = None

    # Wallpaper extraction
    wallpaper_sample_size: int = 64
    wallpaper_clusters: int = 3

    # Host probing
    command_timeout: float = 2.0

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        """Initialize default values for mutable fields."""
        if self.theme_attributes is None:
            self.theme_attributes = {}


class SettingsManager:
    """Manages bridge settings and configuration."""

    def __init__(self, settings_file: str = DEFAULT_SETTINGS_FILE):
        self.settings_file = settings_file
        self.settings = BridgeSettings()
        self._load_settings()

    def _load_settings(self):
        """Load settings from file."""
        try:
            if os.path.exists(self.settings_file):
                with open(self.settings_file, 'r') as f:
                    data = json.load(f)

                if not isinstance(data, dict):
                    raise ValueError("Settings file must contain a JSON object")

                # Update settings with loaded data
                for key, value in data.items():
                    if not hasattr(self.settings, key):
                        continue
                    if not has_valid_type(key, value):
                        logging.warning(f"Ignoring {key} from {self.settings_file}: "
                                        f"unexpected type {type(value).__name__}")
                        continue
                    setattr(self.settings, key, value)

                logging.info(f"Settings loaded from {self.settings_file}")
            else:
                logging.info("No settings file found, using defaults")

        except Exception as e:
            logging.warning(str(SettingsLoadError(self.settings_file, e)))
            self.settings = BridgeSettings()  # Reset to defaults

    def save_settings(self) -> bool:
        """Save current settings to file."""
        try:
            with open(self.settings_file, 'w') as f:
                json.dump(asdict(self.settings), f, indent=2)

            logging.info(f"Settings saved to {self.settings_file}")
            return True

        except Exception as e:
            logging.warning(str(SettingsSaveError(self.settings_file, e)))
            return False

    def get_default_color(self) -> str:
        """Get the terminal fallback color, normalized to uppercase."""
        if is_valid_hex(self.settings.default_color):
            return self.settings.default_color.upper()
        logging.warning(f"Invalid default color {self.settings.default_color!r}, "
                        f"using {DEFAULT_ACCENT_HEX}")
        return DEFAULT_ACCENT_HEX

    def get_tier_override(self) -> Optional[str]:
        """Get the configured capability tier override, if valid."""
        override = self.settings.capability_tier_override
        if not override:
            return None
        try:
            CapabilityTier.from_name(override)
        except (ValueError, AttributeError):
            logging.warning(f"Ignoring unknown capability tier override: {override!r}")
            return None
        return override

    def get_theme_attribute(self, mode: ThemeMode, attribute: ThemeAttribute) -> Optional[int]:
        """Look up a theme attribute color configured for a mode."""
        attributes = self.settings.theme_attributes
        table = attributes.get(mode.value) if isinstance(attributes, dict) else None
        if not isinstance(table, dict):
            return None
        value = table.get(attribute.value)
        if value is None:
            return None
        try:
            return hex_to_color(value)
        except ValueError:
            logging.warning(f"Invalid {mode.value} theme color for {attribute.value}: {value!r}")
            return None

    def set_theme_attribute(self, mode: ThemeMode, attribute: ThemeAttribute, hex_color: str):
        """Set a theme attribute color for a mode."""
        if not is_valid_hex(hex_color):
            raise InvalidSettingError(f"theme_attributes.{mode.value}.{attribute.value}", hex_color)
        self.settings.theme_attributes.setdefault(mode.value, {})[attribute.value] = hex_color.upper()
        self.save_settings()

    def get_wallpaper_preferences(self) -> Dict[str, Any]:
        """Get wallpaper extraction parameters."""
        return {
            'sample_size': self.settings.wallpaper_sample_size,
            'clusters': self.settings.wallpaper_clusters
        }

    def reset_to_defaults(self):
        """Reset all settings to defaults."""
        self.settings = BridgeSettings()
        self.save_settings()
        logging.info("Settings reset to defaults")

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a specific setting value."""
        return getattr(self.settings, key, default)

    def set_setting(self, key: str, value: Any):
        """Set a specific setting value."""
        if not hasattr(self.settings, key):
            logging.warning(f"Unknown setting key: {key}")
        elif not has_valid_type(key, value):
            logging.warning(f"Ignoring {key}: unexpected type {type(value).__name__}")
        else:
            setattr(self.settings, key, value)
            self.save_settings()

    def validate_settings(self) -> List[str]:
        """Validate current settings and return list of issues."""
        issues = []

        # Range checks below only run for values of the right type
        mistyped = set()
        for key in SETTING_TYPES:
            value = getattr(self.settings, key)
            if not has_valid_type(key, value):
                issues.append(f"Invalid type for {key}: {type(value).__name__}")
                mistyped.add(key)

        if 'default_color' not in mistyped and not is_valid_hex(self.settings.default_color):
            issues.append(f"Invalid default color: {self.settings.default_color}")

        override = self.settings.capability_tier_override
        if override and 'capability_tier_override' not in mistyped:
            valid_tiers = [tier.name for tier in CapabilityTier]
            if override.strip().upper() not in valid_tiers:
                issues.append(f"Invalid capability tier override: {override}")

        if 'theme_attributes' not in mistyped:
            valid_modes = [mode.value for mode in ThemeMode]
            valid_attributes = [attribute.value for attribute in ThemeAttribute]
            for mode_name, table in self.settings.theme_attributes.items():
                if mode_name not in valid_modes:
                    issues.append(f"Invalid theme mode: {mode_name}")
                    continue
                if not isinstance(table, dict):
                    issues.append(f"Invalid {mode_name} theme table: {table!r}")
                    continue
                for attribute_name, value in table.items():
                    if attribute_name not in valid_attributes:
                        issues.append(f"Invalid theme attribute: {attribute_name}")
                    elif not is_valid_hex(value):
                        issues.append(f"Invalid {mode_name} color for {attribute_name}: {value}")

        if 'wallpaper_sample_size' not in mistyped and self.settings.wallpaper_sample_size < 1:
            issues.append("Wallpaper sample size must be at least 1")

        if 'wallpaper_clusters' not in mistyped and self.settings.wallpaper_clusters < 1:
            issues.append("Wallpaper clusters must be at least 1")

        if 'command_timeout' not in mistyped and self.settings.command_timeout <= 0:
            issues.append("Command timeout must be positive")

        if 'log_level' not in mistyped and self.settings.log_level.upper() not in VALID_LOG_LEVELS:
            issues.append(f"Invalid log level: {self.settings.log_level}")

        return issues
