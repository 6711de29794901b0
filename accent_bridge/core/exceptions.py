"""Custom exception hierarchy for Accent Bridge."""

from typing import Optional, Any


class AccentBridgeError(Exception):
    """Base exception for all Accent Bridge errors."""

    def __init__(self, message: str, details: Optional[str] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.cause = cause

    def __str__(self) -> str:
        result = self.message
        if self.details:
            result += f"\nDetails: {self.details}"
        if self.cause:
            result += f"\nCaused by: {self.cause}"
        return result


# Lookup errors
class LookupFailedError(AccentBridgeError):
    """A single color source did not produce a color."""

    def __init__(self, source: str, reason: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Lookup failed: {source}",
            f"Reason: {reason}",
            cause
        )
        self.source = source
        self.reason = reason


class HostUnavailableError(AccentBridgeError):
    """A host theming API is not present on this platform."""

    def __init__(self, api: str, platform_name: str):
        super().__init__(
            f"Host API not available: {api}",
            f"Platform: {platform_name}"
        )
        self.api = api
        self.platform_name = platform_name


# Settings and configuration errors
class SettingsError(AccentBridgeError):
    """Base class for settings-related errors."""
    pass


class SettingsLoadError(SettingsError):
    """Error loading settings from file."""

    def __init__(self, file_path: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Failed to load settings from: {file_path}",
            "Settings will be reset to defaults",
            cause
        )
        self.file_path = file_path


class SettingsSaveError(SettingsError):
    """Error saving settings to file."""

    def __init__(self, file_path: str, cause: Optional[Exception] = None):
        super().__init__(
            f"Failed to save settings to: {file_path}",
            "Settings changes may be lost",
            cause
        )
        self.file_path = file_path


class InvalidSettingError(SettingsError):
    """Invalid setting name or value."""

    def __init__(self, setting_name: str, value: Any, valid_values: Optional[list] = None):
        details = f"Value: {value}"
        if valid_values:
            details += f", Valid values: {valid_values}"

        super().__init__(
            f"Invalid setting: {setting_name}",
            details
        )
        self.setting_name = setting_name
        self.value = value
        self.valid_values = valid_values
