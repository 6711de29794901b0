"""Readers for the desktop settings that carry theming state.

Each reader returns ``None`` when the setting is absent and raises
``HostUnavailableError`` when the underlying API does not exist on the
running platform.
"""

import logging
import os
import platform
import subprocess
from typing import Any, List, Optional
from urllib.parse import unquote, urlparse

from ..core.exceptions import HostUnavailableError

WINDOWS_ACCENT_KEY = r"SOFTWARE\Microsoft\Windows\CurrentVersion\Explorer\Accent"
WINDOWS_PERSONALIZE_KEY = r"SOFTWARE\Microsoft\Windows\CurrentVersion\Themes\Personalize"
WINDOWS_DESKTOP_KEY = r"Control Panel\Desktop"

GNOME_INTERFACE_SCHEMA = "org.gnome.desktop.interface"
GNOME_BACKGROUND_SCHEMA = "org.gnome.desktop.background"

DEFAULT_COMMAND_TIMEOUT = 2.0


def run_command(args: List[str], timeout: float = DEFAULT_COMMAND_TIMEOUT) -> Optional[str]:
    """Run a settings command and return its stripped stdout, ``None`` on failure."""
    try:
        completed = subprocess.run(args, capture_output=True, text=True,
                                   timeout=timeout, check=False)
    except FileNotFoundError:
        raise HostUnavailableError(args[0], platform.system()) from None
    except subprocess.TimeoutExpired:
        logging.debug(f"Command timed out after {timeout}s: {' '.join(args)}")
        return None

    if completed.returncode != 0:
        logging.debug(f"Command exited with {completed.returncode}: {' '.join(args)}")
        return None
    return completed.stdout.strip()


# --- Windows registry ---

def read_windows_value(key_path: str, value_name: str) -> Optional[Any]:
    """Read a value from ``HKEY_CURRENT_USER``."""
    try:
        import winreg
    except ImportError:
        raise HostUnavailableError("winreg", platform.system()) from None

    try:
        with winreg.OpenKey(winreg.HKEY_CURRENT_USER, key_path, 0, winreg.KEY_READ) as key:
            return winreg.QueryValueEx(key, value_name)[0]
    except OSError:
        return None


# --- GNOME gsettings ---

def _strip_gvariant(value: str) -> str:
    # gsettings prints strings as GVariant text, e.g. 'blue'
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "'\"":
        return value[1:-1]
    return value


def gsettings_get(schema: str, key: str, timeout: float = DEFAULT_COMMAND_TIMEOUT) -> Optional[str]:
    output = run_command(["gsettings", "get", schema, key], timeout)
    if not output:
        return None
    return _strip_gvariant(output)


def gsettings_has_key(schema: str, key: str, timeout: float = DEFAULT_COMMAND_TIMEOUT) -> bool:
    try:
        output = run_command(["gsettings", "list-keys", schema], timeout)
    except HostUnavailableError:
        return False
    return bool(output) and key in output.split()


# --- macOS user defaults ---

def defaults_read(key: str, timeout: float = DEFAULT_COMMAND_TIMEOUT) -> Optional[str]:
    """Read a global user default (``defaults read -g key``)."""
    return run_command(["defaults", "read", "-g", key], timeout)


def uri_to_path(uri: str) -> Optional[str]:
    """Convert a ``file://`` URI (or a plain path) to a local path."""
    if not uri:
        return None
    parsed = urlparse(uri)
    if parsed.scheme in ("", "file"):
        path = unquote(parsed.path) if parsed.scheme else uri
        return os.path.expanduser(path)
    return None
