"""Shared pytest fixtures for the Accent Bridge test suite."""

from __future__ import annotations

import os
import shutil
import tempfile
from typing import Any, Callable, Dict, Optional

import pytest
from unittest.mock import Mock

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt5 import QtWidgets

from accent_bridge.host.base import ThemeHost
from accent_bridge.models.capability import CapabilityTier
from accent_bridge.models.color_request import RenderContext, ThemeMode


@pytest.fixture(scope="session")
def qapp() -> QtWidgets.QApplication:
    """Provide a QApplication instance configured for offscreen rendering."""
    app = QtWidgets.QApplication.instance()
    if app is None:
        app = QtWidgets.QApplication([])
    yield app
    # Don't quit the app as it might be used by other tests


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def settings_file(temp_dir):
    """Path of a settings file inside the temporary directory."""
    yield os.path.join(temp_dir, "test_settings.json")


def _lookup(table: Optional[Dict[Any, Any]], key: Any):
    if table is None or key not in table:
        raise LookupError(f"{key} not available")
    value = table[key]
    if isinstance(value, Exception):
        raise value
    return value


@pytest.fixture
def host_factory() -> Callable[..., Mock]:
    """Factory for mock hosts whose sources are described by plain dicts.

    ``palette`` and ``attributes`` map entries/attributes to colors or to an
    exception to raise; missing keys raise LookupError, mirroring a host
    without that resource. ``attributes`` may also be keyed by
    ``(mode, attribute)`` to give modes distinct values.
    """

    def _factory(tier: CapabilityTier = CapabilityTier.DYNAMIC,
                 system_mode: ThemeMode = ThemeMode.LIGHT,
                 palette: Optional[Dict[Any, Any]] = None,
                 device_accent: Optional[int] = None,
                 attributes: Optional[Dict[Any, Any]] = None,
                 wallpaper: Optional[int] = None) -> Mock:
        host = Mock(spec=ThemeHost)
        host.capability_tier.return_value = tier
        host.system_mode.return_value = system_mode
        host.derive_context.side_effect = lambda mode: RenderContext(mode=mode, adjusted=True)

        host.palette_color.side_effect = lambda entry, context: _lookup(palette, entry)
        host.lookup_color_id.side_effect = lambda name: 1 if device_accent is not None else 0
        host.resolve_color.side_effect = lambda resource_id, context: device_accent

        def _attribute(attribute, context):
            table = attributes or {}
            value = table.get((context.mode, attribute), table.get(attribute))
            if isinstance(value, Exception):
                raise value
            return value

        host.resolve_attribute.side_effect = _attribute
        host.wallpaper_primary_color.return_value = wallpaper
        return host

    return _factory
