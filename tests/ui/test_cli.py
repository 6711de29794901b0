import json

import pytest

from accent_bridge import app
from accent_bridge.models.capability import CapabilityTier
from accent_bridge.models.color_request import ThemeAttribute


@pytest.fixture
def legacy_host(monkeypatch, host_factory):
    host = host_factory(tier=CapabilityTier.LEGACY, attributes={
        ThemeAttribute.PRIMARY_DARK: 0x1F1B24,
        ThemeAttribute.ACCENT: 0xFF4081,
    })
    monkeypatch.setattr(app, "DesktopThemeHost", lambda settings_manager: host)
    return host


def test_prints_light_color(legacy_host, settings_file, capsys):
    assert app.main(["--settings", settings_file]) == 0
    assert capsys.readouterr().out.strip() == "#FF4081"


def test_prints_dark_color_as_json(legacy_host, settings_file, capsys):
    assert app.main(["--settings", settings_file, "--dark", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"status": "success", "value": "#1F1B24"}


def test_unknown_method(legacy_host, settings_file, capsys):
    assert app.main(["--settings", settings_file, "--method", "getFontScale"]) == 1

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "not implemented" in captured.err


@pytest.mark.parametrize("settings_data", [
    {"theme_attributes": None},
    {"wallpaper_clusters": "3", "command_timeout": "2"},
])
def test_mistyped_settings_still_print_color(legacy_host, settings_file, settings_data, capsys):
    with open(settings_file, 'w') as f:
        json.dump(settings_data, f)

    assert app.main(["--settings", settings_file]) == 0
    assert capsys.readouterr().out.strip() == "#FF4081"
