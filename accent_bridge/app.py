"""Command line entry point helpers."""

import argparse
import json
import logging
import sys
from typing import List, Optional

from PyQt5 import QtWidgets

from .core.channel import GET_SYSTEM_COLOR, MethodCall, ThemeChannel
from .core.resolver import AccentColorResolver
from .core.settings_manager import DEFAULT_SETTINGS_FILE, SettingsManager
from .host.desktop import DesktopThemeHost
from .models.color_request import DARK_MODE_ARGUMENT


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="accent_bridge",
                                     description="Print the system accent color as #RRGGBB.")
    parser.add_argument("--dark", action="store_true", help="resolve the dark-mode variant")
    parser.add_argument("--method", default=GET_SYSTEM_COLOR, help="channel method to call")
    parser.add_argument("--settings", default=DEFAULT_SETTINGS_FILE, help="settings file path")
    parser.add_argument("--qt-palette", action="store_true",
                        help="start a Qt application so its palette can be read")
    parser.add_argument("--json", action="store_true", help="print the full channel response")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every lookup")
    return parser


def build_channel(settings_manager: SettingsManager) -> ThemeChannel:
    """Wire host, resolver and channel from settings."""
    host = DesktopThemeHost(settings_manager)
    resolver = AccentColorResolver.from_settings(host, settings_manager)
    return ThemeChannel(resolver)


def main(argv: Optional[List[str]] = None) -> int:
    """Answer one channel call from the command line."""
    args = _build_parser().parse_args(argv)

    settings_manager = SettingsManager(args.settings)
    level = "DEBUG" if args.verbose else str(settings_manager.settings.log_level).upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    for issue in settings_manager.validate_settings():
        logging.warning(f"Settings issue: {issue}")

    app = None
    if args.qt_palette:
        app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(sys.argv[:1])

    channel = build_channel(settings_manager)
    response = channel.handle(MethodCall(args.method, {DARK_MODE_ARGUMENT: args.dark}))

    if args.json:
        print(json.dumps(response.to_dict()))
    elif response.is_success:
        print(response.value)
    else:
        print(f"{args.method}: not implemented", file=sys.stderr)

    if app is not None:
        app.quit()
    return 0 if response.is_success else 1
