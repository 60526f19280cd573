"""
Pack Viewer - Ignis Configuration

This file is the entry point for Ignis. It opens the icon pack named in
settings.toml ([viewer] apk_path) and shows its icons.

Usage:
  ignis init -c /path/to/packviewer/config.py
  ignis open-window packviewer
"""

import os

from ignis.app import IgnisApp
from loguru import logger

from packviewer.panels.viewer import PackViewerPanel
from packviewer.utils.helpers import load_settings

config_dir = os.path.dirname(os.path.realpath(__file__))

# Get Ignis app instance
app = IgnisApp.get_default()

try:
    app.apply_css(os.path.join(config_dir, "styles", "main.css"))
except Exception as e:
    logger.warning(f"Could not load main.css: {e}")

settings = load_settings()

viewer_panel = PackViewerPanel.from_settings(settings)
viewer_window = viewer_panel.create_window()
viewer_window.panel = viewer_panel

logger.info("Pack viewer initialized")
