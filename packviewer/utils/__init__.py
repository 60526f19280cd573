# Pack Viewer Utilities Package
"""
Shared utility functions and helpers for the pack viewer.
"""

from .helpers import load_settings, select_palette, shorten_label

__all__ = ["load_settings", "select_palette", "shorten_label"]
