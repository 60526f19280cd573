"""
Helper utilities for the pack viewer.

Provides common functions used across panels:
- Label shortening for grid cells
- Palette selection from the package name
- Settings loading
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Any, Optional

import toml
from loguru import logger

LABEL_SEPARATOR = "__"
LABEL_MAX_LENGTH = 10


@dataclass(frozen=True)
class Palette:
    """Screen colors as CSS hex strings."""
    background: str
    text: str
    subtle: str


DARK_PALETTE = Palette(background="#121212", text="#FFFFFF", subtle="#AAAAAA")
LIGHT_PALETTE = Palette(background="#FAFAFA", text="#1A1A1A", subtle="#888888")


def shorten_label(name: str) -> str:
    """
    Derive a short grid label from a drawable name.

    Drops everything up to the last "__" (unless that is at the very start),
    then keeps at most 10 characters.

    Example:
        shorten_label("com_example__sun")  # "sun"
    """
    sep = name.rfind(LABEL_SEPARATOR)
    if sep > 0:
        name = name[sep + len(LABEL_SEPARATOR):]
    return name[:LABEL_MAX_LENGTH]


def select_palette(package_name: str) -> Palette:
    """
    Pick the screen palette for a pack.

    White icon packs are shown on a dark background, everything else
    on a light one.
    """
    if "white" in package_name:
        return DARK_PALETTE
    return LIGHT_PALETTE


DEFAULT_SETTINGS_PATH = Path(__file__).parent.parent / "data" / "settings.toml"


def load_settings(settings_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load viewer settings from TOML file.

    Args:
        settings_path: TOML file to read (defaults to packviewer/data/settings.toml)

    Returns:
        Dictionary containing settings with defaults applied

    Example settings structure:
        {
            "viewer": {"apk_path": "/path/to/pack.apk", "close_on_escape": True},
            "grid": {"columns": 4, "icon_size": 44, "spacing": 6},
            "resolver": {"cache": True},
            "sheet": {"padding": 8}
        }
    """
    # Default settings
    defaults = {
        "viewer": {
            "apk_path": "",
            "close_on_escape": True,
        },
        "grid": {
            "columns": 4,
            "icon_size": 44,
            "spacing": 6,
        },
        "resolver": {
            "cache": True,
        },
        "sheet": {
            "padding": 8,
        },
    }

    settings_path = Path(settings_path) if settings_path else DEFAULT_SETTINGS_PATH

    if not settings_path.exists():
        logger.info(f"Settings file not found at {settings_path}, using defaults")
        return defaults

    try:
        loaded = toml.load(settings_path)
    except Exception as e:
        logger.warning(f"Could not load settings from {settings_path}: {e}")
        return defaults

    return _deep_merge(defaults, loaded)


def _deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Deep merge two dictionaries.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides

    Returns:
        Merged dictionary (override takes precedence)
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value

    return result
