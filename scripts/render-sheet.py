#!/usr/bin/env python3
"""Render every icon of an icon pack APK to one PNG contact sheet.

Reads grid and sheet settings from packviewer/data/settings.toml when present.

Usage:
    python3 scripts/render-sheet.py ICONPACK.apk [OUTPUT.png]
    # Default output: <apk name>-icons.png next to the APK
"""

import sys
from pathlib import Path

from loguru import logger

from packviewer.panels.grid import open_screen
from packviewer.panels.sheet import render_contact_sheet
from packviewer.utils.helpers import load_settings


def main(argv):
    if len(argv) < 2:
        print(__doc__)
        return 1

    apk_path = Path(argv[1])
    out_path = Path(argv[2]) if len(argv) > 2 else apk_path.with_name(f"{apk_path.stem}-icons.png")

    settings = load_settings()
    screen, resolver = open_screen(apk_path, cache=settings["resolver"]["cache"])

    img = render_contact_sheet(
        screen,
        resolver,
        columns=settings["grid"]["columns"],
        icon_size=settings["grid"]["icon_size"],
        padding=settings["sheet"]["padding"],
    )
    img.save(out_path)

    print(f"{screen.title or apk_path.name}: {screen.count_text} -> {out_path}")
    return 0 if screen.error is None else 1


if __name__ == "__main__":
    logger.remove()
    logger.add(sys.stderr, level="INFO")
    sys.exit(main(sys.argv))
