"""
Appfilter Parser - Extract drawable names from an icon pack manifest.

The manifest (assets/appfilter.xml) maps launcher components to drawables:

  <item component="ComponentInfo{com.example/com.example.Main}" drawable="com_example__main" />

It is scanned line by line with a regex, not parsed as XML. Only the first
drawable="..." on a line is taken; a second entry on the same line is dropped.
"""

import re
import zipfile
import zlib
from typing import Iterable

from loguru import logger

from packviewer.services.package import AssetMissing

APPFILTER_ASSET = "appfilter.xml"

DRAWABLE_PATTERN = re.compile(r'drawable="([^"]+)"')


def parse_appfilter(stream: Iterable[str]) -> list[str]:
    """
    Collect drawable names from a text stream, one per matching line.

    Args:
        stream: Any iterable of lines (open text file, list of strings)

    Returns:
        Drawable names in file order, duplicates kept.
        Lines read before a read failure are kept.
    """
    names = []

    try:
        for line in stream:
            match = DRAWABLE_PATTERN.search(line)
            if match:
                names.append(match.group(1))
    except (OSError, UnicodeDecodeError, EOFError, zlib.error, zipfile.BadZipFile) as e:
        logger.warning(f"Appfilter read stopped after {len(names)} entries: {e}")

    return names


def load_appfilter(package) -> list[str]:
    """
    Load drawable names from a package's bundled appfilter.xml.

    Args:
        package: IconPackage (anything with an open_asset() context manager)

    Returns:
        List of drawable names, empty if the asset is missing
    """
    try:
        with package.open_asset(APPFILTER_ASSET) as stream:
            names = parse_appfilter(stream)
    except AssetMissing as e:
        logger.info(f"No {APPFILTER_ASSET} in package: {e}")
        return []

    logger.debug(f"Parsed {len(names)} drawables from {APPFILTER_ASSET}")
    return names
