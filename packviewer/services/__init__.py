# Pack Viewer Services Package
"""
Backend services for the pack viewer.

Services read the icon pack: manifest parsing, APK access and
drawable resolution. None of them touch the UI.
"""

from .package import AssetMissing, IconPackage
from .appfilter import load_appfilter, parse_appfilter
from .resolver import IconResolver, ResolvedIcon

__all__ = [
    "AssetMissing",
    "IconPackage",
    "load_appfilter",
    "parse_appfilter",
    "IconResolver",
    "ResolvedIcon",
]
