# Pack Viewer Panels Package
"""
Presentation of an icon pack.

grid and sheet are toolkit-free. The Ignis window lives in
packviewer.panels.viewer and is imported on its own, since it
needs GTK.
"""

from .grid import IconCell, IconGridAdapter, ScreenModel, build_screen, open_screen
from .sheet import render_contact_sheet

__all__ = [
    "IconCell",
    "IconGridAdapter",
    "ScreenModel",
    "build_screen",
    "open_screen",
    "render_contact_sheet",
]
