# Pack Viewer Package
"""
Icon pack viewer for Android icon pack APKs.

Components:
  - Services: appfilter parsing, APK access, drawable resolution
  - Panels: grid presentation, Ignis window, PNG contact sheet
  - Utils: labels, palettes, settings
"""

__version__ = "0.1.0-dev"
