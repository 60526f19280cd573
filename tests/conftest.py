"""
Shared test fixtures for the pack viewer test suite.

Provides real APK-shaped zip files, PNG bytes and settings files
written into tmp_path (no mocking of the filesystem).
"""

import io
import zipfile

import pytest
import toml
from PIL import Image

APPFILTER_XML = """<?xml version="1.0" encoding="utf-8"?>
<resources>
    <item component="ComponentInfo{com.example.sun/com.example.sun.Main}" drawable="com_example__sun" />
    <item component="ComponentInfo{com.example.moon/com.example.moon.Main}" drawable="com_example__moon" />
    <item component="ComponentInfo{com.example.star/com.example.star.Main}" drawable="com_example__star" />
</resources>
"""


def png_bytes(color=(255, 0, 0, 255), size=(8, 8)) -> bytes:
    """Encode a solid-color RGBA PNG."""
    buf = io.BytesIO()
    Image.new("RGBA", size, color).save(buf, format="PNG")
    return buf.getvalue()


@pytest.fixture
def make_png():
    """Factory for PNG bytes."""
    return png_bytes


@pytest.fixture
def make_apk(tmp_path):
    """
    Factory writing an icon pack APK (a plain zip) into tmp_path.

    Args:
        appfilter: assets/appfilter.xml content, or None to leave it out
        drawables: name -> bytes stored under res/drawable-nodpi-v4/<name>.png
        extra: path -> bytes for any other entries
    """
    counter = {"n": 0}

    def _make(appfilter=APPFILTER_XML, drawables=None, extra=None):
        counter["n"] += 1
        apk_path = tmp_path / f"pack{counter['n']}.apk"
        with zipfile.ZipFile(apk_path, "w") as archive:
            if appfilter is not None:
                archive.writestr("assets/appfilter.xml", appfilter)
            for name, data in (drawables or {}).items():
                archive.writestr(f"res/drawable-nodpi-v4/{name}.png", data)
            for path, data in (extra or {}).items():
                archive.writestr(path, data)
        return apk_path

    return _make


@pytest.fixture
def tmp_settings(tmp_path):
    """Create a real settings TOML file with all sections."""
    settings_path = tmp_path / "settings.toml"
    data = {
        "viewer": {"apk_path": "/tmp/pack.apk", "close_on_escape": True},
        "grid": {"columns": 5, "icon_size": 48, "spacing": 6},
        "resolver": {"cache": False},
        "sheet": {"padding": 4},
    }
    settings_path.write_text(toml.dumps(data))
    return settings_path


class FakeResourceTable:
    """In-memory resource table keyed by drawable name."""

    def __init__(self, drawables=None):
        self.drawables = drawables or {}
        self._ids = {name: 0x7F020000 + i for i, name in enumerate(self.drawables)}
        self.lookups = []

    def get_identifier(self, name, res_type, package):
        self.lookups.append((name, res_type, package))
        return self._ids.get(name, 0)

    def open_drawable(self, res_id):
        for name, rid in self._ids.items():
            if rid == res_id:
                return self.drawables[name]
        raise KeyError(res_id)


@pytest.fixture
def fake_resources():
    """Factory for FakeResourceTable."""
    return FakeResourceTable
