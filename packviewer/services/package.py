"""
Icon Package - Read-only access to an installed icon pack APK.

Exposes what the viewer needs from the pack:
  - package name (resource namespace) and display label from the manifest
  - bundled assets (assets/<name>) as text streams
  - the resource table from resources.arsc
  - the APK path, for reading entries straight from the zip
"""

import io
import zipfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

from loguru import logger
from pyaxmlparser import APK

from packviewer.services.resources import (
    ArscResourceTable,
    NullResourceTable,
    ResourceTable,
)


class AssetMissing(Exception):
    """A bundled asset could not be opened."""


class IconPackage:
    """
    An icon pack APK on disk.

    The binary manifest is only parsed when the package name is not given,
    so tests and callers that already know it can skip pyaxmlparser.
    """

    def __init__(
        self,
        apk_path,
        package_name: Optional[str] = None,
        label: Optional[str] = None,
        resources: Optional[ResourceTable] = None,
    ):
        self.apk_path = str(apk_path)
        self._apk = None

        if package_name is None:
            self._apk = APK(self.apk_path)
            package_name = self._apk.package
            logger.debug(f"Opened {Path(self.apk_path).name} as {package_name}")

        self.package_name = package_name
        self._label = label
        self._resources = resources

    @property
    def label(self) -> str:
        """Application label, or the package name when it can't be read."""
        if self._label is None:
            self._label = self._load_label()
        return self._label

    def _load_label(self) -> str:
        if self._apk is None:
            return self.package_name

        try:
            return self._apk.application or self.package_name
        except Exception as e:
            logger.debug(f"Could not read application label: {e}")
            return self.package_name

    @property
    def resources(self) -> ResourceTable:
        """Resource table from resources.arsc (loaded on first use)."""
        if self._resources is None:
            self._resources = self._load_resources()
        return self._resources

    def _load_resources(self) -> ResourceTable:
        try:
            if self._apk is None:
                self._apk = APK(self.apk_path)
            arsc = self._apk.get_android_resources()
        except Exception as e:
            logger.warning(f"Could not load resources.arsc from {self.apk_path}: {e}")
            return NullResourceTable()

        if arsc is None:
            logger.warning(f"No resources.arsc in {self.apk_path}")
            return NullResourceTable()

        return ArscResourceTable(arsc, self.apk_path)

    @contextmanager
    def open_asset(self, name: str) -> Iterator[TextIO]:
        """
        Open assets/<name> from the APK as UTF-8 text.

        Raises:
            AssetMissing: APK unreadable or entry absent
        """
        try:
            archive = zipfile.ZipFile(self.apk_path)
        except (OSError, zipfile.BadZipFile) as e:
            raise AssetMissing(f"{self.apk_path}: {e}") from e

        with archive:
            try:
                raw = archive.open(f"assets/{name}")
            except KeyError:
                raise AssetMissing(f"assets/{name}") from None
            except (zipfile.BadZipFile, NotImplementedError) as e:
                raise AssetMissing(f"assets/{name}: {e}") from e

            with io.TextIOWrapper(raw, encoding="utf-8", errors="replace") as stream:
                yield stream
