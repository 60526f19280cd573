"""
Resource Table - Look up drawables by name in an APK's resources.arsc.

Mirrors the host lookup an Android app gets for free:
  get_identifier(name, "drawable", package) -> resource id (0 if absent)
  open_drawable(resource id)                -> bitmap bytes

The arsc parser (pyaxmlparser ARSCParser) only knows resource ids and their
per-configuration file paths, so names are indexed from its public.xml dump.
"""

import zipfile
from abc import ABC, abstractmethod

import xmltodict
from loguru import logger

BITMAP_EXTENSIONS = (".png", ".webp", ".jpg", ".jpeg", ".gif")

# Densest first; nodpi and unqualified directories after all buckets
DENSITY_ORDER = ["xxxhdpi", "xxhdpi", "xhdpi", "hdpi", "mdpi", "ldpi", "nodpi"]


class ResourceNotFound(Exception):
    """A resource id has no loadable bitmap."""


class ResourceTable(ABC):
    """Name-to-handle lookup for one package's resources."""

    @abstractmethod
    def get_identifier(self, name: str, res_type: str, package: str) -> int:
        """Return the resource id, or 0 when there is no such resource."""
        ...

    @abstractmethod
    def open_drawable(self, res_id: int) -> bytes:
        """Return the raw bytes of the bitmap behind res_id."""
        ...


class NullResourceTable(ResourceTable):
    """Resource table for packages without a readable resources.arsc."""

    def get_identifier(self, name: str, res_type: str, package: str) -> int:
        return 0

    def open_drawable(self, res_id: int) -> bytes:
        raise ResourceNotFound(f"0x{res_id:08x}")


class ArscResourceTable(ResourceTable):
    """Resource table backed by a parsed resources.arsc."""

    def __init__(self, arsc, apk_path: str):
        self._arsc = arsc
        self.apk_path = str(apk_path)
        self._ids: dict[str, dict[tuple[str, str], int]] = {}

    def get_identifier(self, name: str, res_type: str, package: str) -> int:
        return self._index(package).get((res_type, name), 0)

    def _index(self, package: str) -> dict[tuple[str, str], int]:
        """Build (and keep) the (type, name) -> id index for a package."""
        if package not in self._ids:
            try:
                self._ids[package] = self._build_index(package)
            except Exception as e:
                logger.warning(f"Could not index resources for {package}: {e}")
                self._ids[package] = {}
        return self._ids[package]

    def _build_index(self, package: str) -> dict[tuple[str, str], int]:
        public_xml = self._arsc.get_public_resources(package)
        data = xmltodict.parse(public_xml, force_list=("public",))

        index = {}
        for item in (data.get("resources") or {}).get("public", []):
            try:
                index[(item["@type"], item["@name"])] = int(item["@id"], 16)
            except (KeyError, TypeError, ValueError):
                continue

        logger.debug(f"Indexed {len(index)} resources for {package}")
        return index

    def open_drawable(self, res_id: int) -> bytes:
        """
        Read the best bitmap file for a drawable id from the APK.

        Raises:
            ResourceNotFound: No bitmap file behind the id (e.g. XML drawables)
        """
        paths = [
            value
            for _config, value in self._arsc.get_resolved_res_configs(res_id)
            if isinstance(value, str) and value.lower().endswith(BITMAP_EXTENSIONS)
        ]
        if not paths:
            raise ResourceNotFound(f"0x{res_id:08x}")

        path = select_best_density(paths)
        with zipfile.ZipFile(self.apk_path) as archive:
            try:
                return archive.read(path)
            except KeyError:
                raise ResourceNotFound(f"0x{res_id:08x}: {path}") from None


def select_best_density(paths: list[str]) -> str:
    """
    Pick the densest candidate from a list of res/drawable-*/ paths.

    Args:
        paths: Non-empty list of resource file paths

    Returns:
        The first path in DENSITY_ORDER, otherwise the first path
    """
    for density in DENSITY_ORDER:
        for path in paths:
            qualifiers = path.split("/")[-2].split("-")[1:] if "/" in path else []
            if density in qualifiers:
                return path
    return paths[0]
