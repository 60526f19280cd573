"""
Icon Resolver - Turn a drawable name into a decoded bitmap.

Resolution order (fixed):
  1. Resource table: get_identifier(name, "drawable", package) -> bitmap
  2. Archive fallback: res/drawable-nodpi-v4/<name>.png read straight from the APK
  3. Unresolved: no image, rendered as an empty slot

Every failure inside a step is a miss for that step. Nothing raises to the caller.
"""

import io
import zipfile
from dataclasses import dataclass
from typing import Optional

from loguru import logger
from PIL import Image

from packviewer.services.resources import ResourceTable

DRAWABLE_TYPE = "drawable"

# Only the nodpi bucket is searched; other densities are not tried
ARCHIVE_ENTRY_TEMPLATE = "res/drawable-nodpi-v4/{name}.png"

SOURCE_RESOURCES = "resources"
SOURCE_ARCHIVE = "archive"
SOURCE_UNRESOLVED = "unresolved"


@dataclass
class ResolvedIcon:
    """Result of resolving one drawable name."""
    name: str
    image: Optional[Image.Image] = None
    source: str = SOURCE_UNRESOLVED

    @property
    def found(self) -> bool:
        return self.image is not None


def decode_image(data: bytes) -> Optional[Image.Image]:
    """Decode image bytes with Pillow, or None if they aren't an image."""
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
        return img
    except Exception as e:
        logger.debug(f"Image decode failed: {e}")
        return None


class IconResolver:
    """
    Resolve drawable names for one icon pack.

    Args:
        resources: Resource table of the pack
        package_name: Namespace used for resource lookups
        apk_path: APK to read fallback entries from (None disables the fallback)
        cache: Keep resolved icons per name for the resolver's lifetime
    """

    def __init__(
        self,
        resources: ResourceTable,
        package_name: str,
        apk_path: Optional[str] = None,
        cache: bool = False,
    ):
        self.resources = resources
        self.package_name = package_name
        self.apk_path = apk_path
        self.cache_enabled = cache
        self._cache: dict[str, ResolvedIcon] = {}

    def resolve(self, name: str) -> ResolvedIcon:
        """
        Resolve a drawable name.

        Returns:
            ResolvedIcon with image set on success, image None when unresolved
        """
        if self.cache_enabled and name in self._cache:
            return self._cache[name]

        result = self._resolve(name)

        if self.cache_enabled:
            self._cache[name] = result
        return result

    def _resolve(self, name: str) -> ResolvedIcon:
        img = self._from_resources(name)
        if img is not None:
            return ResolvedIcon(name, img, SOURCE_RESOURCES)

        img = self._from_archive(name)
        if img is not None:
            return ResolvedIcon(name, img, SOURCE_ARCHIVE)

        logger.debug(f"Unresolved drawable: {name}")
        return ResolvedIcon(name)

    def _from_resources(self, name: str) -> Optional[Image.Image]:
        """Step 1: resource table lookup."""
        try:
            res_id = self.resources.get_identifier(name, DRAWABLE_TYPE, self.package_name)
            if not res_id:
                return None
            data = self.resources.open_drawable(res_id)
        except Exception as e:
            logger.debug(f"Resource lookup failed for {name}: {e}")
            return None

        return decode_image(data)

    def _from_archive(self, name: str) -> Optional[Image.Image]:
        """Step 2: read the fixed nodpi entry straight from the APK."""
        if not self.apk_path:
            return None

        entry = ARCHIVE_ENTRY_TEMPLATE.format(name=name)
        try:
            with zipfile.ZipFile(self.apk_path) as archive:
                data = archive.read(entry)
        except KeyError:
            return None
        except Exception as e:
            logger.debug(f"Archive read failed for {entry}: {e}")
            return None

        return decode_image(data)

    def clear_cache(self) -> None:
        """Drop all cached icons."""
        self._cache.clear()
