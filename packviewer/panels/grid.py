"""
Grid Presentation - Map an icon pack to what the screen shows.

Nothing here touches a toolkit. The renderers (Ignis window, contact sheet)
consume a ScreenModel and pull cells from an IconGridAdapter; view creation
and recycling stay with the renderer, passed in as callbacks.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from loguru import logger

from packviewer.services.appfilter import load_appfilter
from packviewer.services.package import IconPackage
from packviewer.services.resolver import IconResolver, ResolvedIcon
from packviewer.utils.helpers import (
    LIGHT_PALETTE,
    Palette,
    select_palette,
    shorten_label,
)

EMPTY_MESSAGE = "No icons found"


@dataclass
class ScreenModel:
    """Everything the viewer screen displays, minus the bitmaps."""
    title: str
    palette: Palette
    names: list[str] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def count_text(self) -> str:
        return f"{len(self.names)} icons"

    @property
    def is_empty(self) -> bool:
        return self.error is None and not self.names


@dataclass
class IconCell:
    """Render instruction for one grid cell."""
    position: int
    name: str
    label: str
    icon: ResolvedIcon
    label_color: str


def build_screen(package: IconPackage) -> ScreenModel:
    """
    Build the screen model for an icon pack.

    Args:
        package: Opened IconPackage

    Returns:
        ScreenModel titled with the pack label, drawables in appfilter order
    """
    try:
        title = package.label
    except Exception as e:
        logger.debug(f"Falling back to package name for title: {e}")
        title = package.package_name

    return ScreenModel(
        title=title,
        palette=select_palette(package.package_name),
        names=load_appfilter(package),
    )


def error_screen(error: Exception) -> ScreenModel:
    """Screen that replaces the grid when building it failed."""
    return ScreenModel(title="", palette=LIGHT_PALETTE, error=f"Error: {error}")


def open_screen(apk_path, cache: bool = True) -> tuple[ScreenModel, Optional[IconResolver]]:
    """
    Open an icon pack APK and build its screen.

    Args:
        apk_path: Path to the icon pack APK
        cache: Keep decoded icons for the lifetime of the resolver

    Returns:
        Tuple of (screen, resolver). On failure the error screen and None.
    """
    try:
        package = IconPackage(apk_path)
        screen = build_screen(package)
        resolver = IconResolver(
            package.resources,
            package.package_name,
            package.apk_path,
            cache=cache,
        )
    except Exception as e:
        logger.exception(f"Failed to open icon pack {apk_path}")
        return error_screen(e), None

    logger.info(f"Loaded {screen.count_text} from {screen.title}")
    return screen, resolver


class IconGridAdapter:
    """
    Supplies grid cells by position.

    Icons are resolved when a cell is requested, not up front.
    """

    def __init__(self, names: list[str], resolver: IconResolver, label_color: str):
        self.names = names
        self.resolver = resolver
        self.label_color = label_color

    def __len__(self) -> int:
        return len(self.names)

    def get_item(self, position: int) -> str:
        return self.names[position]

    def get_item_id(self, position: int) -> int:
        return position

    def get_cell(self, position: int) -> IconCell:
        """Resolve the icon and label for a position."""
        name = self.names[position]
        return IconCell(
            position=position,
            name=name,
            label=shorten_label(name),
            icon=self.resolver.resolve(name),
            label_color=self.label_color,
        )

    def get_view(
        self,
        position: int,
        recycled: Any,
        create_view: Callable[[], Any],
        bind_view: Callable[[Any, IconCell], None],
    ) -> Any:
        """
        Return a view showing the cell at position.

        Args:
            position: Cell index
            recycled: A previously created view to reuse, or None
            create_view: Builds a new view when nothing can be reused
            bind_view: Puts a cell's icon and label into a view

        Returns:
            The bound view (recycled when one was given)
        """
        view = recycled if recycled is not None else create_view()
        bind_view(view, self.get_cell(position))
        return view
