"""
Viewer Panel - Ignis window showing every icon of a pack.

Features:
- Header with pack label and icon count
- Fixed-column Gtk.GridView; cells are created and recycled by GTK's
  list item factory and filled through IconGridAdapter
- Empty state when the pack lists no drawables
- Error message replacing the whole content when the pack can't be opened
- Escape to hide
"""

from gi.repository import Gdk, GdkPixbuf, GLib, Gtk
from ignis import widgets
from loguru import logger

from packviewer.panels.grid import (
    EMPTY_MESSAGE,
    IconCell,
    IconGridAdapter,
    ScreenModel,
    open_screen,
)
from packviewer.utils.helpers import load_settings


def _image_to_texture(img):
    """Convert a PIL image to a Gdk.Texture, or None on failure."""
    try:
        rgba = img.convert("RGBA")
        width, height = rgba.size
        pixbuf = GdkPixbuf.Pixbuf.new_from_bytes(
            GLib.Bytes.new(rgba.tobytes()),
            GdkPixbuf.Colorspace.RGB,
            True,
            8,
            width,
            height,
            width * 4,
        )
        return Gdk.Texture.new_for_pixbuf(pixbuf)
    except Exception as e:
        logger.warning(f"Failed to convert icon to texture: {e}")
        return None


class PackViewerPanel:
    """
    Window listing the drawables of one icon pack.

    Args:
        screen: ScreenModel from open_screen()
        resolver: IconResolver for the pack (None for error screens)
        settings: Settings dict (loaded from settings.toml when omitted)
    """

    def __init__(self, screen: ScreenModel, resolver, settings=None):
        self.screen = screen
        self.resolver = resolver
        self.settings = settings or load_settings()

        self.columns = self.settings["grid"]["columns"]
        self.icon_size = self.settings["grid"]["icon_size"]
        self.spacing = self.settings["grid"]["spacing"]

        self.adapter = None
        if resolver is not None:
            self.adapter = IconGridAdapter(screen.names, resolver, screen.palette.subtle)

    @classmethod
    def from_settings(cls, settings=None):
        """Open the pack configured in [viewer] apk_path."""
        settings = settings or load_settings()
        screen, resolver = open_screen(
            settings["viewer"]["apk_path"],
            cache=settings["resolver"]["cache"],
        )
        return cls(screen, resolver, settings)

    def create_window(self):
        """
        Create the viewer window.

        Returns:
            widgets.Window holding the header and icon grid
        """
        window = widgets.Window(
            namespace="packviewer",
            anchor=["top", "bottom"],
            exclusivity="normal",
            kb_mode="on_demand",
            layer="top",
            default_width=self.columns * (self.icon_size + self.spacing * 4) + 32,
            child=self._create_content(),
        )

        if self.settings["viewer"]["close_on_escape"]:
            key_controller = Gtk.EventControllerKey()
            key_controller.connect("key-pressed", self._on_key_press, window)
            window.add_controller(key_controller)

        window.connect("notify::visible", self._on_visibility_changed)

        return window

    def _create_content(self):
        """Build the window child for the current screen state."""
        palette = self.screen.palette

        if self.screen.error is not None:
            return widgets.Label(
                label=self.screen.error,
                css_classes=["error-message"],
                wrap=True,
                halign="start",
                valign="start",
            )

        header = [
            widgets.Label(
                label=self.screen.title,
                css_classes=["pack-title"],
                style=f"color: {palette.text};",
                halign="start",
            ),
            widgets.Label(
                label=self.screen.count_text,
                css_classes=["pack-count"],
                style=f"color: {palette.subtle};",
                halign="start",
            ),
        ]

        if self.screen.is_empty:
            body = widgets.Label(
                label=EMPTY_MESSAGE,
                css_classes=["empty-state"],
                style=f"color: {palette.subtle};",
                justify="center",
                vexpand=True,
            )
        else:
            body = widgets.Scroll(
                vexpand=True,
                hexpand=True,
                child=self._create_grid(),
            )

        return widgets.Box(
            vertical=True,
            css_classes=["panel", "viewer-panel"],
            style=f"background-color: {palette.background};",
            child=header + [body],
        )

    def _create_grid(self):
        """Gtk.GridView over the drawable names, one cell per name."""
        factory = Gtk.SignalListItemFactory()
        factory.connect("bind", self._on_bind)

        model = Gtk.StringList.new(self.screen.names)
        grid = Gtk.GridView(model=Gtk.NoSelection(model=model), factory=factory)
        grid.set_min_columns(self.columns)
        grid.set_max_columns(self.columns)
        grid.add_css_class("icon-grid")
        return grid

    def _on_bind(self, factory, list_item):
        """Fill a list item, reusing the cell widget GTK hands back."""
        view = self.adapter.get_view(
            list_item.get_position(),
            list_item.get_child(),
            self._create_cell,
            self._bind_cell,
        )
        list_item.set_child(view)

    def _create_cell(self):
        """
        Create an empty icon cell.

        Returns:
            widgets.Box with a Picture (icon) and a Label (short name)
        """
        return widgets.Box(
            vertical=True,
            spacing=2,
            halign="center",
            css_classes=["icon-cell"],
            child=[
                widgets.Picture(
                    width=self.icon_size,
                    height=self.icon_size,
                    content_fit="contain",
                    css_classes=["icon-image"],
                ),
                widgets.Label(
                    css_classes=["icon-label"],
                    max_width_chars=10,
                ),
            ],
        )

    def _bind_cell(self, view, cell: IconCell):
        """Show a cell's icon and label in a (possibly recycled) view."""
        picture = view.get_first_child()
        label = picture.get_next_sibling()

        texture = _image_to_texture(cell.icon.image) if cell.icon.found else None
        picture.set_paintable(texture)

        label.set_label(cell.label)
        label.style = f"color: {cell.label_color};"

    def _on_key_press(self, controller, keyval, keycode, state, window):
        """Escape hides the viewer."""
        if keyval == Gdk.KEY_Escape:
            window.set_visible(False)
            return True
        return False

    def _on_visibility_changed(self, window, param):
        """Drop cached icons once the window is hidden."""
        if not window.get_visible() and self.resolver is not None:
            self.resolver.clear_cache()
