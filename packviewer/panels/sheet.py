"""
Contact Sheet - Render an icon pack screen to a single PIL image.

Same layout as the viewer window: title, icon count, then a fixed-column
grid of icons with short labels. Unresolved icons leave an empty slot.
"""

from typing import Optional

from loguru import logger
from PIL import Image, ImageDraw, ImageFont, ImageOps

from packviewer.panels.grid import EMPTY_MESSAGE, IconGridAdapter, ScreenModel
from packviewer.services.resolver import IconResolver

HEADER_LINE_HEIGHT = 20
LABEL_HEIGHT = 14
MESSAGE_HEIGHT = 80


def render_contact_sheet(
    screen: ScreenModel,
    resolver: Optional[IconResolver],
    columns: int = 4,
    icon_size: int = 44,
    padding: int = 8,
) -> Image.Image:
    """
    Draw the screen as an RGB image.

    Args:
        screen: Screen model from open_screen()
        resolver: Icon resolver (may be None for error screens)
        columns: Icons per row
        icon_size: Edge length of each icon in pixels
        padding: Space around cells and the header

    Returns:
        PIL Image in RGB mode
    """
    font = ImageFont.load_default()
    palette = screen.palette

    cell_width = icon_size + padding * 2
    cell_height = icon_size + LABEL_HEIGHT + padding * 2
    width = max(columns * cell_width + padding * 2, 200)

    if screen.error is not None:
        img = Image.new("RGB", (width, MESSAGE_HEIGHT), palette.background)
        draw = ImageDraw.Draw(img)
        draw.text((padding * 2, padding * 2), screen.error, fill=palette.text, font=font)
        return img

    header_height = padding + HEADER_LINE_HEIGHT * 2
    if screen.is_empty:
        body_height = MESSAGE_HEIGHT
    else:
        rows = (len(screen.names) + columns - 1) // columns
        body_height = rows * cell_height + padding

    img = Image.new("RGB", (width, header_height + body_height), palette.background)
    draw = ImageDraw.Draw(img)

    draw.text((padding * 2, padding), screen.title, fill=palette.text, font=font)
    draw.text(
        (padding * 2, padding + HEADER_LINE_HEIGHT),
        screen.count_text,
        fill=palette.subtle,
        font=font,
    )

    if screen.is_empty:
        text_width = draw.textlength(EMPTY_MESSAGE, font=font)
        draw.text(
            ((width - text_width) / 2, header_height + MESSAGE_HEIGHT / 2 - LABEL_HEIGHT / 2),
            EMPTY_MESSAGE,
            fill=palette.subtle,
            font=font,
        )
        return img

    adapter = IconGridAdapter(screen.names, resolver, palette.subtle)
    resolved = 0

    for position in range(len(adapter)):
        cell = adapter.get_cell(position)
        row, col = divmod(position, columns)
        x = padding + col * cell_width
        y = header_height + row * cell_height

        if cell.icon.found:
            icon = ImageOps.contain(cell.icon.image.convert("RGBA"), (icon_size, icon_size))
            offset = (
                x + padding + (icon_size - icon.width) // 2,
                y + padding + (icon_size - icon.height) // 2,
            )
            img.paste(icon, offset, icon)
            resolved += 1

        label_width = draw.textlength(cell.label, font=font)
        draw.text(
            (x + (cell_width - label_width) / 2, y + padding + icon_size + 2),
            cell.label,
            fill=cell.label_color,
            font=font,
        )

    logger.debug(f"Contact sheet: {resolved}/{len(adapter)} icons resolved")
    return img
