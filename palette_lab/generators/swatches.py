"""PNG swatch sheet of the palette, rendered with PIL.

One row per colour, same order as the HTML preview: shades darkest first,
base, then tints. Each cell is filled with the gradation's hex colour and
labelled with its level (or the colour name for the base). Rows are
left-aligned; the sheet is as wide as the longest row.

Config options:
  swatchFile : output path

Example:
    palette-lab build --only swatches
"""

import io
from typing import Any

from PIL import Image, ImageDraw

from palette_lab.core.luminance import get_luminance, hex_to_rgb
from palette_lab.core.types import ColorInfo, Generator, PaletteColor

generator = Generator(
    name='swatches',
    help='PNG swatch sheet: one row of cells per colour.',
    config_key='swatchFile',
    binary=True,
)

CELL = 64
LABEL_HEIGHT = 14
PADDING = 8
BACKGROUND = (45, 45, 45)


def row_cells(color: PaletteColor) -> list[tuple[str, ColorInfo]]:
    """(label, info) for every cell in a colour's row, left to right."""
    cells = [(f'-{lv}', color.shades.gradations[lv]) for lv in sorted(color.shades.gradations, reverse=True)]
    cells.append((color.name, color.info))
    cells.extend((f'+{lv}', color.tints.gradations[lv]) for lv in sorted(color.tints.gradations))
    return cells


def _text_fill(info: ColorInfo) -> tuple[int, int, int]:
    """Black text on light swatches, white on dark ones."""
    luminance, _pct = get_luminance(info.hex)
    return (0, 0, 0) if luminance > 0.179 else (255, 255, 255)


def render(colors: dict[str, PaletteColor]) -> Image.Image:
    rows = [row_cells(color) for color in colors.values()]
    columns = max((len(r) for r in rows), default=0)
    width = PADDING * 2 + CELL * max(columns, 1)
    height = PADDING + (CELL + PADDING) * max(len(rows), 1)

    image = Image.new('RGB', (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)

    for y_index, cells in enumerate(rows):
        top = PADDING + y_index * (CELL + PADDING)
        for x_index, (label, info) in enumerate(cells):
            left = PADDING + x_index * CELL
            fill = tuple(int(c) for c in hex_to_rgb(info.hex))
            draw.rectangle((left, top, left + CELL - 1, top + CELL - 1), fill=fill)
            draw.text((left + 3, top + CELL - LABEL_HEIGHT), label[:10], fill=_text_fill(info))

    return image


@generator.run
def run(colors: dict[str, PaletteColor], config: dict[str, Any]) -> bytes:
    buf = io.BytesIO()
    render(colors).save(buf, format='PNG')
    return buf.getvalue()
