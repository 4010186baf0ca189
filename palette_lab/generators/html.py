"""Standalone HTML preview of the palette.

One row per colour: shades darkest first, then the base, then tints. Hovering
a swatch shows its full colour info (L*, luminance, HEX, RGB, HSL, HWB, HSV,
LAB, LCH, P3-linear and the white/black mix amount).

Config options:
  htmlFile : output path

Example:
    palette-lab build --only html
"""

from html import escape
from typing import Any

from palette_lab.core.types import ColorInfo, Generator, PaletteColor

generator = Generator(
    name='html',
    help='HTML preview page with hoverable swatches for every gradation.',
    config_key='htmlFile',
)

# Display keys not shown in the hover box
HIDDEN = {'labArr', 'mixAmount'}

STYLE = """
   html { box-sizing: border-box; background-color: rgb(22, 22, 22); font-size: 100%; }
   *, *::before, *::after { box-sizing: inherit; }
   body { margin: 0; font-family: sans-serif; font-size: 0.6rem; line-height: 1.5; }
   .color { display: flex; height: 6rem; align-items: stretch; padding: 1rem 1rem 0;
            background-color: rgb(45, 45, 45); }
   .color__gradation { position: relative; display: flex; flex: 1; margin-bottom: 1rem; }
   .color__gradation:hover { z-index: 1; outline: 3px solid currentColor; }
   .color__gradation::after { position: absolute; content: attr(data-text); top: 100%; width: 100%;
            text-align: center; color: rgb(125, 125, 125); }
   .color__gradation--base::after { font-weight: 900; }
   .color__info { position: absolute; bottom: 0; transform: translateY(90%); padding: 0.2rem 0.3rem;
            color: rgb(225, 225, 225); background-color: rgb(45, 45, 45); opacity: 0;
            white-space: nowrap; pointer-events: none; transition: opacity 0.4s ease; }
   .color__gradation:hover .color__info { opacity: 1; }
"""


def _label(key: str) -> str:
    if key in ('Perceived lightness (L*)', 'Luminance (Y)'):
        return key
    if key in ('rgb', 'rgb2'):
        return 'RGB'
    return key.upper()


def info_items(info: ColorInfo) -> str:
    """One <div> per representation."""
    items = []
    for key, value in info.as_dict().items():
        if key in HIDDEN:
            continue
        text = f'<b>{escape(_label(key))}</b>: {escape(str(value))}'
        if key == 'Luminance (Y)':
            text += '<hr>'
        items.append(f'         <div class="color__info-item">{text}</div>')
    if info.mix_amount:
        items.append(f'         <div class="color__info-item"><b>MIX</b>: {escape(info.mix_amount)}</div>')
    return '\n'.join(items)


def _swatch(info: ColorInfo, label: str, base: bool = False) -> str:
    cls = 'color__gradation color__gradation--base' if base else 'color__gradation'
    return (
        f'      <div class="{cls}" style="background-color: {info.rgb2}" data-text="{escape(label)}">\n'
        f'       <div class="color__info">\n{info_items(info)}\n       </div>\n'
        '      </div>'
    )


def color_row(color: PaletteColor) -> str:
    swatches = [_swatch(color.shades.gradations[lv], f'-{lv}') for lv in sorted(color.shades.gradations, reverse=True)]
    swatches.append(_swatch(color.info, color.name, base=True))
    swatches.extend(_swatch(color.tints.gradations[lv], f'+{lv}') for lv in sorted(color.tints.gradations))
    return '   <div class="color">\n' + '\n'.join(swatches) + '\n   </div>'


@generator.run
def run(colors: dict[str, PaletteColor], config: dict[str, Any]) -> str:
    rows = '\n'.join(color_row(color) for color in colors.values())
    return (
        '<!DOCTYPE html>\n<html lang="en">\n<head>\n'
        '   <meta charset="UTF-8">\n'
        '   <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f'   <title>Color Palette</title>\n   <style>{STYLE}   </style>\n</head>\n'
        f'<body>\n<div class="container">\n{rows}\n</div>\n</body>\n</html>\n'
    )
