"""LAB mixing and base colour resolution.

Mixes are interpolated in CIELAB and returned as sRGB functional strings
(gamut-mapped on output). An unmixed base goes through the same sRGB
serialization so both paths produce the same string format.
"""

from palette_lab.core.color import Color
from palette_lab.core.types import Palette


def mix_colors(c1: str | Color, c2: str | Color, percentage: float) -> str:
    """Mix c2 into c1 by percentage (0-100) in LAB, return an sRGB string.

    Example:
        mix_colors('#ff0000', '#0000ff', 50)  # halfway between red and blue
    """
    mixed = Color(c1).mix(c2, percentage / 100, space='lab', out_space='srgb')
    return mixed.to_string()


def to_srgb_string(color: str | Color) -> str:
    """Convert any colour to the sRGB string format mix_colors() returns."""
    return Color(color).convert('srgb').to_string()


def get_base_color(name: str, palette: Palette) -> str:
    """Effective base colour for a palette entry, mixed if configured."""
    config = palette[name]
    mix = config.mix
    if mix is not None and mix.target != name and mix.target in palette:
        return mix_colors(config.base, palette[mix.target].base, mix.percentage)
    return to_srgb_string(config.base)
