"""Build the computed record for each named palette colour.

For one colour: resolve the base (mixing in another palette colour if
configured), generate tints towards white and shades towards black, then
translate the base and every level into ColorInfo. Colours are independent
of each other apart from read-only mix lookups in the palette.
"""

from palette_lab.core.gradation import get_gradation
from palette_lab.core.info import get_color_info
from palette_lab.core.levels import DEFAULT_LEVELS, DEFAULT_MAX, get_adjustment_level
from palette_lab.core.mixing import get_base_color
from palette_lab.core.types import ColorInfo, Gradation, Palette, PaletteColor, Ramp


def format_percentage(value: float) -> str:
    """8.333333 -> '8.33', 40.0 -> '40'."""
    return f'{round(value, 2):g}'


def _translate(gradation: Gradation, mixed_with: str) -> dict[int, ColorInfo]:
    return {
        level: get_color_info(color, f'{mixed_with} {format_percentage(gradation.mix_amount[level])}%')
        for level, color in gradation.gradations.items()
    }


def _ramp(base: str, lighten: bool, levels: float | None, max: float | None) -> Ramp:
    levels = int(levels) if levels is not None else DEFAULT_LEVELS
    max = max if max is not None else DEFAULT_MAX
    gradation = get_gradation(base, lighten=lighten, levels=levels, max=max)
    # max 0: every level is the base colour, nothing to step
    if max <= 0:
        adjustment = 0.0
    else:
        adjustment = get_adjustment_level(base, lighten=lighten, levels=levels, max=max)
    return Ramp(
        levels=levels,
        max=max,
        adjustment=adjustment,
        gradations=_translate(gradation, 'white' if lighten else 'black'),
    )


def get_color_object(name: str, palette: Palette) -> PaletteColor:
    """Compute base info, tints and shades for one palette colour."""
    base = get_base_color(name, palette)
    config = palette[name]

    return PaletteColor(
        name=name,
        config=config,
        info=get_color_info(base),
        tints=_ramp(base, True, config.gradations.tint_property, config.max.tint_property),
        shades=_ramp(base, False, config.gradations.shade_property, config.max.shade_property),
    )


def build_palette(palette: Palette, only: list[str] | None = None) -> dict[str, PaletteColor]:
    """Compute every colour in the palette (or just the names in `only`)."""
    names = [n for n in palette if only is None or n in only]
    return {name: get_color_object(name, palette) for name in names}
