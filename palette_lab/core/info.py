"""Translate one colour into every representation palette-lab reports.

The input is parsed once, converted to sRGB and gamut-mapped; every other
representation is derived from that fitted colour so they cannot drift apart.
"""

from palette_lab.core.color import Color
from palette_lab.core.luminance import get_luminance, hex_to_rgb
from palette_lab.core.types import ColorInfo


def get_color_info(color: str | Color, mix_amount: str | None = None) -> ColorInfo:
    srgb = Color(color).convert('srgb').fit()
    lab = srgb.convert('lab')
    lab_values = (lab['lightness'], lab['a'], lab['b'])

    hex_str = srgb.to_string(hex=True, alpha=False).upper()
    luminance, luminance_pct = get_luminance(hex_str)
    r, g, b = hex_to_rgb(hex_str)

    return ColorInfo(
        lightness=f'{lab_values[0]:.2f}',
        luminance=f'{luminance:.5f}',
        luminance_pct=f'{luminance_pct:.3f}',
        hex=hex_str,
        rgb=f'rgb({r},{g},{b})',
        rgb2=srgb.to_string(precision=4),
        hsl=srgb.convert('hsl').to_string(),
        hwb=srgb.convert('hwb').to_string(),
        hsv=srgb.convert('hsv').to_string(),
        lab=lab.to_string(),
        lch=srgb.convert('lch').to_string(),
        p3_linear=srgb.convert('display-p3-linear').to_string(),
        lab_values=lab_values,
        mix_amount=mix_amount,
    )
