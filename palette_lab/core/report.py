"""Report builder — text and JSON output for computed palettes."""

import json
from typing import Any

from palette_lab.core.types import ColorInfo, PaletteColor, Ramp


def _info_line(label: str, info: ColorInfo) -> str:
    line = f'  {label:<6} {info.hex}  {info.rgb:<18} L*={info.lightness:>6}  Y={info.luminance_pct}%'
    if info.mix_amount:
        line += f'  ({info.mix_amount})'
    return line


def _ramp_header(kind: str, ramp: Ramp) -> str:
    if ramp.adjustment is None:
        step = 'infeasible'
    else:
        step = f'~{ramp.adjustment:.2f} L*/level'
    return f'  {kind}: {ramp.levels} levels, max {ramp.max:g}, {step}'


def format_text(colors: dict[str, PaletteColor], config_path: str | None = None) -> str:
    """Format computed colours as human-readable text. Shades print darkest first."""
    lines = []
    header = f'palette-lab: {len(colors)} colours'
    if config_path:
        header += f' — {config_path}'
    lines.append(header)
    lines.append('')

    for name, color in colors.items():
        mix = color.config.mix
        suffix = f' (mixed with {mix.target} {mix.percentage:g}%)' if mix else ''
        lines.append(f'── {name} {color.config.base}{suffix}')

        lines.append(_ramp_header('shades', color.shades))
        for level in sorted(color.shades.gradations, reverse=True):
            lines.append(_info_line(f'-{level}', color.shades.gradations[level]))
        lines.append(_info_line('base', color.info))
        lines.append(_ramp_header('tints', color.tints))
        for level in sorted(color.tints.gradations):
            lines.append(_info_line(f'+{level}', color.tints.gradations[level]))

        lines.append('')

    return '\n'.join(lines)


def _ramp_dict(ramp: Ramp) -> dict[str, Any]:
    return {
        'levels': ramp.levels,
        'max': ramp.max,
        'adjustment': ramp.adjustment,
        'gradations': {str(level): info.as_dict() for level, info in ramp.gradations.items()},
    }


def to_dict(colors: dict[str, PaletteColor]) -> dict[str, Any]:
    """Plain nested dict of every computed colour."""
    return {
        name: {
            'config': color.config.raw,
            'info': color.info.as_dict(),
            'tints': _ramp_dict(color.tints),
            'shades': _ramp_dict(color.shades),
        }
        for name, color in colors.items()
    }


def format_json(colors: dict[str, PaletteColor]) -> str:
    """Format computed colours as JSON."""
    return json.dumps(to_dict(colors), indent=2)
