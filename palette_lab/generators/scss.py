"""SCSS map of every colour plus a documented lookup function.

The map holds only rgb strings: for each colour its base, tints and shades
keyed by level. The lookup function takes a colour name and a signed level:
0 (default) for the base, positive for tints, negative for shades.

The function's /// doc block lists every colour with its config and
rgb/hex/hsl values, so SCSS IntelliSense shows them with the function.

Config options:
  scssFile : output path
  scssMap  : map variable name (a leading $ is added if missing)
  scssFn   : lookup function name

Example:
    palette-lab build --only scss
    // then in SCSS:  color(primary, -3)
"""

from typing import Any

from palette_lab.core.types import Generator, PaletteColor, Ramp

generator = Generator(
    name='scss',
    help='SCSS map of base/tints/shades and a color($name, $level) lookup function.',
    config_key='scssFile',
)

HEADER = "@use 'sass:map';\n@use 'sass:math';\n@use 'sass:string';\n\n"


def _ramp_map(ramp: Ramp) -> str:
    entries = ', '.join(f'{level}: {ramp.gradations[level].rgb}' for level in sorted(ramp.gradations))
    return f'({entries})'


def format_map(variable: str, colors: dict[str, PaletteColor]) -> str:
    """`$variable: (name: (base: ..., tints: (...), shades: (...)), ...);`"""
    entries = []
    for name, color in colors.items():
        entries.append(
            f'   {name}: (base: {color.info.rgb}, tints: {_ramp_map(color.tints)}, shades: {_ramp_map(color.shades)})'
        )
    return f'{variable}: (\n' + ',\n'.join(entries) + '\n);\n'


def color_docs(colors: dict[str, PaletteColor]) -> str:
    """/// lines describing every base colour."""
    lines = []
    for name, color in colors.items():
        lines.append(f'/// - {name}:')
        for prop in ('gradations', 'max'):
            if prop in color.config.raw:
                lines.append(f'///    - {prop}: {color.config.raw[prop]}')
        info = color.info
        lines.append(f'///    - rgb: {info.rgb}')
        lines.append(f'///    - hex: {info.hex}')
        lines.append(f'///    - hsl: {info.hsl}')
        lines.append('///')
    return '\n'.join(lines) + '\n'


def scss_function(variable: str, function_name: str, docs: str) -> str:
    return (
        '\n/// Retrieves a tint or shade from the color palette.\n///\n/// Available (base) colors:\n'
        + docs
        + f"""/// Usage:
///   - Use only the color name for the base color
///   - Use positive levels for tints
///   - Use negative levels for shades
///
/// @example
///   {function_name}(color-name) // base
///   {function_name}(color-name, 3) // tint
///   {function_name}(color-name, -3) // shade
///
/// @param {{String}} $color-name - Name of the color to retrieve.
/// @param {{Number}} [$level=0] - Optional level for tint or shade (default: 0).
/// @returns {{String}} RGB color value.
@function {function_name}($color-name, $level: 0) {{
   $color-value: '';

   @if $level == 0 {{
      $color-value: map.get({variable}, $color-name, base);
   }}

   @if $level < 0 {{
      $color-value: map.get({variable}, $color-name, shades, math.abs($level));
   }}

   @if $level > 0 {{
      $color-value: map.get({variable}, $color-name, tints, math.abs($level));
   }}

   @return $color-value;
}}
"""
    )


@generator.run
def run(colors: dict[str, PaletteColor], config: dict[str, Any]) -> str:
    variable = config['scssMap']
    if not variable.startswith('$'):
        variable = '$' + variable
    return HEADER + format_map(variable, colors) + scss_function(variable, config['scssFn'], color_docs(colors))
