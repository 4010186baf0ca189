"""Full computed palette as JSON.

Every colour with its config as written, base info, and tints/shades with
levels, max, advisory L* step and the info of every gradation.

Config options:
  jsonFile : output path
"""

from typing import Any

from palette_lab.core.report import format_json
from palette_lab.core.types import Generator, PaletteColor

generator = Generator(name='json', help='Full computed palette as JSON.', config_key='jsonFile')


@generator.run
def run(colors: dict[str, PaletteColor], config: dict[str, Any]) -> str:
    return format_json(colors) + '\n'
