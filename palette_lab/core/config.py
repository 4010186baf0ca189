"""Config loading for palette-lab.

A config file is JSON with two keys:
  config  : general options (output paths, SCSS names).
  palette : colour name -> {base, gradations, max, mix}.

Lookup order (first wins):
  1. Explicit path (--config).
  2. PALETTE_LAB_CONFIG environment variable.
  3. .palette-lab.json walking up from cwd, stopping at .git (file or dir).

User `config` keys override the defaults. A non-empty user palette replaces
the default palette. A config file that cannot be read or parsed is reported
on stderr and the defaults are used instead; the build carries on.
"""

import copy
import json
import os
import sys
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from palette_lab.core.color import is_color
from palette_lab.core.levels import DEFAULT_LEVELS, DEFAULT_MAX, get_property, is_number
from palette_lab.core.types import ColorConfig, MixSpec, NormalizedLevels, Palette, PaletteError

CONFIG_FILENAME = '.palette-lab.json'
CONFIG_ENV_VAR = 'PALETTE_LAB_CONFIG'

DEFAULT_CONFIG: dict[str, Any] = {
    # Output path for the SCSS file
    'scssFile': './src/scss/_palette-lab.scss',
    # SCSS map variable holding the palette
    'scssMap': 'palette-lab',
    # Function used in SCSS to look colours up
    'scssFn': 'color',
    # Preview outputs
    'htmlFile': './palette-lab.html',
    'jsonFile': './palette-lab.json',
    'swatchFile': './palette-lab.png',
}

DEFAULT_PALETTE: dict[str, Any] = {
    'primary': {
        'base': 'hsl(240, 80%, 60%)',
        'gradations': 10,
    },
    'secondary': {
        'base': '#FF5500',
        'gradations': [12],
        'max': [100, 96],
        'mix': ['primary', 80],
    },
    'accent': {
        'base': '#BB8822',
        'gradations': [3, 2],
        'max': [75, 50],
    },
    'tinted-gray': {
        'base': '#808080',
        'gradations': 5,
        'max': [100, 96],
    },
}


@dataclass
class LoadedConfig:
    """Merged general options and palette, plus where they came from."""

    config: dict[str, Any] = field(default_factory=dict)
    palette: Palette = field(default_factory=lambda: Palette({}))
    path: Path | None = None  # user config file, None when defaults only


def _find_config(start: Path) -> Path | None:
    """Walk up from start, return first config file found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _read_config_file(path: Path) -> dict[str, Any]:
    with open(path, encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError('top level must be an object with "config" and "palette" keys')
    return data


def _clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def _resolve_levels(value: object) -> NormalizedLevels:
    levels = get_property(value)
    tint = levels.tint_property if levels.tint_property is not None else DEFAULT_LEVELS
    shade = levels.shade_property if levels.shade_property is not None else DEFAULT_LEVELS
    return NormalizedLevels(tint_property=max(int(tint), 0), shade_property=max(int(shade), 0))


def _resolve_max(value: object) -> NormalizedLevels:
    limits = get_property(value)
    tint = limits.tint_property if limits.tint_property is not None else DEFAULT_MAX
    shade = limits.shade_property if limits.shade_property is not None else DEFAULT_MAX
    return NormalizedLevels(tint_property=_clamp(tint, 0, 100), shade_property=_clamp(shade, 0, 100))


def _parse_mix(name: str, value: object, names: Sequence[str]) -> MixSpec | None:
    """A MixSpec for a well-formed mix entry, None for anything else."""
    if not isinstance(value, Sequence) or isinstance(value, str) or len(value) != 2:
        return None
    target, percentage = value
    if not isinstance(target, str) or target == name or target not in names:
        return None
    if not is_number(percentage):
        return None
    return MixSpec(target=target, percentage=_clamp(percentage, 0, 100))


def parse_color_config(name: str, entry: Mapping[str, Any], names: Sequence[str]) -> ColorConfig:
    """Validate one palette entry. Only an unusable base raises."""
    if not isinstance(entry, Mapping):
        raise PaletteError(f'{name}: palette entry must be an object, got {type(entry).__name__}')
    base = entry.get('base')
    if not is_color(base):
        raise PaletteError(f'{name}: invalid base colour {base!r}')
    return ColorConfig(
        name=name,
        base=base,
        gradations=_resolve_levels(entry.get('gradations')),
        max=_resolve_max(entry.get('max')),
        mix=_parse_mix(name, entry.get('mix'), names),
        raw=dict(entry),
    )


def parse_palette(raw: Mapping[str, Any]) -> Palette:
    names = list(raw)
    return Palette({name: parse_color_config(name, entry, names) for name, entry in raw.items()})


def _config_path(config_file: str | None) -> Path | None:
    if config_file:
        return Path(config_file)
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return _find_config(Path.cwd())


def load_config(config_file: str | None = None) -> LoadedConfig:
    """Load and merge the user's config over the defaults."""
    user_config: dict[str, Any] = {}
    palette: Palette | None = None

    path = _config_path(config_file)
    if path is not None:
        try:
            data = _read_config_file(path)
            user_config = data.get('config') or {}
            user_palette = data.get('palette') or {}
            if not isinstance(user_config, dict) or not isinstance(user_palette, dict):
                raise ValueError('"config" and "palette" must be objects')
            # Use the default palette when the user's is empty
            if user_palette:
                palette = parse_palette(user_palette)
        except (OSError, ValueError) as e:
            print(f'palette-lab: no user config or error loading it: {e}', file=sys.stderr)
            path = None
            user_config, palette = {}, None

    return LoadedConfig(
        config={**DEFAULT_CONFIG, **user_config},
        palette=palette if palette is not None else parse_palette(DEFAULT_PALETTE),
        path=path,
    )


def write_user_config(path: str | Path = CONFIG_FILENAME) -> Path:
    """Write a starter config file with the defaults. Never overwrites."""
    path = Path(path)
    if path.exists():
        raise FileExistsError(f'{path} already exists')
    data = {'config': copy.deepcopy(DEFAULT_CONFIG), 'palette': copy.deepcopy(DEFAULT_PALETTE)}
    path.write_text(json.dumps(data, indent=3) + '\n', encoding='utf-8')
    return path
