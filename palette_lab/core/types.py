"""Shared types for palette-lab: ColorConfig, Palette, ColorInfo, PaletteColor, Generator."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any


class PaletteError(ValueError):
    """A palette entry that cannot be turned into a colour at all."""


@dataclass(frozen=True)
class NormalizedLevels:
    """A scalar-or-pair config value split into tint and shade parts (None = use default)."""

    tint_property: float | None = None
    shade_property: float | None = None


@dataclass(frozen=True)
class MixSpec:
    """Mix this colour's base with another palette colour's base."""

    target: str  # name of another colour in the same palette
    percentage: float  # share of the target colour, 0..100


@dataclass(frozen=True)
class ColorConfig:
    """One validated palette entry."""

    name: str
    base: str
    gradations: NormalizedLevels
    max: NormalizedLevels
    mix: MixSpec | None = None
    raw: dict[str, Any] = field(default_factory=dict)  # entry as written, for display


class Palette(Mapping[str, ColorConfig]):
    """Immutable mapping of colour name to ColorConfig.

    Built once per run with Palette.from_dict() (see palette_lab.core.config).
    """

    def __init__(self, colors: Mapping[str, ColorConfig]):
        self._colors = dict(colors)

    def __getitem__(self, name: str) -> ColorConfig:
        return self._colors[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __repr__(self) -> str:
        return f'Palette({list(self._colors)!r})'

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Palette:
        from palette_lab.core.config import parse_palette

        return parse_palette(raw)


@dataclass(frozen=True)
class Gradation:
    """Raw generator output: level -> colour string and level -> mix percentage."""

    gradations: dict[int, str] = field(default_factory=dict)
    mix_amount: dict[int, float] = field(default_factory=dict)


@dataclass(frozen=True)
class ColorInfo:
    """One concrete colour in every representation palette-lab reports."""

    lightness: str  # L*, 2 dp
    luminance: str  # relative luminance Y, 5 dp
    luminance_pct: str  # Y as a percentage, 3 dp
    hex: str
    rgb: str  # rgb(r,g,b) from the hex channels
    rgb2: str  # higher precision sRGB functional form
    hsl: str
    hwb: str
    hsv: str
    lab: str
    lch: str
    p3_linear: str
    lab_values: tuple[float, float, float]
    mix_amount: str | None = None  # e.g. 'white 40%'

    def as_dict(self) -> dict[str, Any]:
        """Display mapping, in the order generators print it."""
        return {
            'Perceived lightness (L*)': self.lightness,
            'Luminance (Y)': f'{self.luminance} ({self.luminance_pct}%)',
            'hex': self.hex,
            'rgb': self.rgb,
            'rgb2': self.rgb2,
            'hsl': self.hsl,
            'hwb': self.hwb,
            'hsv': self.hsv,
            'lab': self.lab,
            'lch': self.lch,
            'p3-linear': self.p3_linear,
            'mixAmount': self.mix_amount,
            'labArr': list(self.lab_values),
        }


@dataclass(frozen=True)
class Ramp:
    """Tints or shades of one colour. Levels ascend away from the base."""

    levels: int
    max: float
    adjustment: float | None  # advisory L* per level, None if infeasible
    gradations: dict[int, ColorInfo] = field(default_factory=dict)


@dataclass(frozen=True)
class PaletteColor:
    """Computed record for one named colour."""

    name: str
    config: ColorConfig
    info: ColorInfo
    tints: Ramp
    shades: Ramp


class Generator:
    """A self-registering output generator.

    Usage in a generator module:

        generator = Generator(name='scss', help='SCSS map and lookup function', config_key='scssFile')

        @generator.run
        def run(colors, config):
            ...
    """

    def __init__(self, name: str, help: str = '', config_key: str | None = None, binary: bool = False):
        self.name = name
        self.help = help
        self.config_key = config_key  # general config option holding the output path
        self.binary = binary
        self.module: object | None = None  # defining module, set by registry.discover()
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, colors: dict[str, PaletteColor], config: dict[str, Any]) -> str | bytes:
        """Execute the generator's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Generator {self.name} has no run function')
        return self._run_fn(colors, config)
