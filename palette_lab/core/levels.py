"""Level and limit arithmetic: scalar-or-pair config values and the feasibility check."""

import math
from collections.abc import Sequence

from palette_lab.core.color import Color
from palette_lab.core.types import NormalizedLevels

DEFAULT_LEVELS = 5
DEFAULT_MAX = 100


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def get_property(value: object) -> NormalizedLevels:
    """Split a gradations/max value into tint and shade parts.

    A number or one-item list applies to both. A two-item list is
    [shade, tint]. Anything else gives None for both.
    """
    if is_number(value):
        return NormalizedLevels(tint_property=value, shade_property=value)

    if isinstance(value, Sequence) and not isinstance(value, str) and all(is_number(v) for v in value):
        if len(value) == 1:
            return NormalizedLevels(tint_property=value[0], shade_property=value[0])
        if len(value) == 2:
            return NormalizedLevels(tint_property=value[1], shade_property=value[0])

    return NormalizedLevels()


def get_adjustment_level(
    color: str,
    lighten: bool = True,
    levels: float | None = DEFAULT_LEVELS,
    max: float | None = DEFAULT_MAX,
) -> float | None:
    """L* change per level needed to reach the limit, or None if it cannot be reached.

    For lightening the limit is `max` on the L* scale. For darkening it is
    `100 - max`, since darkness limits are counted from the black end.
    """
    if not max or not is_number(max):
        max = DEFAULT_MAX
    if not levels or not is_number(levels):
        levels = DEFAULT_LEVELS
    if levels < 0:
        return None

    lightness = Color(color).convert('lab')['lightness']
    limit = max if lighten else 100 - max

    if lighten and lightness >= limit:
        return None
    if not lighten and lightness <= limit:
        return None

    difference = limit - lightness if lighten else lightness - limit
    return difference / levels
