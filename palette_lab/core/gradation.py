"""Tint and shade ladders: mix a base towards white or black in LAB, level by level."""

from palette_lab.core.color import BLACK, WHITE, Color
from palette_lab.core.mixing import mix_colors
from palette_lab.core.types import Gradation

# The last level snaps to max when this close to it (float drift).
SNAP_TOLERANCE = 0.1


def get_gradation(color: str, lighten: bool = True, levels: int = 5, max: float = 100) -> Gradation:
    """Generate `levels` colours from `color` towards white (lighten) or black.

    Level i mixes min(max / levels * i, 100) percent of white/black, so the
    final level lands on max. levels <= 0 gives an empty gradation; max <= 0
    gives copies of the base colour.
    """
    gradations: dict[int, str] = {}
    mix_amount: dict[int, float] = {}
    if levels <= 0:
        return Gradation(gradations, mix_amount)

    max = min(max, 100) if max > 0 else 0
    base = Color(color)
    target = WHITE if lighten else BLACK
    step = max / levels

    for i in range(1, levels + 1):
        percentage = min(step * i, 100)
        if max - percentage < SNAP_TOLERANCE:
            percentage = max

        gradations[i] = mix_colors(base, target, percentage)
        mix_amount[i] = percentage

    return Gradation(gradations, mix_amount)
