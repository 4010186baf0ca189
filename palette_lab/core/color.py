"""Project-local coloraide Color class.

Every conversion in palette_lab goes through this class. ΔE2000 is fixed as
the colour-difference algorithm here, once, so nothing downstream has to set it.
"""

from coloraide import Color as _Base

WHITE = '#FFFFFF'
BLACK = '#000000'


class Color(_Base):
    """coloraide Color with CIEDE2000 as the default ΔE."""

    DELTA_E = '2000'


def is_color(value: object) -> bool:
    """Return True if value is a colour string coloraide can parse."""
    if not isinstance(value, str):
        return False
    try:
        Color(value)
    except ValueError:
        return False
    return True
