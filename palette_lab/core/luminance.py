"""Relative luminance (Y) from hex colours.

Channels are gamma-decoded from sRGB to linear light, then weighted with the
standard sRGB coefficients. See https://stackoverflow.com/a/56678483
"""

import numpy as np

# Returned for hex strings that are neither #rgb nor #rrggbb.
FALLBACK_RGB = (127.5, 127.5, 127.5)

SRGB_COEFFICIENTS = np.array([0.2126, 0.7152, 0.0722])


def hex_to_rgb(hex_str: str) -> tuple[float, float, float]:
    """'#CCCFDB' or '#CCF' -> (r, g, b) in 0..255. Mid-grey for anything else."""
    h = str(hex_str).lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) != 6:
        return FALLBACK_RGB
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError:
        return FALLBACK_RGB


def srgb_to_linear(channels: np.ndarray) -> np.ndarray:
    """sRGB (gamma encoded, 0..1) -> linear light (0..1). Vectorised."""
    channels = np.asarray(channels, dtype=np.float64)
    return np.where(channels <= 0.04045, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4)


def get_luminance(hex_str: str) -> tuple[float, float]:
    """Return (luminance, luminance as a percentage) for a hex colour."""
    linear = srgb_to_linear(np.array(hex_to_rgb(hex_str)) / 255.0)
    luminance = float(linear @ SRGB_COEFFICIENTS)
    return luminance, luminance * 100
