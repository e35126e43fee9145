"""Linear RGB ↔ Oklab / OkLCh (Björn Ottosson, 2020).

Oklab is defined directly on linear sRGB, so it needs no white point.
OkLCh is its polar form in (l, c, h) order, hue in degrees [0, 360).
"""

import math

import numpy as np

from .interp import normalize_hue
from .triples import ACHROMATIC_CHROMA, LinearRgb, OkLab, OkLch

_LINEAR_RGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

_LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

# Exact inverses keep round trips inside float precision
_LMS_TO_LINEAR_RGB = np.linalg.inv(_LINEAR_RGB_TO_LMS)
_OKLAB_TO_LMS = np.linalg.inv(_LMS_TO_OKLAB)


def linear_rgb_to_oklab(r: float, g: float, b: float) -> OkLab:
    """Convert linear RGB to Oklab."""
    lms = _LINEAR_RGB_TO_LMS @ np.array([r, g, b], dtype=np.float64)
    l, a, b_ = _LMS_TO_OKLAB @ np.cbrt(lms)
    return OkLab(float(l), float(a), float(b_))


def oklab_to_linear_rgb(l: float, a: float, b: float) -> LinearRgb:
    """Convert Oklab back to linear RGB. Out-of-gamut results are kept."""
    lms_ = _OKLAB_TO_LMS @ np.array([l, a, b], dtype=np.float64)
    r, g, b_ = _LMS_TO_LINEAR_RGB @ (lms_ ** 3)
    return LinearRgb(float(r), float(g), float(b_))


def oklab_to_oklch(l: float, a: float, b: float) -> OkLch:
    c = math.hypot(a, b)
    if c < ACHROMATIC_CHROMA:
        return OkLch(l, c, 0.0)
    return OkLch(l, c, normalize_hue(math.degrees(math.atan2(b, a))))


def oklch_to_oklab(l: float, c: float, h: float) -> OkLab:
    rad = math.radians(h)
    return OkLab(l, c * math.cos(rad), c * math.sin(rad))
