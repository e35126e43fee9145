"""Device RGB ↔ HSL and HSV.

Both models work on gamma-encoded RGB directly (no linearization) and need
no white point. Hue is in degrees [0, 360) and is 0 for achromatic input
(max channel == min channel); saturation is 0 for black.
"""

from typing import Iterable

from .interp import normalize_hue
from .triples import Hsl, Hsv, Rgb


def _hue(r: float, g: float, b: float, max_c: float, min_c: float) -> float:
    """Hue from the max/min decomposition, 0 when achromatic."""
    span = max_c - min_c
    if span == 0.0:
        return 0.0
    if max_c == r:
        h = (g - b) / span
    elif max_c == g:
        h = (b - r) / span + 2.0
    else:
        h = (r - g) / span + 4.0
    return normalize_hue(h * 60.0)


def rgb_to_hsv(rgb: Iterable[float]) -> Hsv:
    """Convert device RGB to HSV.

    Returns
    -------
    Hsv
        h in [0, 360), s and v in [0, 1] for in-gamut input
    """
    r, g, b = rgb
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    s = 0.0 if max_c == 0.0 else (max_c - min_c) / max_c
    return Hsv(_hue(r, g, b, max_c, min_c), s, max_c)


def hsv_to_rgb(h: float, s: float, v: float) -> Rgb:
    """Convert HSV back to device RGB. Any hue is accepted (wrapped)."""
    hp = normalize_hue(h) / 60.0
    c = v * s
    x = c * (1.0 - abs(hp % 2.0 - 1.0))
    m = v - c

    if hp < 1.0:
        r, g, b = c, x, 0.0
    elif hp < 2.0:
        r, g, b = x, c, 0.0
    elif hp < 3.0:
        r, g, b = 0.0, c, x
    elif hp < 4.0:
        r, g, b = 0.0, x, c
    elif hp < 5.0:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return Rgb(m + r, m + g, m + b)


def rgb_to_hsl(rgb: Iterable[float]) -> Hsl:
    """Convert device RGB to HSL.

    Saturation is piecewise on lightness:
        l < 0.5:  s = (max - min) / (max + min)
        l >= 0.5: s = (max - min) / (2 - max - min)
    """
    r, g, b = rgb
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2.0

    if max_c == min_c:
        return Hsl(0.0, 0.0, l)

    if l < 0.5:
        s = (max_c - min_c) / (max_c + min_c)
    else:
        s = (max_c - min_c) / (2.0 - max_c - min_c)
    return Hsl(_hue(r, g, b, max_c, min_c), s, l)


def _hsl_channel(p: float, q: float, t: float) -> float:
    if t < 0.0:
        t += 1.0
    elif t > 1.0:
        t -= 1.0

    if 6.0 * t < 1.0:
        return p + (q - p) * 6.0 * t
    if 2.0 * t < 1.0:
        return q
    if 3.0 * t < 2.0:
        return p + (q - p) * (2.0 / 3.0 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> Rgb:
    """Convert HSL back to device RGB."""
    if s == 0.0:
        return Rgb(l, l, l)

    if l < 0.5:
        q = l * (1.0 + s)
    else:
        q = l + s - l * s
    p = 2.0 * l - q
    hn = normalize_hue(h) / 360.0
    return Rgb(
        _hsl_channel(p, q, hn + 1.0 / 3.0),
        _hsl_channel(p, q, hn),
        _hsl_channel(p, q, hn - 1.0 / 3.0),
    )
