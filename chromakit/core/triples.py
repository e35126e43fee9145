"""Model-specific triples returned by the conversion functions.

Every non-RGB model is a plain 3-component named tuple. Cylindrical models
carry two class-level tags read by the blend engine:

    hue_field     name of the circular component (degrees, [0, 360))
    chroma_field  name of the radial component whose zero makes hue undefined
    grey_chroma   radial value below which the converter reports hue 0
                  (0.0: only an exact zero is grey)

Models without a hue leave the tags as None.
"""

from typing import NamedTuple

# Chroma below which hue is reported as 0 (about 0.1 CIE units, far below a JND)
ACHROMATIC_CHROMA = 1e-3


class Rgb(NamedTuple):
    """Device (gamma-encoded) RGB, nominally [0, 1]."""
    r: float
    g: float
    b: float

    hue_field = None
    chroma_field = None
    grey_chroma = None


class LinearRgb(NamedTuple):
    """Linear-light RGB, nominally [0, 1]."""
    r: float
    g: float
    b: float

    hue_field = None
    chroma_field = None
    grey_chroma = None


class Xyz(NamedTuple):
    """CIE 1931 XYZ tristimulus values (Y of reference white = 1)."""
    x: float
    y: float
    z: float

    hue_field = None
    chroma_field = None
    grey_chroma = None


class XyY(NamedTuple):
    """CIE xyY: chromaticity (x, y) plus luminance Y."""
    x: float
    y: float
    Y: float

    hue_field = None
    chroma_field = None
    grey_chroma = None


class Lab(NamedTuple):
    """CIE L*a*b* with L in [0, 1] and a, b scaled by 1/128."""
    l: float
    a: float
    b: float

    hue_field = None
    chroma_field = None
    grey_chroma = None


class Luv(NamedTuple):
    """CIE L*u*v* with L in [0, 1] and u, v scaled by 1/100."""
    l: float
    u: float
    v: float

    hue_field = None
    chroma_field = None
    grey_chroma = None


class Hcl(NamedTuple):
    """CIE LCh(ab) in (hue, chroma, lightness) order."""
    h: float
    c: float
    l: float

    hue_field = "h"
    chroma_field = "c"
    grey_chroma = ACHROMATIC_CHROMA


class LuvLCh(NamedTuple):
    """CIE LCh(uv) in (lightness, chroma, hue) order."""
    l: float
    c: float
    h: float

    hue_field = "h"
    chroma_field = "c"
    grey_chroma = ACHROMATIC_CHROMA


class Hsl(NamedTuple):
    h: float
    s: float
    l: float

    hue_field = "h"
    chroma_field = "s"
    grey_chroma = 0.0


class Hsv(NamedTuple):
    h: float
    s: float
    v: float

    hue_field = "h"
    chroma_field = "s"
    grey_chroma = 0.0


class OkLab(NamedTuple):
    """Oklab (Ottosson 2020), L in [0, 1]."""
    l: float
    a: float
    b: float

    hue_field = None
    chroma_field = None
    grey_chroma = None


class OkLch(NamedTuple):
    """Cylindrical Oklab in (lightness, chroma, hue) order."""
    l: float
    c: float
    h: float

    hue_field = "h"
    chroma_field = "c"
    grey_chroma = ACHROMATIC_CHROMA
