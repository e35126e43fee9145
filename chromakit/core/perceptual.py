"""CIE XYZ ↔ perceptually uniform spaces: L*a*b*, L*u*v* and their LCh forms.

Provides:
    - xyz_to_lab_white_ref / lab_to_xyz_white_ref (and D65 wrappers)
    - xyz_to_luv_white_ref / luv_to_xyz_white_ref (and D65 wrappers)
    - lab_to_hcl / hcl_to_lab: L*a*b* ↔ LCh(ab), tuple order (h, c, l)
    - luv_to_luv_lch / luv_lch_to_luv: L*u*v* ↔ LCh(uv), tuple order (l, c, h)

Scale convention:
    L in [0, 1] (CIE L* / 100). a and b are CIE a*, b* divided by 128, the
    half-span of the signed 8-bit Lab encoding, so saturated sRGB colours
    land within about [-1, 1]. u and v are CIE u*, v* divided by 100. The
    distance engine scales back to conventional CIE units internally.

Invariants:
    - White point is always an explicit argument of the *_white_ref forms;
      the short forms are the D65 specialisations.
    - Hue is reported in [0, 360) and is 0 for achromatic input.
"""

import math

from .interp import normalize_hue
from .triples import ACHROMATIC_CHROMA, Hcl, Lab, Luv, LuvLCh, Xyz
from .whitepoint import D65, WhitePoint

# CIE constants
_DELTA = 6.0 / 29.0
_DELTA_CUBE = _DELTA ** 3
_KAPPA = (29.0 / 3.0) ** 3          # 903.3: L* slope in the linear toe
_LUV_L_BREAK = 0.08                 # L (scaled) where the toe ends

# CIE L* and a*, b* per unit of the stored L and a, b
LAB_L_SCALE = 100.0
LAB_AB_SCALE = 128.0
_A_GAIN = 500.0 / LAB_AB_SCALE
_B_GAIN = 200.0 / LAB_AB_SCALE


def _lab_f(t: float) -> float:
    if t > _DELTA_CUBE:
        return t ** (1.0 / 3.0)
    return t / (3.0 * _DELTA * _DELTA) + 4.0 / 29.0


def _lab_finv(t: float) -> float:
    if t > _DELTA:
        return t * t * t
    return 3.0 * _DELTA * _DELTA * (t - 4.0 / 29.0)


# ============================================================================
# L*a*b*
# ============================================================================

def xyz_to_lab_white_ref(x: float, y: float, z: float, white: WhitePoint) -> Lab:
    """Convert XYZ to CIE L*a*b*.

    Parameters
    ----------
    x, y, z : float
        Tristimulus values
    white : WhitePoint
        Reference white

    Returns
    -------
    Lab
        L in [0, 1], a and b scaled by 1/128

    Notes
    -----
    Uses the CIE standard transform with the 6/29 threshold:
        L = 1.16 f(Y/Yn) - 0.16
        a = 500 / 128 (f(X/Xn) - f(Y/Yn))
        b = 200 / 128 (f(Y/Yn) - f(Z/Zn))
    """
    fy = _lab_f(y / white.y)
    l = 1.16 * fy - 0.16
    a = _A_GAIN * (_lab_f(x / white.x) - fy)
    b = _B_GAIN * (fy - _lab_f(z / white.z))
    return Lab(l, a, b)


def xyz_to_lab(x: float, y: float, z: float) -> Lab:
    return xyz_to_lab_white_ref(x, y, z, D65)


def lab_to_xyz_white_ref(l: float, a: float, b: float, white: WhitePoint) -> Xyz:
    """Convert CIE L*a*b* back to XYZ (inverse of xyz_to_lab_white_ref)."""
    fy = (l + 0.16) / 1.16
    return Xyz(
        white.x * _lab_finv(fy + a / _A_GAIN),
        white.y * _lab_finv(fy),
        white.z * _lab_finv(fy - b / _B_GAIN),
    )


def lab_to_xyz(l: float, a: float, b: float) -> Xyz:
    return lab_to_xyz_white_ref(l, a, b, D65)


# ============================================================================
# L*u*v*
# ============================================================================

def _xyz_to_uv(x: float, y: float, z: float):
    """CIE 1976 u'v' chromaticity; (0, 0) when X + 15Y + 3Z = 0."""
    denom = x + 15.0 * y + 3.0 * z
    if denom == 0.0:
        return 0.0, 0.0
    return 4.0 * x / denom, 9.0 * y / denom


def xyz_to_luv_white_ref(x: float, y: float, z: float, white: WhitePoint) -> Luv:
    """Convert XYZ to CIE L*u*v*.

    Parameters
    ----------
    x, y, z : float
        Tristimulus values
    white : WhitePoint
        Reference white (supplies u'n, v'n)

    Returns
    -------
    Luv
        L in [0, 1], u and v scaled by 1/100
    """
    yr = y / white.y
    if yr <= _DELTA_CUBE:
        l = yr * _KAPPA / 100.0
    else:
        l = 1.16 * yr ** (1.0 / 3.0) - 0.16

    ubis, vbis = _xyz_to_uv(x, y, z)
    un, vn = _xyz_to_uv(white.x, white.y, white.z)
    return Luv(l, 13.0 * l * (ubis - un), 13.0 * l * (vbis - vn))


def xyz_to_luv(x: float, y: float, z: float) -> Luv:
    return xyz_to_luv_white_ref(x, y, z, D65)


def luv_to_xyz_white_ref(l: float, u: float, v: float, white: WhitePoint) -> Xyz:
    """Convert CIE L*u*v* back to XYZ. L = 0 maps to black."""
    if l <= _LUV_L_BREAK:
        y = white.y * l * 100.0 / _KAPPA
    else:
        y = white.y * ((l + 0.16) / 1.16) ** 3

    if l == 0.0:
        return Xyz(0.0, 0.0, 0.0)

    un, vn = _xyz_to_uv(white.x, white.y, white.z)
    ubis = u / (13.0 * l) + un
    vbis = v / (13.0 * l) + vn
    if vbis == 0.0:
        return Xyz(0.0, y, 0.0)
    x = y * 9.0 * ubis / (4.0 * vbis)
    z = y * (12.0 - 3.0 * ubis - 20.0 * vbis) / (4.0 * vbis)
    return Xyz(x, y, z)


def luv_to_xyz(l: float, u: float, v: float) -> Xyz:
    return luv_to_xyz_white_ref(l, u, v, D65)


# ============================================================================
# POLAR FORMS
# ============================================================================

def _polar(p: float, q: float):
    """Chroma and hue (degrees) of the Cartesian pair (p, q)."""
    c = math.hypot(p, q)
    if c < ACHROMATIC_CHROMA:
        return c, 0.0
    return c, normalize_hue(math.degrees(math.atan2(q, p)))


def lab_to_hcl(l: float, a: float, b: float) -> Hcl:
    """L*a*b* → LCh(ab) as (h, c, l)."""
    c, h = _polar(a, b)
    return Hcl(h, c, l)


def hcl_to_lab(h: float, c: float, l: float) -> Lab:
    """LCh(ab) as (h, c, l) → L*a*b*."""
    rad = math.radians(h)
    return Lab(l, c * math.cos(rad), c * math.sin(rad))


def luv_to_luv_lch(l: float, u: float, v: float) -> LuvLCh:
    """L*u*v* → LCh(uv) as (l, c, h)."""
    c, h = _polar(u, v)
    return LuvLCh(l, c, h)


def luv_lch_to_luv(l: float, c: float, h: float) -> Luv:
    """LCh(uv) as (l, c, h) → L*u*v*."""
    rad = math.radians(h)
    return Luv(l, c * math.cos(rad), c * math.sin(rad))
