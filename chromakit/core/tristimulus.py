"""Linear RGB ↔ CIE XYZ, and XYZ ↔ xyY.

The matrix pair is calibrated to the sRGB primaries and the D65 white:

    [[0.4123908, 0.3575843, 0.1804808],
     [0.2126390, 0.7151687, 0.0721923],
     [0.0193308, 0.1191948, 0.9505322]]

and its inverse. Both are stored at full double precision so that a
forward/inverse round trip stays well inside 8-bit resolution.
"""

from typing import Iterable

import numpy as np

from .transfer import delinearize, linearize
from .triples import LinearRgb, Rgb, Xyz, XyY
from .whitepoint import D65, WhitePoint

_LINEAR_RGB_TO_XYZ = np.array([
    [0.41239079926595948, 0.35758433938387796, 0.18048078840183429],
    [0.21263900587151036, 0.71516867876775593, 0.072192315360733715],
    [0.019330818715591851, 0.11919477979462599, 0.95053215224966058],
])

_XYZ_TO_LINEAR_RGB = np.array([
    [3.2409699419045214, -1.5373831775700935, -0.49861076029300328],
    [-0.96924363628087983, 1.8759675015077207, 0.041555057407175613],
    [0.055630079696993609, -0.20397695888897657, 1.0569715142428786],
])

# Below this X+Y+Z (or y) the chromaticity is treated as undefined
_CHROMATICITY_EPS = 1e-14


def linear_rgb_to_xyz(r: float, g: float, b: float) -> Xyz:
    """Convert linear RGB to CIE XYZ (D65)."""
    x, y, z = _LINEAR_RGB_TO_XYZ @ np.array([r, g, b], dtype=np.float64)
    return Xyz(float(x), float(y), float(z))


def xyz_to_linear_rgb(x: float, y: float, z: float) -> LinearRgb:
    """Convert CIE XYZ (D65) to linear RGB. Out-of-gamut results are kept."""
    r, g, b = _XYZ_TO_LINEAR_RGB @ np.array([x, y, z], dtype=np.float64)
    return LinearRgb(float(r), float(g), float(b))


def rgb_to_xyz(rgb: Iterable[float]) -> Xyz:
    """Convert device RGB to CIE XYZ: exact linearization, then the matrix."""
    return linear_rgb_to_xyz(*linearize(rgb))


def xyz_to_rgb(x: float, y: float, z: float) -> Rgb:
    """Convert CIE XYZ to device RGB: the inverse matrix, then gamma encoding."""
    return delinearize(xyz_to_linear_rgb(x, y, z))


def xyz_to_xyy_white_ref(x: float, y: float, z: float, white: WhitePoint) -> XyY:
    """Reparameterise XYZ as chromaticity plus luminance.

    Parameters
    ----------
    x, y, z : float
        Tristimulus values
    white : WhitePoint
        Supplies the chromaticity reported for black

    Returns
    -------
    XyY

    Notes
    -----
    For X = Y = Z = 0 the chromaticity is undefined; the reference white's
    chromaticity is reported instead (with Y = 0) rather than NaN.
    """
    total = x + y + z
    if abs(total) < _CHROMATICITY_EPS:
        cx, cy = white.chromaticity
        return XyY(cx, cy, y)
    return XyY(x / total, y / total, y)


def xyz_to_xyy(x: float, y: float, z: float) -> XyY:
    return xyz_to_xyy_white_ref(x, y, z, D65)


def xyy_to_xyz(x: float, y: float, Y: float) -> Xyz:
    """Inverse of xyz_to_xyy. A zero chromaticity y yields X = Z = 0."""
    if -_CHROMATICITY_EPS < y < _CHROMATICITY_EPS:
        return Xyz(0.0, Y, 0.0)
    return Xyz(Y / y * x, Y, Y / y * (1.0 - x - y))
