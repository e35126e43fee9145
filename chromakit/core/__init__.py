"""Colorimetric engine (depends only on chromakit.utils).

Modules, leaf-first:
    - triples: named tuples for every colour model (hue/chroma tags)
    - interp: lerp, normalize_hue, interp_angle
    - whitepoint: WhitePoint, D65, D50, named illuminants
    - transfer: sRGB transfer function (exact and fast)
    - tristimulus: linear RGB ↔ XYZ, XYZ ↔ xyY
    - perceptual: XYZ ↔ L*a*b*, L*u*v*, LCh(ab), LCh(uv)
    - cylindrical: RGB ↔ HSL, HSV
    - oklab: linear RGB ↔ Oklab, OkLCh
    - distance: CIE76, CIE94, CIEDE2000
    - blend: model registry and interpolation
    - color: the Color value type

Every function here is pure; nothing logs and nothing holds state.
"""

from . import blend, cylindrical, distance, interp, oklab, perceptual, transfer, tristimulus, triples, whitepoint
from .color import Color

__all__ = [
    'Color',
    'blend',
    'cylindrical',
    'distance',
    'interp',
    'oklab',
    'perceptual',
    'transfer',
    'tristimulus',
    'triples',
    'whitepoint',
]
