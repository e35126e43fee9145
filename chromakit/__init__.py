"""chromakit: colour model conversions, perceptual distances and blending.

Converts a single colour between device RGB, linear RGB, CIE XYZ/xyY,
CIE L*a*b*, CIE L*u*v*, HSL/HSV, HCL/LCh(uv) and Oklab/OkLCh; computes
CIE76, CIE94 and CIEDE2000 differences; blends two colours inside any of
those models with shortest-arc hue interpolation.

Architecture layers (strict one-way dependency):
    chromakit/__main__.py → chromakit/io/ → chromakit/core/ → chromakit/utils/

Key invariants:
    - Colors are device sRGB [0, 1], never clamped implicitly
    - L*a*b* L in [0, 1] (L* / 100), a and b are a*, b* / 128; L*u*v* / 100
    - Distances are ΔE / 100
    - Hue in degrees [0, 360), 0 for achromatic colours
    - White point is always an explicit argument; short forms mean D65
    - YAML-only configs
"""

__version__ = "1.0.0"

from .core.color import Color, blend
from .core.whitepoint import D50, D65, WhitePoint, get_white_point
from .io.hexcodec import InvalidHexFormat, parse_hex, to_hex

__all__ = [
    'Color',
    'blend',
    'WhitePoint',
    'D65',
    'D50',
    'get_white_point',
    'InvalidHexFormat',
    'parse_hex',
    'to_hex',
]
