"""The Color value type: a device RGB triple with conversions, distances and blends.

A Color is an immutable (r, g, b) named tuple of floats, nominally in
[0, 1]. Out-of-range channels are allowed (they represent out-of-gamut
intermediate results); use clamped() / is_valid() where that matters.

Construction (classmethods) and extraction (methods) come in pairs:
    from_hsl / to_hsl, from_hsv / to_hsv, from_xyz / to_xyz,
    from_xyy / to_xyy, from_lab / to_lab, from_luv / to_luv,
    from_hcl / to_hcl, from_luv_lch / to_luv_lch, from_oklab / to_oklab,
    from_oklch / to_oklch, from_linear_rgb / to_linear_rgb,
    from_fast_linear_rgb / fast_linear_rgb
Perceptual spaces also have *_white_ref variants taking an explicit
WhitePoint; the short forms use D65.

Usage:
    from chromakit import Color, D50

    red = Color(1.0, 0.0, 0.0)
    red.to_lab()                    # Lab(l=0.5324, a=0.6257, b=0.5250)
    red.to_lab_white_ref(D50)
    red.distance_ciede2000(Color.from_hsv(10.0, 1.0, 1.0))
    red.blend_hcl(Color(0.0, 0.0, 1.0), 0.5)
"""

from typing import NamedTuple, Tuple

from . import blend as _blend
from . import distance as _distance
from .cylindrical import hsl_to_rgb, hsv_to_rgb, rgb_to_hsl, rgb_to_hsv
from .oklab import linear_rgb_to_oklab, oklab_to_linear_rgb, oklab_to_oklch, oklch_to_oklab
from .perceptual import (
    hcl_to_lab,
    lab_to_hcl,
    lab_to_xyz_white_ref,
    luv_lch_to_luv,
    luv_to_luv_lch,
    luv_to_xyz_white_ref,
    xyz_to_lab_white_ref,
    xyz_to_luv_white_ref,
)
from .transfer import delinearize, delinearize_fast_rgb, linearize, linearize_fast_rgb
from .triples import Hcl, Hsl, Hsv, Lab, LinearRgb, Luv, LuvLCh, OkLab, OkLch, Xyz, XyY
from .tristimulus import rgb_to_xyz, xyy_to_xyz, xyz_to_rgb, xyz_to_xyy_white_ref
from .whitepoint import D65, WhitePoint

# Default tolerance of almost_equal: sum of channel differences, 3 8-bit steps
ALMOST_EQUAL_TOLERANCE = 3.0 / 255.0


def _clamp01(v: float) -> float:
    return min(1.0, max(0.0, v))


class Color(NamedTuple):
    """Device (gamma-encoded) sRGB colour."""

    r: float
    g: float
    b: float

    # ------------------------------------------------------------------
    # Utilities
    # ------------------------------------------------------------------

    def is_valid(self) -> bool:
        """True if every channel lies in [0, 1]."""
        return all(0.0 <= c <= 1.0 for c in self)

    def clamped(self) -> 'Color':
        """Copy with every channel clamped to [0, 1]."""
        return Color(_clamp01(self.r), _clamp01(self.g), _clamp01(self.b))

    def almost_equal(self, other: 'Color', tolerance: float = ALMOST_EQUAL_TOLERANCE) -> bool:
        """True if the summed absolute channel difference is below ``tolerance``."""
        return (abs(self.r - other.r) + abs(self.g - other.g) + abs(self.b - other.b)) < tolerance

    def to_8bit_channels(self) -> Tuple[int, int, int]:
        """Channels as 0-255 integers (round half up). Call clamped() first for
        out-of-gamut colours."""
        return (int(self.r * 255.0 + 0.5),
                int(self.g * 255.0 + 0.5),
                int(self.b * 255.0 + 0.5))

    rgb255 = to_8bit_channels

    def to_16bit_channels_with_alpha(self) -> Tuple[int, int, int, int]:
        """Channels as 0-65535 integers plus a fully opaque alpha."""
        return (int(self.r * 65535.0 + 0.5),
                int(self.g * 65535.0 + 0.5),
                int(self.b * 65535.0 + 0.5),
                0xFFFF)

    # ------------------------------------------------------------------
    # Linear RGB
    # ------------------------------------------------------------------

    def to_linear_rgb(self) -> LinearRgb:
        return linearize(self)

    @classmethod
    def from_linear_rgb(cls, r: float, g: float, b: float) -> 'Color':
        return cls(*delinearize((r, g, b)))

    def fast_linear_rgb(self) -> LinearRgb:
        """Polynomial approximation of to_linear_rgb (summed error <= 6/255)."""
        return linearize_fast_rgb(self)

    @classmethod
    def from_fast_linear_rgb(cls, r: float, g: float, b: float) -> 'Color':
        """Polynomial approximation of from_linear_rgb."""
        return cls(*delinearize_fast_rgb((r, g, b)))

    # ------------------------------------------------------------------
    # HSL / HSV
    # ------------------------------------------------------------------

    def to_hsl(self) -> Hsl:
        return rgb_to_hsl(self)

    @classmethod
    def from_hsl(cls, h: float, s: float, l: float) -> 'Color':
        return cls(*hsl_to_rgb(h, s, l))

    def to_hsv(self) -> Hsv:
        return rgb_to_hsv(self)

    @classmethod
    def from_hsv(cls, h: float, s: float, v: float) -> 'Color':
        return cls(*hsv_to_rgb(h, s, v))

    # ------------------------------------------------------------------
    # XYZ / xyY
    # ------------------------------------------------------------------

    def to_xyz(self) -> Xyz:
        return rgb_to_xyz(self)

    @classmethod
    def from_xyz(cls, x: float, y: float, z: float) -> 'Color':
        return cls(*xyz_to_rgb(x, y, z))

    def to_xyy(self) -> XyY:
        return self.to_xyy_white_ref(D65)

    def to_xyy_white_ref(self, white: WhitePoint) -> XyY:
        """xyY; black reports the chromaticity of ``white``."""
        return xyz_to_xyy_white_ref(*self.to_xyz(), white)

    @classmethod
    def from_xyy(cls, x: float, y: float, Y: float) -> 'Color':
        return cls.from_xyz(*xyy_to_xyz(x, y, Y))

    # ------------------------------------------------------------------
    # L*a*b* and LCh(ab)
    # ------------------------------------------------------------------

    def to_lab(self) -> Lab:
        return self.to_lab_white_ref(D65)

    def to_lab_white_ref(self, white: WhitePoint) -> Lab:
        return xyz_to_lab_white_ref(*self.to_xyz(), white)

    @classmethod
    def from_lab(cls, l: float, a: float, b: float) -> 'Color':
        return cls.from_lab_white_ref(l, a, b, D65)

    @classmethod
    def from_lab_white_ref(cls, l: float, a: float, b: float, white: WhitePoint) -> 'Color':
        return cls.from_xyz(*lab_to_xyz_white_ref(l, a, b, white))

    def to_hcl(self) -> Hcl:
        """LCh(ab) as (h, c, l), D65."""
        return self.to_hcl_white_ref(D65)

    def to_hcl_white_ref(self, white: WhitePoint) -> Hcl:
        return lab_to_hcl(*self.to_lab_white_ref(white))

    @classmethod
    def from_hcl(cls, h: float, c: float, l: float) -> 'Color':
        return cls.from_hcl_white_ref(h, c, l, D65)

    @classmethod
    def from_hcl_white_ref(cls, h: float, c: float, l: float, white: WhitePoint) -> 'Color':
        return cls.from_lab_white_ref(*hcl_to_lab(h, c, l), white)

    # ------------------------------------------------------------------
    # L*u*v* and LCh(uv)
    # ------------------------------------------------------------------

    def to_luv(self) -> Luv:
        return self.to_luv_white_ref(D65)

    def to_luv_white_ref(self, white: WhitePoint) -> Luv:
        return xyz_to_luv_white_ref(*self.to_xyz(), white)

    @classmethod
    def from_luv(cls, l: float, u: float, v: float) -> 'Color':
        return cls.from_luv_white_ref(l, u, v, D65)

    @classmethod
    def from_luv_white_ref(cls, l: float, u: float, v: float, white: WhitePoint) -> 'Color':
        return cls.from_xyz(*luv_to_xyz_white_ref(l, u, v, white))

    def to_luv_lch(self) -> LuvLCh:
        """LCh(uv) as (l, c, h), D65."""
        return self.to_luv_lch_white_ref(D65)

    def to_luv_lch_white_ref(self, white: WhitePoint) -> LuvLCh:
        return luv_to_luv_lch(*self.to_luv_white_ref(white))

    @classmethod
    def from_luv_lch(cls, l: float, c: float, h: float) -> 'Color':
        return cls.from_luv_lch_white_ref(l, c, h, D65)

    @classmethod
    def from_luv_lch_white_ref(cls, l: float, c: float, h: float, white: WhitePoint) -> 'Color':
        return cls.from_luv_white_ref(*luv_lch_to_luv(l, c, h), white)

    # ------------------------------------------------------------------
    # Oklab / OkLCh
    # ------------------------------------------------------------------

    def to_oklab(self) -> OkLab:
        return linear_rgb_to_oklab(*self.to_linear_rgb())

    @classmethod
    def from_oklab(cls, l: float, a: float, b: float) -> 'Color':
        return cls.from_linear_rgb(*oklab_to_linear_rgb(l, a, b))

    def to_oklch(self) -> OkLch:
        return oklab_to_oklch(*self.to_oklab())

    @classmethod
    def from_oklch(cls, l: float, c: float, h: float) -> 'Color':
        return cls.from_oklab(*oklch_to_oklab(l, c, h))

    # ------------------------------------------------------------------
    # Distances
    # ------------------------------------------------------------------

    def distance_rgb(self, other: 'Color') -> float:
        """Euclidean distance in device RGB (not perceptual)."""
        return _distance.euclidean(self, other)

    def distance_linear_rgb(self, other: 'Color') -> float:
        return _distance.euclidean(self.to_linear_rgb(), other.to_linear_rgb())

    def distance_riemersma(self, other: 'Color') -> float:
        return _distance.riemersma(self, other)

    def distance_lab(self, other: 'Color') -> float:
        return _distance.cie76(self.to_lab(), other.to_lab())

    distance_cie76 = distance_lab

    def distance_luv(self, other: 'Color') -> float:
        return _distance.euclidean(self.to_luv(), other.to_luv())

    def distance_cie94(self, other: 'Color') -> float:
        """CIE94 with this colour as the reference.

        SC and SH are weighted by this colour's chroma, so the metric is
        not symmetric: ``a.distance_cie94(b)`` and ``b.distance_cie94(a)``
        agree only when both chromas are equal (any pair of greys, say).
        Use :meth:`distance_ciede2000` when argument order must not matter.
        """
        return _distance.cie94(self.to_lab(), other.to_lab())

    def distance_ciede2000(self, other: 'Color', kl: float = 1.0, kc: float = 1.0,
                           kh: float = 1.0) -> float:
        return _distance.ciede2000(self.to_lab(), other.to_lab(), kl, kc, kh)

    # ------------------------------------------------------------------
    # Blending
    # ------------------------------------------------------------------

    def blend(self, other: 'Color', t: float, model: str = "lab") -> 'Color':
        return Color(*_blend.interpolate(self, other, t, model))

    def blend_rgb(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "rgb")

    def blend_linear_rgb(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "linear_rgb")

    def blend_hsv(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "hsv")

    def blend_hsl(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "hsl")

    def blend_lab(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "lab")

    def blend_luv(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "luv")

    def blend_hcl(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "hcl")

    def blend_luv_lch(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "luv_lch")

    def blend_oklab(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "oklab")

    def blend_oklch(self, other: 'Color', t: float) -> 'Color':
        return self.blend(other, t, "oklch")


def blend(c1: Color, c2: Color, t: float, model: str = "lab") -> Color:
    """Blend two colours inside ``model`` (see core.blend.available_models())."""
    return Color(*_blend.interpolate(c1, c2, t, model))
