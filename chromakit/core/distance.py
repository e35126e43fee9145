"""Perceptual colour differences on L*a*b* triples.

Provides:
    - cie76: Euclidean distance in L*a*b*
    - cie94: CIE 1994 weighted distance (graphic-arts constants)
    - ciede2000: CIE 2000 (Sharma, Wu & Dalal 2005 formulation)
    - euclidean: plain Euclidean distance of any two triples
    - riemersma: redmean-weighted distance on device RGB

Scale:
    Inputs use chromakit's stored L*a*b* scale (L / 100, a and b / 128).
    The Lab metrics first restore conventional CIE units, where the CIE94
    and CIEDE2000 constants are defined, and return the result / 100.
    All Lab results are therefore ΔE / 100.

Invariants:
    - Identical inputs give exactly 0 for every metric
    - cie76 and ciede2000 are symmetric; cie94 weights chroma by the first
      (reference) colour as published, so it is symmetric only for equal chroma
"""

import math
from typing import Sequence, Tuple

from .perceptual import LAB_AB_SCALE, LAB_L_SCALE

# CIE94 graphic-arts application constants
_CIE94_KL = 1.0
_CIE94_K1 = 0.045
_CIE94_K2 = 0.015

_SCALE = 100.0
_POW25_7 = 25.0 ** 7


def euclidean(p: Sequence[float], q: Sequence[float]) -> float:
    return math.sqrt(sum((x - y) ** 2 for x, y in zip(p, q)))


def _cie_units(lab: Sequence[float]) -> Tuple[float, float, float]:
    l, a, b = lab
    return l * LAB_L_SCALE, a * LAB_AB_SCALE, b * LAB_AB_SCALE


def cie76(lab1: Sequence[float], lab2: Sequence[float]) -> float:
    """CIE76 ΔE: Euclidean distance in L*a*b*, returned as ΔE / 100."""
    return euclidean(_cie_units(lab1), _cie_units(lab2)) / _SCALE


def cie94(lab1: Sequence[float], lab2: Sequence[float]) -> float:
    """CIE94 ΔE with kL = 1, K1 = 0.045, K2 = 0.015.

    Parameters
    ----------
    lab1 : Sequence[float]
        Reference colour (its chroma sets SC and SH)
    lab2 : Sequence[float]
        Sample colour

    Returns
    -------
    float
        ΔE94 / 100
    """
    l1, a1, b1 = _cie_units(lab1)
    l2, a2, b2 = _cie_units(lab2)

    delta_l = l1 - l2
    c1 = math.hypot(a1, b1)
    c2 = math.hypot(a2, b2)
    delta_c = c1 - c2

    # ΔH² can come out slightly negative through rounding
    delta_a = a1 - a2
    delta_b = b1 - b2
    delta_h2 = max(0.0, delta_a * delta_a + delta_b * delta_b - delta_c * delta_c)

    sl = 1.0
    sc = 1.0 + _CIE94_K1 * c1
    sh = 1.0 + _CIE94_K2 * c1

    vl = delta_l / (_CIE94_KL * sl)
    vc = delta_c / sc
    return math.sqrt(vl * vl + vc * vc + delta_h2 / (sh * sh)) / _SCALE


def ciede2000(
    lab1: Sequence[float],
    lab2: Sequence[float],
    kl: float = 1.0,
    kc: float = 1.0,
    kh: float = 1.0
) -> float:
    """CIEDE2000 ΔE.

    Parameters
    ----------
    lab1, lab2 : Sequence[float]
        L*a*b* triples on chromakit's stored scale
    kl, kc, kh : float
        Parametric weights for lightness, chroma, hue (default 1.0)

    Returns
    -------
    float
        ΔE00 / 100

    Notes
    -----
    Follows Sharma, Wu & Dalal (2005), including the conventions for a zero
    chroma product (Δh' = 0, mean hue = h1' + h2') and for mean hues that
    straddle 0°. Reproduces their 34 reference pairs to 4 decimals.
    """
    l1, a1, b1 = _cie_units(lab1)
    l2, a2, b2 = _cie_units(lab2)

    # G-factor: rescale a* towards neutral for low-chroma pairs
    c_bar = (math.hypot(a1, b1) + math.hypot(a2, b2)) / 2.0
    c_bar7 = c_bar ** 7
    g = 0.5 * (1.0 - math.sqrt(c_bar7 / (c_bar7 + _POW25_7)))

    a1p = (1.0 + g) * a1
    a2p = (1.0 + g) * a2
    c1p = math.hypot(a1p, b1)
    c2p = math.hypot(a2p, b2)

    h1p = 0.0 if c1p == 0.0 else math.degrees(math.atan2(b1, a1p)) % 360.0
    h2p = 0.0 if c2p == 0.0 else math.degrees(math.atan2(b2, a2p)) % 360.0

    # Differences
    delta_lp = l2 - l1
    delta_cp = c2p - c1p

    chroma_product = c1p * c2p
    if chroma_product == 0.0:
        delta_hp = 0.0
    else:
        delta_hp = h2p - h1p
        if delta_hp > 180.0:
            delta_hp -= 360.0
        elif delta_hp < -180.0:
            delta_hp += 360.0
    delta_big_hp = 2.0 * math.sqrt(chroma_product) * math.sin(math.radians(delta_hp / 2.0))

    # Means
    l_bar_p = (l1 + l2) / 2.0
    c_bar_p = (c1p + c2p) / 2.0

    if chroma_product == 0.0:
        h_bar_p = h1p + h2p
    elif abs(h1p - h2p) <= 180.0:
        h_bar_p = (h1p + h2p) / 2.0
    elif h1p + h2p < 360.0:
        h_bar_p = (h1p + h2p + 360.0) / 2.0
    else:
        h_bar_p = (h1p + h2p - 360.0) / 2.0

    t = (1.0
         - 0.17 * math.cos(math.radians(h_bar_p - 30.0))
         + 0.24 * math.cos(math.radians(2.0 * h_bar_p))
         + 0.32 * math.cos(math.radians(3.0 * h_bar_p + 6.0))
         - 0.20 * math.cos(math.radians(4.0 * h_bar_p - 63.0)))

    # Rotation term
    delta_theta = 30.0 * math.exp(-(((h_bar_p - 275.0) / 25.0) ** 2))
    c_bar_p7 = c_bar_p ** 7
    rc = 2.0 * math.sqrt(c_bar_p7 / (c_bar_p7 + _POW25_7))
    rt = -rc * math.sin(math.radians(2.0 * delta_theta))

    # Compensation weights
    l_mid2 = (l_bar_p - 50.0) ** 2
    sl = 1.0 + 0.015 * l_mid2 / math.sqrt(20.0 + l_mid2)
    sc = 1.0 + 0.045 * c_bar_p
    sh = 1.0 + 0.015 * c_bar_p * t

    vl = delta_lp / (kl * sl)
    vc = delta_cp / (kc * sc)
    vh = delta_big_hp / (kh * sh)
    return math.sqrt(vl * vl + vc * vc + vh * vh + rt * vc * vh) / _SCALE


def riemersma(rgb1: Sequence[float], rgb2: Sequence[float]) -> float:
    """Redmean-weighted Euclidean distance on device RGB.

    Cheap approximation of perceptual distance that needs no colour space
    conversion (Thiadmer Riemersma, "Colour metric").
    """
    r_avg = (rgb1[0] + rgb2[0]) / 2.0
    dr = rgb1[0] - rgb2[0]
    dg = rgb1[1] - rgb2[1]
    db = rgb1[2] - rgb2[2]
    return math.sqrt((2.0 + r_avg) * dr * dr + 4.0 * dg * dg + (3.0 - r_avg) * db * db)
