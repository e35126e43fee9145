"""sRGB transfer function: device RGB ↔ linear-light RGB.

Provides:
    - to_linear / to_gamma: exact piecewise sRGB transfer (per channel)
    - linearize / delinearize: the same, applied to a whole RGB triple
    - linearize_fast / delinearize_fast: polynomial approximations
    - linearize_fast_rgb / delinearize_fast_rgb: whole-triple fast forms

The fast forms exist purely for speed. Their contract, checked by the test
suite on every 8-bit channel value: the sum over the three channels of
|exact - fast| never exceeds 6/255.
"""

from typing import Iterable

from .triples import LinearRgb, Rgb

# Exact sRGB breakpoints
_LINEAR_THRESHOLD = 0.04045
_GAMMA_THRESHOLD = 0.0031308

# Allowed total (summed over channels) deviation of the fast forms
FAST_TOLERANCE = 6.0 / 255.0


def to_linear(v: float) -> float:
    """Convert one sRGB-encoded channel to linear light.

    Parameters
    ----------
    v : float
        Gamma-encoded channel, nominally [0, 1]

    Returns
    -------
    float
        Linear-light channel value

    Notes
    -----
    Exact sRGB transfer (not the gamma 2.2 approximation):
        - Linear region for small values: v / 12.92
        - Power region: ((v + 0.055) / 1.055)^2.4
    """
    if v <= _LINEAR_THRESHOLD:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def to_gamma(u: float) -> float:
    """Convert one linear-light channel to sRGB encoding.

    Inverse of to_linear:
        - Linear region: 12.92 * u
        - Power region: 1.055 * u^(1/2.4) - 0.055
    """
    if u <= _GAMMA_THRESHOLD:
        return 12.92 * u
    return 1.055 * u ** (1.0 / 2.4) - 0.055


def linearize(rgb: Iterable[float]) -> LinearRgb:
    """Linearize a device RGB triple (exact)."""
    r, g, b = rgb
    return LinearRgb(to_linear(r), to_linear(g), to_linear(b))


def delinearize(rgb: Iterable[float]) -> Rgb:
    """Gamma-encode a linear RGB triple (exact)."""
    r, g, b = rgb
    return Rgb(to_gamma(r), to_gamma(g), to_gamma(b))


# ============================================================================
# FAST APPROXIMATIONS
# ============================================================================

def linearize_fast(v: float) -> float:
    """Polynomial approximation of to_linear.

    Fourth-degree fit centred at 0.5, valid on [0, 1]. The largest error is
    at the black end (about 0.0033).
    """
    v1 = v - 0.5
    v2 = v1 * v1
    v3 = v2 * v1
    v4 = v2 * v2
    return (-0.248750514614486 + 0.925583310193438 * v + 1.16740237321695 * v2
            + 0.280457026598666 * v3 - 0.0757991963780179 * v4)


def delinearize_fast(v: float) -> float:
    """Polynomial approximation of to_gamma.

    The fractional root is much harder to fit than the power, so the domain
    is split at 0.03 and 0.2, each piece a fifth-degree polynomial.
    """
    if v > 0.2:
        v1 = v - 0.6
        v2 = v1 * v1
        v3 = v2 * v1
        v4 = v2 * v2
        v5 = v3 * v2
        return (0.442430344268235 + 0.592178981271708 * v - 0.287864782562636 * v2
                + 0.253214392068985 * v3 - 0.272557158129811 * v4 + 0.325554383321718 * v5)
    elif v > 0.03:
        v1 = v - 0.115
        v2 = v1 * v1
        v3 = v2 * v1
        v4 = v2 * v2
        v5 = v3 * v2
        return (0.194915592891669 + 1.55227076330229 * v - 3.93691860257828 * v2
                + 18.0679839248761 * v3 - 101.468750302746 * v4 + 632.341487393927 * v5)
    else:
        v1 = v - 0.015
        v2 = v1 * v1
        v3 = v2 * v1
        v4 = v2 * v2
        v5 = v3 * v2
        # Low end is strongly nonlinear
        return (0.0519565234928877 + 5.09316778537561 * v - 99.0338180489702 * v2
                + 3484.52322764895 * v3 - 150028.083412663 * v4 + 7168008.42971613 * v5)


def linearize_fast_rgb(rgb: Iterable[float]) -> LinearRgb:
    """Linearize a device RGB triple with the polynomial approximation."""
    r, g, b = rgb
    return LinearRgb(linearize_fast(r), linearize_fast(g), linearize_fast(b))


def delinearize_fast_rgb(rgb: Iterable[float]) -> Rgb:
    """Gamma-encode a linear RGB triple with the polynomial approximation."""
    r, g, b = rgb
    return Rgb(delinearize_fast(r), delinearize_fast(g), delinearize_fast(b))
