"""Blend engine: interpolate two RGB colours inside a chosen model.

Each model is registered as a ModelSpec (forward RGB → triple, inverse
triple → RGB, triple type). Components are interpolated linearly, except
the triple type's ``hue_field`` which goes through interp_angle. When one
endpoint is achromatic (its ``chroma_field`` is below the triple's
``grey_chroma``, where the converter already reported hue 0) its hue is
meaningless, so the other endpoint's hue is used for both.

Endpoint contract: t = 0 reproduces the first colour and t = 1 the second,
up to the round-trip precision of the model's own conversions.

Usage:
    from chromakit.core import blend

    rgb = blend.interpolate((1, 0, 0), (0, 0, 1), 0.5, "hcl")
"""

import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Tuple

from .cylindrical import hsl_to_rgb, hsv_to_rgb, rgb_to_hsl, rgb_to_hsv
from .interp import interp_angle, lerp
from .oklab import linear_rgb_to_oklab, oklab_to_linear_rgb, oklab_to_oklch, oklch_to_oklab
from .perceptual import (
    hcl_to_lab,
    lab_to_hcl,
    lab_to_xyz,
    luv_lch_to_luv,
    luv_to_luv_lch,
    luv_to_xyz,
    xyz_to_lab,
    xyz_to_luv,
)
from .transfer import delinearize, linearize
from .triples import Hcl, Hsl, Hsv, Lab, LinearRgb, Luv, LuvLCh, OkLab, OkLch, Rgb
from .tristimulus import rgb_to_xyz, xyz_to_rgb


@dataclass(frozen=True)
class ModelSpec:
    """A colour model the blend engine can interpolate in."""

    name: str
    forward: Callable[[Iterable[float]], Tuple[float, float, float]]
    inverse: Callable[..., Rgb]
    triple: type


def _rgb(rgb):
    return Rgb(*rgb)


def _lab(rgb):
    return xyz_to_lab(*rgb_to_xyz(rgb))


def _lab_inv(l, a, b):
    return xyz_to_rgb(*lab_to_xyz(l, a, b))


def _luv(rgb):
    return xyz_to_luv(*rgb_to_xyz(rgb))


def _luv_inv(l, u, v):
    return xyz_to_rgb(*luv_to_xyz(l, u, v))


def _oklab(rgb):
    return linear_rgb_to_oklab(*linearize(rgb))


def _oklab_inv(l, a, b):
    return delinearize(oklab_to_linear_rgb(l, a, b))


MODELS: Dict[str, ModelSpec] = {spec.name: spec for spec in (
    ModelSpec("rgb", _rgb, Rgb, Rgb),
    ModelSpec("linear_rgb", linearize, lambda r, g, b: delinearize((r, g, b)), LinearRgb),
    ModelSpec("hsv", rgb_to_hsv, hsv_to_rgb, Hsv),
    ModelSpec("hsl", rgb_to_hsl, hsl_to_rgb, Hsl),
    ModelSpec("lab", _lab, _lab_inv, Lab),
    ModelSpec("luv", _luv, _luv_inv, Luv),
    ModelSpec("hcl", lambda rgb: lab_to_hcl(*_lab(rgb)),
              lambda h, c, l: _lab_inv(*hcl_to_lab(h, c, l)), Hcl),
    ModelSpec("luv_lch", lambda rgb: luv_to_luv_lch(*_luv(rgb)),
              lambda l, c, h: _luv_inv(*luv_lch_to_luv(l, c, h)), LuvLCh),
    ModelSpec("oklab", _oklab, _oklab_inv, OkLab),
    ModelSpec("oklch", lambda rgb: oklab_to_oklch(*_oklab(rgb)),
              lambda l, c, h: _oklab_inv(*oklch_to_oklab(l, c, h)), OkLch),
)}


def available_models() -> List[str]:
    return list(MODELS)


def get_model(name: str) -> ModelSpec:
    """Look up a blend model by name (case-insensitive, '-' and '_' equivalent).

    Raises
    ------
    ValueError
        If the model is unknown
    """
    key = name.strip().lower().replace("-", "_")
    try:
        return MODELS[key]
    except KeyError:
        raise ValueError(
            f"Unknown blend model: {name!r}. Available: {', '.join(MODELS)}"
        ) from None


def _is_grey(chroma: float, threshold: float) -> bool:
    return chroma == 0.0 or abs(chroma) < threshold


def interpolate_triples(p: Tuple, q: Tuple, t: float, triple: type) -> Tuple:
    """Interpolate two triples of the same model component-wise.

    Parameters
    ----------
    p, q : tuple
        Endpoints, instances of ``triple``
    t : float
        0 → p, 1 → q
    triple : type
        Triple type; its hue_field / chroma_field / grey_chroma tags select
        angular interpolation and the achromatic hue fallback

    Returns
    -------
    tuple
        Instance of ``triple``
    """
    p = list(p)
    q = list(q)
    hue_idx = None
    if triple.hue_field is not None:
        hue_idx = triple._fields.index(triple.hue_field)
        chroma_idx = triple._fields.index(triple.chroma_field)
        p_grey = _is_grey(p[chroma_idx], triple.grey_chroma)
        q_grey = _is_grey(q[chroma_idx], triple.grey_chroma)
        if p_grey and not q_grey:
            p[hue_idx] = q[hue_idx]
        elif q_grey and not p_grey:
            q[hue_idx] = p[hue_idx]

    out = []
    for i, (x0, x1) in enumerate(zip(p, q)):
        if i == hue_idx:
            out.append(interp_angle(x0, x1, t))
        else:
            out.append(lerp(x0, x1, t))
    return triple(*out)


def interpolate(c1: Iterable[float], c2: Iterable[float], t: float, model: str = "lab") -> Rgb:
    """Blend two device RGB colours inside ``model``.

    Parameters
    ----------
    c1, c2 : Iterable[float]
        Device RGB triples
    t : float
        Interpolation parameter; values outside [0, 1] extrapolate
    model : str
        One of available_models()

    Returns
    -------
    Rgb
        Blended colour, not clamped

    Raises
    ------
    ValueError
        If t is not finite or the model is unknown
    """
    if not math.isfinite(t):
        raise ValueError(f"Blend parameter t must be finite, got {t}")
    spec = get_model(model)
    mixed = interpolate_triples(spec.forward(c1), spec.forward(c2), t, spec.triple)
    return Rgb(*spec.inverse(*mixed))
