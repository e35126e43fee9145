"""Scalar interpolation primitives shared by the blend engine.

interp_angle always takes the shorter arc of the 360° circle. When the two
angles are exactly antipodal both arcs are equally short; the arc in the
direction of the raw difference a1 - a0 is used (+180 stays +180, -180 stays
-180), which keeps interp_angle(a1, a0, 1 - t) == interp_angle(a0, a1, t).
"""


def normalize_hue(h: float) -> float:
    """Wrap an angle in degrees into [0, 360)."""
    h = h % 360.0
    # A tiny negative input rounds up to exactly 360.0
    if h >= 360.0:
        return 0.0
    return h


def lerp(x0: float, x1: float, t: float) -> float:
    """Linear interpolation; returns x0 exactly at t = 0."""
    return x0 + t * (x1 - x0)


def interp_angle(a0: float, a1: float, t: float) -> float:
    """Interpolate between two angles along the shorter arc.

    Parameters
    ----------
    a0, a1 : float
        Angles in degrees (any range)
    t : float
        Interpolation parameter, 0 → a0 and 1 → a1

    Returns
    -------
    float
        Angle in degrees in [0, 360)

    Examples
    --------
    >>> interp_angle(0.0, 90.0, 0.25)
    22.5
    >>> interp_angle(0.0, 270.0, 0.25)   # backwards through 0
    337.5
    """
    delta = (a1 - a0) % 360.0
    if delta > 180.0:
        delta -= 360.0
    elif delta == 180.0 and a1 < a0:
        delta = -180.0
    return normalize_hue(a0 + delta * t)
