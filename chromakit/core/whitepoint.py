"""Reference white points.

A WhitePoint is an immutable named XYZ triple (Y = 1). Every perceptual
conversion takes one explicitly; the ``D65`` and ``D50`` constants are the
fixed values the convenience entry points use. Further illuminants come
from the packaged table (configs/illuminants.v1.yaml) via get_white_point.
"""

import functools
import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..utils import validators

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WhitePoint:
    """Reference white as tristimulus values.

    Attributes
    ----------
    name : str
        Identifier, e.g. "D65"
    x, y, z : float
        Tristimulus values normalised to y = 1
    """

    name: str
    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    @property
    def chromaticity(self) -> Tuple[float, float]:
        """CIE 1931 (x, y) chromaticity of this white."""
        total = self.x + self.y + self.z
        return self.x / total, self.y / total

    @classmethod
    def from_chromaticity(cls, name: str, x: float, y: float) -> 'WhitePoint':
        """Build a white point from its (x, y) chromaticity with Y = 1.

        Raises
        ------
        ValueError
            If y is not positive
        """
        if y <= 0.0:
            raise ValueError(f"Chromaticity y must be positive, got {y}")
        return cls(name, x / y, 1.0, (1.0 - x - y) / y)


D65 = WhitePoint("D65", 0.95047, 1.00000, 1.08883)
D50 = WhitePoint("D50", 0.96422, 1.00000, 0.82521)


@functools.lru_cache(maxsize=1)
def _packaged_table() -> validators.IlluminantsV1:
    return validators.load_illuminants()


def get_white_point(name: str) -> WhitePoint:
    """Resolve a named white point from the packaged illuminant table.

    Parameters
    ----------
    name : str
        Illuminant name, case-insensitive ("d50", "D65", "F11", ...)

    Returns
    -------
    WhitePoint

    Raises
    ------
    KeyError
        If the name is unknown (message lists the known names)
    """
    spec = _packaged_table().get(name)
    return WhitePoint(spec.name, *spec.xyz)


def available_white_points() -> List[str]:
    """Names of the illuminants in the packaged table."""
    return _packaged_table().names
