"""Pillow pixel values ↔ Color.

Supported modes:
    RGB       (r, g, b) 8-bit
    RGBA      (r, g, b, a) 8-bit, straight alpha
    RGBa      (r, g, b, a) 8-bit, premultiplied alpha
    L         gray 8-bit (int)
    LA        (gray, a) 8-bit, straight alpha
    I;16      gray 16-bit (int)
    RGBA;16   (r, g, b, a) 16-bit, straight alpha (plain tuples, no Pillow mode)

from_pixel returns (Color, ok). ok is False when alpha is 0: the colour is
then indeterminate and black is returned. This is a warning flag, not an
error. Single-channel modes receive the ITU-R 601-2 luma of the colour,
matching Image.convert("L").
"""

import logging
from typing import Tuple, Union

from PIL import Image

from ..core.color import Color

logger = logging.getLogger(__name__)

PixelValue = Union[int, Tuple[int, ...]]

# mode → (channel maximum, has alpha, premultiplied, gray)
_MODES = {
    "RGB": (255, False, False, False),
    "RGBA": (255, True, False, False),
    "RGBa": (255, True, True, False),
    "L": (255, False, False, True),
    "LA": (255, True, False, True),
    "I;16": (65535, False, False, True),
    "RGBA;16": (65535, True, False, False),
}

_BLACK = Color(0.0, 0.0, 0.0)


def _mode_info(mode: str):
    try:
        return _MODES[mode]
    except KeyError:
        raise ValueError(
            f"Unsupported pixel mode: {mode!r}. Use one of {', '.join(_MODES)}"
        ) from None


def supported_modes():
    return list(_MODES)


def from_pixel(value: PixelValue, mode: str) -> Tuple[Color, bool]:
    """Translate a pixel value into a normalised Color.

    Parameters
    ----------
    value : int or tuple of int
        Pixel as returned by Image.getpixel for ``mode``
    mode : str
        One of supported_modes()

    Returns
    -------
    color : Color
        Straight (un-premultiplied) colour in [0, 1]
    ok : bool
        False if alpha was 0 (colour unrecoverable, black returned)

    Raises
    ------
    ValueError
        If the mode is unsupported or the value has the wrong arity
    """
    maximum, has_alpha, premultiplied, gray = _mode_info(mode)
    channels = (value,) if isinstance(value, int) else tuple(value)

    expected = (1 if gray else 3) + (1 if has_alpha else 0)
    if len(channels) != expected:
        raise ValueError(f"Mode {mode} expects {expected} channels, got {len(channels)}: {value!r}")

    alpha = channels[-1] if has_alpha else maximum
    if alpha == 0:
        logger.debug("Fully transparent %s pixel %r, colour unrecoverable", mode, value)
        return _BLACK, False

    colour = channels[:-1] if has_alpha else channels
    if gray:
        colour = colour * 3
    if premultiplied:
        # c_premul / alpha, both in the same integer scale
        rgb = [c / alpha for c in colour]
    else:
        rgb = [c / maximum for c in colour]
    return Color(*rgb), True


def _to_int(c: float, maximum: int) -> int:
    return int(min(1.0, max(0.0, c)) * maximum + 0.5)


def to_pixel(color: Color, mode: str, alpha: float = 1.0) -> PixelValue:
    """Translate a Color into a pixel value for ``mode``.

    Channels are clamped to [0, 1]. For RGBa the colour is premultiplied
    by alpha; alpha is ignored by modes without an alpha channel.
    """
    maximum, has_alpha, premultiplied, gray = _mode_info(mode)
    color = color.clamped()

    if gray:
        luma = color.r * 299.0 / 1000.0 + color.g * 587.0 / 1000.0 + color.b * 114.0 / 1000.0
        channels = [_to_int(luma, maximum)]
    elif premultiplied:
        channels = [_to_int(c * alpha, maximum) for c in color]
    else:
        channels = [_to_int(c, maximum) for c in color]

    if has_alpha:
        channels.append(_to_int(alpha, maximum))
    if len(channels) == 1:
        return channels[0]
    return tuple(channels)


def color_at(image: Image.Image, xy: Tuple[int, int]) -> Tuple[Color, bool]:
    """Read one pixel of a Pillow image as (Color, ok)."""
    return from_pixel(image.getpixel(xy), image.mode)


def solid_image(color: Color, size: Tuple[int, int], mode: str = "RGB",
                alpha: float = 1.0) -> Image.Image:
    """Create a Pillow image filled with ``color``.

    Raises
    ------
    ValueError
        If ``mode`` is not a Pillow image mode supported here
    """
    if mode == "RGBA;16":
        raise ValueError("RGBA;16 is a tuple format, not a Pillow image mode")
    return Image.new(mode, size, to_pixel(color, mode, alpha))
