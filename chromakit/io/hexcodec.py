"""Hexadecimal colour strings ↔ Color.

Accepted forms (case-insensitive, leading '#' optional):
    rgb, rgba          one digit per channel, d expands to d/15
    rrggbb, rrggbbaa   two digits per channel, dd maps to dd/255

Output is always lower-case "#rrggbb" (or "#rrggbbaa").

HexColor is an annotated type for pydantic models: it accepts a hex string
(or an existing Color) and serialises back to "#rrggbb".
"""

import logging
import re
from typing import Annotated, Tuple

from pydantic import BeforeValidator, PlainSerializer

from ..core.color import Color

logger = logging.getLogger(__name__)

_HEX_RE = re.compile(r'^#?([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$')


class InvalidHexFormat(ValueError):
    """String is not a 3, 4, 6 or 8 digit hex colour."""


def _digits(value: str) -> str:
    if not isinstance(value, str):
        raise InvalidHexFormat(f"Hex colour must be a string, got {type(value).__name__}")
    match = _HEX_RE.match(value.strip())
    if match is None:
        logger.debug("Rejected hex colour %r", value)
        raise InvalidHexFormat(
            f"Invalid hex colour {value!r}: expected #rgb, #rgba, #rrggbb or #rrggbbaa"
        )
    return match.group(1).lower()


def parse_hex_alpha(value: str) -> Tuple[Color, float]:
    """Parse a hex string into a colour and an alpha in [0, 1].

    Forms without an alpha digit report alpha 1.0. The colour channels are
    taken as written (straight, not premultiplied, alpha).

    Raises
    ------
    InvalidHexFormat
        If the length or alphabet matches no accepted form
    """
    digits = _digits(value)
    if len(digits) <= 4:
        channels = [int(d, 16) / 15.0 for d in digits]
    else:
        channels = [int(digits[i:i + 2], 16) / 255.0 for i in range(0, len(digits), 2)]
    alpha = channels[3] if len(channels) == 4 else 1.0
    return Color(*channels[:3]), alpha


def parse_hex(value: str) -> Color:
    """Parse a hex string into a Color, discarding any alpha digits."""
    return parse_hex_alpha(value)[0]


def _byte(c: float) -> int:
    return int(min(1.0, max(0.0, c)) * 255.0 + 0.5)


def to_hex(color: Color) -> str:
    """Format as "#rrggbb". Out-of-gamut channels are clamped."""
    return "#%02x%02x%02x" % tuple(_byte(c) for c in color)


def to_hex_alpha(color: Color, alpha: float) -> str:
    """Format as "#rrggbbaa"."""
    return to_hex(color) + "%02x" % _byte(alpha)


def _coerce(value):
    if isinstance(value, Color):
        return value
    return parse_hex(value)


HexColor = Annotated[
    Color,
    BeforeValidator(_coerce),
    PlainSerializer(to_hex, return_type=str),
]
