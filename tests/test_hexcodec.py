"""Test hex colour parsing and formatting.

Tests for chromakit.io.hexcodec:
    - parse_hex / to_hex on the reference colours
    - Short forms (#rgb), upper case, missing '#'
    - Alpha forms (#rgba, #rrggbbaa)
    - Rejection of malformed strings with InvalidHexFormat
    - HexColor pydantic field type

Run:
    pytest tests/test_hexcodec.py -v
"""

import pytest
from pydantic import BaseModel, ValidationError

from chromakit import Color, InvalidHexFormat, parse_hex, to_hex
from chromakit.io.hexcodec import HexColor, parse_hex_alpha, to_hex_alpha

from reference_colors import REFERENCE, SHORT_HEX, ref_id


class Swatch(BaseModel):
    name: str
    color: HexColor


@pytest.mark.parametrize("ref", REFERENCE, ids=ref_id)
def test_to_hex(ref):
    assert to_hex(Color(*ref.rgb)) == ref.hex


@pytest.mark.parametrize("ref", REFERENCE, ids=ref_id)
def test_parse_hex(ref):
    c = parse_hex(ref.hex)
    # 0.5 is written as 0x80 = 128/255
    assert tuple(c) == pytest.approx(ref.rgb, abs=1.0 / 255.0)
    assert to_hex(c) == ref.hex


@pytest.mark.parametrize("rgb,hex_str", SHORT_HEX)
def test_parse_short_hex(rgb, hex_str):
    assert tuple(parse_hex(hex_str)) == pytest.approx(rgb)


def test_parse_is_case_insensitive_and_hash_optional():
    assert parse_hex("#FF8000") == parse_hex("ff8000")
    assert parse_hex("F80") == parse_hex("#f80")
    assert parse_hex("  #ff8000 ") == parse_hex("#ff8000")


def test_parse_alpha_forms():
    c, alpha = parse_hex_alpha("#ff000080")
    assert c == Color(1.0, 0.0, 0.0)
    assert alpha == pytest.approx(128.0 / 255.0)

    c, alpha = parse_hex_alpha("#f008")
    assert c == Color(1.0, 0.0, 0.0)
    assert alpha == pytest.approx(8.0 / 15.0)

    _, alpha = parse_hex_alpha("#123456")
    assert alpha == 1.0
    assert parse_hex("#ff000080") == Color(1.0, 0.0, 0.0)


def test_to_hex_alpha():
    assert to_hex_alpha(Color(1.0, 0.0, 0.0), 0.5) == "#ff000080"
    assert to_hex_alpha(Color(0.0, 0.0, 0.0), 1.0) == "#000000ff"


def test_to_hex_clamps():
    assert to_hex(Color(1.2, -0.3, 0.5)) == "#ff0080"


@pytest.mark.parametrize("bad", ["", "#", "#12", "#12345", "#1234567", "#123456789",
                                 "#ggg", "12 345", "##123456", "#12345z"])
def test_invalid_hex(bad):
    with pytest.raises(InvalidHexFormat):
        parse_hex(bad)


def test_invalid_hex_is_value_error():
    with pytest.raises(ValueError, match="Invalid hex colour"):
        parse_hex("#xyz")


def test_non_string_rejected():
    with pytest.raises(InvalidHexFormat, match="must be a string"):
        parse_hex(0xFF0000)


# ============================================================================
# PYDANTIC FIELD
# ============================================================================

def test_hex_color_field_parses_and_serialises():
    swatch = Swatch(name="brand", color="#FF8000")
    assert isinstance(swatch.color, Color)
    assert swatch.color == parse_hex("#ff8000")
    assert swatch.model_dump() == {"name": "brand", "color": "#ff8000"}
    assert '"#ff8000"' in swatch.model_dump_json()


def test_hex_color_field_accepts_color():
    swatch = Swatch(name="red", color=Color(1.0, 0.0, 0.0))
    assert swatch.color == Color(1.0, 0.0, 0.0)


def test_hex_color_field_rejects_bad_string():
    with pytest.raises(ValidationError):
        Swatch(name="bad", color="#12")
