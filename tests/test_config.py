"""Test YAML config loading and the illuminant table schema.

Tests for chromakit.utils.fs and chromakit.utils.validators:
    - Packaged illuminants.v1.yaml loads and validates
    - Custom tables from disk
    - Schema errors: duplicate names, missing default, Y != 1, wrong schema
    - Missing files, non-mapping documents, malformed YAML
    - get_white_point resolves names case-insensitively

Run:
    pytest tests/test_config.py -v
"""

import pytest
import yaml

from chromakit.core.whitepoint import D50, D65, WhitePoint, available_white_points, get_white_point
from chromakit.utils import fs, validators


def _write(path, text):
    path.write_text(text, encoding="utf-8")
    return path


CUSTOM = """\
schema: illuminants.v1
default: studio
illuminants:
  - name: studio
    description: Bench lamp, measured
    xyz: [0.97, 1.0, 0.92]
  - name: D65
    xyz: [0.95047, 1.0, 1.08883]
"""


# ============================================================================
# PACKAGED TABLE
# ============================================================================

def test_packaged_table():
    table = validators.load_illuminants()
    assert table.schema_version == "illuminants.v1"
    assert table.default == "D65"
    for name in ("A", "C", "D50", "D55", "D65", "D75", "E", "F2", "F7", "F11"):
        assert name in table.names


def test_packaged_table_lookup_is_case_insensitive():
    table = validators.load_illuminants()
    assert table.get("d50").xyz == pytest.approx((0.96422, 1.0, 0.82521))


def test_get_white_point():
    assert get_white_point("D65") == D65
    assert get_white_point("d50") == D50
    e = get_white_point("E")
    assert isinstance(e, WhitePoint)
    assert tuple(e) == pytest.approx((1.0, 1.0, 1.0))
    assert "F11" in available_white_points()


def test_get_white_point_unknown():
    with pytest.raises(KeyError, match="Unknown illuminant"):
        get_white_point("D93")


# ============================================================================
# CUSTOM TABLES
# ============================================================================

def test_custom_table(tmp_path):
    table = validators.load_illuminants(_write(tmp_path / "ill.yaml", CUSTOM))
    assert table.default == "studio"
    assert table.get("STUDIO").description == "Bench lamp, measured"
    assert table.get("studio").xyz == (0.97, 1.0, 0.92)


def test_custom_table_accepts_str_path(tmp_path):
    path = _write(tmp_path / "ill.yaml", CUSTOM)
    assert validators.load_illuminants(str(path)).names == ["studio", "D65"]


@pytest.mark.parametrize("text,fragment", [
    (CUSTOM.replace("name: D65", "name: Studio"), "Duplicate"),
    (CUSTOM.replace("default: studio", "default: D50"), "not defined"),
    (CUSTOM.replace("[0.97, 1.0, 0.92]", "[0.97, 0.9, 0.92]"), "Y=1"),
    (CUSTOM.replace("[0.97, 1.0, 0.92]", "[-0.97, 1.0, 0.92]"), "positive"),
    (CUSTOM.replace("illuminants.v1", "illuminants.v2"), "Unsupported schema"),
    ("schema: illuminants.v1\nilluminants: []\n", "validation failed"),
])
def test_invalid_tables(tmp_path, text, fragment):
    path = _write(tmp_path / "bad.yaml", text)
    with pytest.raises(ValueError, match=fragment):
        validators.load_illuminants(path)


def test_missing_table(tmp_path):
    with pytest.raises(FileNotFoundError, match="Illuminants config not found"):
        validators.load_illuminants(tmp_path / "nope.yaml")


# ============================================================================
# YAML HELPERS
# ============================================================================

def test_load_yaml(tmp_path):
    data = fs.load_yaml(_write(tmp_path / "a.yaml", "a: 1\nb: [1, 2]\n"))
    assert data == {"a": 1, "b": [1, 2]}


def test_load_yaml_rejects_non_mapping(tmp_path):
    with pytest.raises(ValueError, match="Expected a mapping"):
        fs.load_yaml(_write(tmp_path / "list.yaml", "- 1\n- 2\n"))


def test_load_yaml_malformed(tmp_path):
    with pytest.raises(yaml.YAMLError):
        fs.load_yaml(_write(tmp_path / "broken.yaml", "a: [1, 2\n"))


def test_load_yaml_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        fs.load_yaml(tmp_path / "missing.yaml")


def test_packaged_config_path():
    assert fs.packaged_config("illuminants.v1.yaml").exists()
