"""Test the chromakit command-line front end.

Tests for chromakit.__main__:
    - convert / distance / blend print the expected lines, exit 0
    - Invalid hex, unknown white point and bad --steps exit 2 with "error:"
    - argparse rejects unknown models
    - main installs the uncaught-exception logger

Run:
    pytest tests/test_cli.py -v
"""

import sys

import pytest

from chromakit.__main__ import main
from chromakit.utils import logging_config


@pytest.fixture(autouse=True)
def reset_logging():
    yield
    logging_config.pop_context()
    logging_config.setup_logging(log_level="WARNING", to_stderr=False, capture_warnings=False)


def test_convert(capsys):
    assert main(["convert", "#FF0000", "--to", "hex", "rgb255", "hsv", "lab"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "hex: #ff0000"
    assert lines[1] == "rgb255: 255 0 0"
    assert lines[2] == "hsv: 0.000000 1.000000 1.000000"
    assert lines[3].startswith("lab: 0.532")


def test_convert_white_point(capsys):
    assert main(["convert", "fff", "--to", "lab", "--white", "d50"]) == 0
    out = capsys.readouterr().out
    # White under a D50 reference is no longer neutral
    l, a, b = (float(v) for v in out.split(":")[1].split())
    assert l == pytest.approx(1.0, abs=1e-3)
    assert b < -0.1


def test_distance(capsys):
    assert main(["distance", "#336699", "#336699", "--metric", "cie76", "ciede2000"]) == 0
    assert capsys.readouterr().out.splitlines() == ["cie76: 0.000000", "ciede2000: 0.000000"]


def test_blend_steps(capsys):
    assert main(["blend", "#1a1a46", "#666666", "--model", "hcl", "--steps", "3"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0] == "0.0000 #1a1a46"
    assert lines[2] == "1.0000 #666666"


def test_blend_single_t(capsys):
    assert main(["blend", "#000000", "#ffffff", "--model", "rgb", "--t", "0.5"]) == 0
    assert capsys.readouterr().out.strip() == "0.5000 #808080"


def test_invalid_hex(capsys):
    assert main(["convert", "#12"]) == 2
    assert "error: Invalid hex colour" in capsys.readouterr().err


def test_unknown_white_point(capsys):
    assert main(["convert", "#123456", "--white", "D93"]) == 2
    assert "Unknown illuminant" in capsys.readouterr().err


def test_bad_steps(capsys):
    assert main(["blend", "#000", "#fff", "--steps", "1"]) == 2
    assert "--steps must be at least 2" in capsys.readouterr().err


def test_unknown_model_rejected_by_parser():
    with pytest.raises(SystemExit) as exc:
        main(["blend", "#000", "#fff", "--model", "cmyk"])
    assert exc.value.code == 2


def test_main_installs_excepthook(monkeypatch, capsys):
    monkeypatch.setattr(sys, "excepthook", sys.__excepthook__)
    assert main(["convert", "#000"]) == 0
    assert sys.excepthook is not sys.__excepthook__
