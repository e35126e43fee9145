"""Command-line front end for chromakit.

Usage:
    python -m chromakit convert "#ff8000" --to lab hcl
    python -m chromakit convert ff8000 --to lab --white D50
    python -m chromakit distance "#ff0000" "#fe0505" --metric ciede2000
    python -m chromakit blend "#1a1a46" "#666666" --model hcl --steps 5

Every colour argument is a hex string (#rgb, #rgba, #rrggbb, #rrggbbaa).
Exit status: 0 on success, 2 on invalid input.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .core import blend as blend_engine
from .core.color import Color
from .core.whitepoint import available_white_points, get_white_point
from .io.hexcodec import InvalidHexFormat, parse_hex, to_hex
from .utils.logging_config import install_excepthook, push_context, setup_logging

logger = logging.getLogger(__name__)

CONVERSIONS = {
    "hex": lambda c, w: to_hex(c),
    "rgb": lambda c, w: tuple(c),
    "rgb255": lambda c, w: c.to_8bit_channels(),
    "linear_rgb": lambda c, w: c.to_linear_rgb(),
    "hsl": lambda c, w: c.to_hsl(),
    "hsv": lambda c, w: c.to_hsv(),
    "xyz": lambda c, w: c.to_xyz(),
    "xyy": lambda c, w: c.to_xyy_white_ref(w),
    "lab": lambda c, w: c.to_lab_white_ref(w),
    "luv": lambda c, w: c.to_luv_white_ref(w),
    "hcl": lambda c, w: c.to_hcl_white_ref(w),
    "luv_lch": lambda c, w: c.to_luv_lch_white_ref(w),
    "oklab": lambda c, w: c.to_oklab(),
    "oklch": lambda c, w: c.to_oklch(),
}

METRICS = {
    "cie76": Color.distance_cie76,
    "cie94": Color.distance_cie94,
    "ciede2000": Color.distance_ciede2000,
    "rgb": Color.distance_rgb,
    "linear_rgb": Color.distance_linear_rgb,
    "riemersma": Color.distance_riemersma,
    "luv": Color.distance_luv,
}


def _format(value) -> str:
    if isinstance(value, str):
        return value
    return " ".join(str(v) if isinstance(v, int) else f"{v:.6f}" for v in value)


def cmd_convert(args: argparse.Namespace) -> None:
    color = parse_hex(args.color)
    white = get_white_point(args.white)
    for model in args.to:
        print(f"{model}: {_format(CONVERSIONS[model](color, white))}")


def cmd_distance(args: argparse.Namespace) -> None:
    c1 = parse_hex(args.color1)
    c2 = parse_hex(args.color2)
    for metric in args.metric:
        print(f"{metric}: {METRICS[metric](c1, c2):.6f}")


def cmd_blend(args: argparse.Namespace) -> None:
    c1 = parse_hex(args.color1)
    c2 = parse_hex(args.color2)
    if args.steps is not None:
        if args.steps < 2:
            raise ValueError(f"--steps must be at least 2, got {args.steps}")
        ts = [i / (args.steps - 1) for i in range(args.steps)]
    else:
        ts = [args.t]
    logger.info("Blending %s → %s in %s (%d samples)", to_hex(c1), to_hex(c2), args.model, len(ts))
    for t in ts:
        print(f"{t:.4f} {to_hex(c1.blend(c2, t, args.model))}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chromakit",
        description="Convert, compare and blend colours",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit log lines as JSON on stderr",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_convert = sub.add_parser("convert", help="Show a colour in other models")
    p_convert.add_argument("color", help="Hex colour")
    p_convert.add_argument(
        "--to",
        nargs="+",
        choices=sorted(CONVERSIONS),
        default=["hex", "rgb", "hsl", "lab"],
        help="Target model(s)",
    )
    p_convert.add_argument(
        "--white",
        type=str,
        default="D65",
        help=f"Reference white for xyY/Lab/Luv/HCL ({', '.join(available_white_points())})",
    )
    p_convert.set_defaults(func=cmd_convert)

    p_distance = sub.add_parser("distance", help="Colour difference of two colours")
    p_distance.add_argument("color1", help="Reference hex colour")
    p_distance.add_argument("color2", help="Sample hex colour")
    p_distance.add_argument(
        "--metric",
        nargs="+",
        choices=sorted(METRICS),
        default=["ciede2000"],
        help="Distance metric(s)",
    )
    p_distance.set_defaults(func=cmd_distance)

    p_blend = sub.add_parser("blend", help="Interpolate between two colours")
    p_blend.add_argument("color1", help="Start hex colour (t = 0)")
    p_blend.add_argument("color2", help="End hex colour (t = 1)")
    p_blend.add_argument(
        "--model",
        type=str,
        default="lab",
        choices=blend_engine.available_models(),
        help="Model to interpolate in",
    )
    p_blend.add_argument("--t", type=float, default=0.5, help="Blend parameter")
    p_blend.add_argument("--steps", type=int, help="Print N evenly spaced samples instead of --t")
    p_blend.set_defaults(func=cmd_blend)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)

    setup_logging(
        log_level=args.log_level,
        json_console=args.json_logs,
        capture_warnings=False,
        context={"app": "chromakit"},
    )
    install_excepthook()
    push_context(command=args.command)

    try:
        args.func(args)
    except (InvalidHexFormat, KeyError, ValueError) as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
