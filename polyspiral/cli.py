"""
Command-line layout — prints the segments of one spiral.

Usage:
  python -m polyspiral "some text" --sides 6 --size 300 --font-size 20 --spacing 10
  python -m polyspiral "some text" --sides 4 --json        # machine-readable output
  python -m polyspiral - --sides 5 < essay.txt             # text from stdin
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from polyspiral.engine import EngineConfig, LayoutError, SpiralConfig, SpiralLayout, layout


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polyspiral",
        description="Lay text out along the inward spiral of a regular polygon",
    )
    parser.add_argument("text", help="Text to lay out, or - to read stdin")
    parser.add_argument("-n", "--sides", type=int, default=6, help="Polygon side count (>= 3)")
    parser.add_argument("-s", "--size", type=float, default=300.0, help="Bounding box edge")
    parser.add_argument("-f", "--font-size", type=float, default=20.0, help="Font size")
    parser.add_argument("-p", "--spacing", type=float, default=10.0, help="Gap between laps")
    parser.add_argument("--max-segments", type=int, default=None, help="Fail past this many sides")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log engine progress")
    return parser


def layout_to_dict(result: SpiralLayout) -> dict:
    return {
        "shape": {
            "sides": result.shape.sides,
            "side_length": result.shape.side_length,
            "height": result.shape.height,
            "rotation_degrees": result.shape.rotation_degrees,
        },
        "contraction": {"inset": result.contraction.inset, "outset": result.contraction.outset},
        "total_size": result.total_size,
        "offset_top": result.offset_top,
        "offset_left": result.offset_left,
        "segments": [
            {
                "side": s.side,
                "width": s.width,
                "text": s.text,
                "padding": s.padding,
                "continues": s.continues,
            }
            for s in result.segments
        ],
    }


def format_table(result: SpiralLayout) -> str:
    lines = [
        f"{result.shape.sides}-gon  side={result.shape.side_length:.2f}  "
        f"inset={result.contraction.inset:.2f}  outset={result.contraction.outset:.2f}",
        f"{'side':>5}  {'width':>9}  text",
    ]
    for s in result.segments:
        marker = "-" if s.continues else ""
        lines.append(f"{s.side:>5}  {s.width:>9.2f}  {s.text}{marker}")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    text = sys.stdin.read() if args.text == "-" else args.text
    config = SpiralConfig(
        size=args.size,
        font_size=args.font_size,
        sides=args.sides,
        spacing=args.spacing,
        text=text,
    )

    try:
        result = layout(config, EngineConfig(max_segments=args.max_segments))
    except LayoutError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(layout_to_dict(result), indent=2))
    else:
        print(format_table(result))
    return 0
