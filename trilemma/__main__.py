"""Command line: print a layout as JSON, render it to SVG, or ask for an analysis.

    python -m trilemma layout --radius 120 --separation 100
    python -m trilemma svg --radius 130 --separation 230 -o triangle.svg
    python -m trilemma analyze "Renovating a historic house"
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from trilemma.engine.layout import InvalidGeometryError, compute_layout
from trilemma.engine.overlap import overlap_report
from trilemma.models.responses import LayoutResponse
from trilemma.svg.render import render_layout_svg


def _add_geometry_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--radius", type=float, default=130.0, help="Circle radius")
    parser.add_argument("--separation", type=float, default=230.0, help="Triangle edge length")
    parser.add_argument("--rotation", type=float, default=0.0, help="Rotation in degrees")


def _cmd_layout(args: argparse.Namespace) -> int:
    layout = compute_layout(args.radius, args.separation, args.rotation)
    overlap = overlap_report(layout) if args.overlap else None
    out = LayoutResponse.from_layout(layout, overlap).model_dump()
    print(json.dumps(out, indent=2, ensure_ascii=False))
    return 0


def _cmd_svg(args: argparse.Namespace) -> int:
    svg = render_layout_svg(compute_layout(args.radius, args.separation, args.rotation))
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(svg)
        print(f"Wrote {args.output}")
    else:
        print(svg)
    return 0


def _cmd_analyze(args: argparse.Namespace) -> int:
    from trilemma.engine.analysis import AnalysisStatus
    from trilemma.engine.shell import InteractionShell
    from trilemma.llm.client import AnthropicTextGenerator

    async def _run() -> int:
        shell = InteractionShell(generator=AnthropicTextGenerator())
        shell.submit_analysis(args.context)
        state = await shell.wait_for_analysis()
        print(state.result_text)
        return 0 if state.status is AnalysisStatus.SUCCESS else 1

    return asyncio.run(_run())


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="trilemma", description="The Impossible Triangle")
    sub = parser.add_subparsers(dest="command", required=True)

    p_layout = sub.add_parser("layout", help="Print circle centers and classification as JSON")
    _add_geometry_args(p_layout)
    p_layout.add_argument("--overlap", action="store_true", help="Include exact overlap areas")
    p_layout.set_defaults(func=_cmd_layout)

    p_svg = sub.add_parser("svg", help="Render the visualization to SVG")
    _add_geometry_args(p_svg)
    p_svg.add_argument("-o", "--output", help="Output file (default: stdout)")
    p_svg.set_defaults(func=_cmd_svg)

    p_analyze = sub.add_parser("analyze", help="Ask the LLM for a trade-off analysis")
    p_analyze.add_argument("context", help="Project context, e.g. 'Developing a mobile game'")
    p_analyze.set_defaults(func=_cmd_analyze)

    args = parser.parse_args(argv)
    try:
        return args.func(args)
    except InvalidGeometryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
