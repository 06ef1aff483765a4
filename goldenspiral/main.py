"""Command-line entry point: compute a frame, print it, optionally write SVG/PNG/JSON."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from goldenspiral.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.goldenspiral_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="goldenspiral",
        description="Fibonacci golden spiral geometry: squares, arcs and animation reveal",
    )
    parser.add_argument("-n", "--count", type=int, default=settings.default_square_count,
                        help="number of Fibonacci squares")
    parser.add_argument("--width", type=float, default=settings.viewport_width)
    parser.add_argument("--height", type=float, default=settings.viewport_height)
    parser.add_argument("--progress", type=float, default=1.0,
                        help="animation progress in [0, 1] (default: complete)")
    parser.add_argument("--speed", type=float, default=settings.animation_speed,
                        help="animation speed multiplier for --play")
    parser.add_argument("--play", action="store_true",
                        help="drive the animation from 0 with fixed frame ticks and report timing")
    parser.add_argument("--json", action="store_true", help="print the frame as JSON")
    parser.add_argument("--diagnostics", action="store_true", help="print viewport fitting diagnostics")
    parser.add_argument("--svg", type=Path, help="write the frame as SVG")
    parser.add_argument("--png", type=Path, help="write the frame as PNG (matplotlib)")
    return parser


def _play(args: argparse.Namespace) -> int:
    from goldenspiral.dependencies import get_pipeline_config
    from goldenspiral.engine.sequence import generate
    from goldenspiral.engine.session import SpiralSession
    from goldenspiral.engine.types import Viewport

    # Same argument check as a single frame; the session itself clamps counts
    generate(args.count)
    session = SpiralSession(
        n=args.count,
        viewport=Viewport(args.width, args.height),
        speed=args.speed,
        config=get_pipeline_config(),
    )
    session.state.start()
    ticks = 0
    while session.state.is_animating:
        session.advance(settings.frame_interval_ms)
        ticks += 1

    elapsed = ticks * settings.frame_interval_ms / 1000
    print(f"Animation complete: {ticks} frames, {elapsed:.2f}s at {session.state.speed:.1f}x")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    from goldenspiral.dependencies import get_pipeline_config
    from goldenspiral.engine.pipeline import compute_frame
    from goldenspiral.engine.types import Viewport
    from goldenspiral.formatter import context_to_frame, context_to_text

    try:
        if args.play:
            return _play(args)
        ctx = compute_frame(
            args.count,
            Viewport(args.width, args.height),
            progress=args.progress,
            config=get_pipeline_config(),
        )
    except ValueError as e:
        print(f"goldenspiral: error: {e}", file=sys.stderr)
        return 2

    if args.json:
        print(context_to_frame(ctx).model_dump_json(indent=2))
    else:
        print(context_to_text(ctx))

    if args.diagnostics and ctx.scaling is not None:
        print()
        print(ctx.scaling.diagnostics)

    if args.svg or args.png:
        from goldenspiral.render.scene import build_scene

        scene = build_scene(ctx)
        if args.svg:
            from goldenspiral.render.svg import render_svg

            args.svg.write_text(render_svg(scene), encoding="utf-8")
            logger.info("Saved frame: %s", args.svg)
        if args.png:
            from goldenspiral.render.matplotlib_renderer import render_png

            render_png(scene, args.png)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
