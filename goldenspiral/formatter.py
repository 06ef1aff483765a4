"""Convert a computed SpiralContext into FrameResponse and a plain-text report."""

from __future__ import annotations

from goldenspiral.engine.animation import AnimationState
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.ratios import PHI
from goldenspiral.models.frame import (
    AnimationModel,
    ArcModel,
    FrameResponse,
    RatioModel,
    RevealModel,
    SquareModel,
)
from goldenspiral.render.coordinates import to_screen
from goldenspiral.render.palette import SQUARE_COLORS, square_color


def context_to_frame(ctx: SpiralContext, state: AnimationState | None = None) -> FrameResponse:
    """Convert SpiralContext to a structured FrameResponse. All squares are listed."""
    squares = []
    if ctx.scaling is not None:
        for i, (pos, size) in enumerate(zip(ctx.scaling.positions, ctx.scaling.sizes)):
            sx, sy = to_screen(pos, ctx.viewport)
            squares.append(
                SquareModel(
                    index=i,
                    magnitude=ctx.magnitudes[i],
                    label=str(ctx.magnitudes[i]),
                    color_index=i % len(SQUARE_COLORS),
                    color=square_color(i),
                    x=pos.x,
                    y=pos.y,
                    size=size,
                    screen_left=sx,
                    screen_top=sy - size,
                    show_label=size >= ctx.config.min_label_size,
                )
            )

    arcs = [
        ArcModel(
            index=i,
            center=arc.center.as_tuple(),
            radius=arc.radius,
            start_angle=arc.start_angle,
            sweep_angle=arc.sweep_angle,
        )
        for i, arc in enumerate(ctx.fitted_arcs)
    ]

    animation = AnimationModel(progress=ctx.progress)
    if state is not None:
        animation = AnimationModel(progress=state.progress, is_animating=state.is_animating, speed=state.speed)

    return FrameResponse(
        n=ctx.n,
        viewport=(ctx.viewport.width, ctx.viewport.height),
        magnitudes=list(ctx.magnitudes),
        ratios=[
            RatioModel(
                numerator=r.numerator,
                denominator=r.denominator,
                ratio=r.ratio,
                convergence=r.convergence,
            )
            for r in ctx.ratio_table
        ],
        closest_ratio_index=ctx.closest_ratio_index,
        convergence_distance=ctx.convergence_distance,
        scale=ctx.scale,
        rotated=ctx.scaling.rotated if ctx.scaling is not None else False,
        diagnostics=ctx.scaling.diagnostics if ctx.scaling is not None else "",
        squares=squares,
        arcs=arcs,
        reveal=RevealModel(
            visible_squares=ctx.reveal.visible_squares,
            complete_arcs=ctx.reveal.complete_arcs,
            partial_sweep=ctx.reveal.partial_sweep,
        ),
        animation=animation,
        errors=dict(ctx.errors),
    )


def context_to_text(ctx: SpiralContext, decimals: int = 10) -> str:
    """Human-readable sequence, ratio table and fit summary."""
    lines = [
        "Fibonacci Sequence",
        "  " + ", ".join(str(m) for m in ctx.magnitudes),
    ]

    if ctx.ratio_table:
        lines.append("")
        lines.append("Golden Ratio Convergence")
        if ctx.convergence_distance is not None:
            lines.append(f"  Distance from phi: {ctx.convergence_distance:.{decimals}f}")
        for i, info in enumerate(ctx.ratio_table):
            marker = "  <- closest" if i == ctx.closest_ratio_index else ""
            ratio_label = f"{info.numerator} / {info.denominator}"
            lines.append(f"  {ratio_label:>14}  {info.ratio:.{decimals}f}{marker}")
        lines.append(f"  {'phi':>14}  {PHI:.{decimals}f}")

    if ctx.scaling is not None:
        lines.append("")
        lines.append(
            f"Viewport {ctx.viewport.width:g} x {ctx.viewport.height:g}: "
            f"scale {ctx.scaling.scale:.4f}, "
            f"{ctx.reveal.visible_squares}/{ctx.num_squares} squares, "
            f"{ctx.reveal.complete_arcs} full arcs"
        )

    if ctx.errors:
        lines.append("")
        lines.append("Errors")
        for stage_id, message in sorted(ctx.errors.items()):
            lines.append(f"  {stage_id}: {message}")

    return "\n".join(lines)
