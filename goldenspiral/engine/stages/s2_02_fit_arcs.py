"""S2.02 — Fit arcs with the squares' transform."""

from __future__ import annotations

from goldenspiral.engine.arcs import fit_arcs
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.registry import Layer, stage


@stage(
    id="S2.02",
    layer=Layer.VIEWPORT,
    dependencies=["S1.02", "S2.01"],
    description="Apply the viewport scale and offset to the arc chain",
)
def fit_arc_chain(ctx: SpiralContext) -> None:
    if ctx.scaling is None:
        raise ValueError("Arcs cannot be fitted before the squares")
    ctx.fitted_arcs = fit_arcs(ctx.arcs, ctx.scaling.scale, ctx.scaling.offset)
    ctx.fitted_path_arcs = fit_arcs(ctx.path_arcs, ctx.scaling.scale, ctx.scaling.offset)
