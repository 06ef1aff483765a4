"""S1.02 — Arc chain.

Unscaled quarter circles starting at the origin facing +X. Independent of
placement: both only read the magnitudes.
"""

from __future__ import annotations

from goldenspiral.engine.arcs import build_arcs, trace_arcs
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.registry import Layer, stage


@stage(
    id="S1.02",
    layer=Layer.GEOMETRY,
    dependencies=["S0.01"],
    description="Quarter-circle arcs tracing the spiral",
)
def arc_chain(ctx: SpiralContext) -> None:
    ctx.arcs = build_arcs(ctx.sizes)
    ctx.path_arcs = trace_arcs(ctx.sizes)
