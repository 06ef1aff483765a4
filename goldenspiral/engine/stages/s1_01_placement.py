"""S1.01 — Square placement (bounding-box walk)."""

from __future__ import annotations

from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.placement import place
from goldenspiral.engine.registry import Layer, stage


@stage(
    id="S1.01",
    layer=Layer.GEOMETRY,
    dependencies=["S0.01"],
    description="Anchor every square against the growing bounding box",
)
def square_placement(ctx: SpiralContext) -> None:
    ctx.positions = place(ctx.sizes)
