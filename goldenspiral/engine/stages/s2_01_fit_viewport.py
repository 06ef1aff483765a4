"""S2.01 — Fit squares to the viewport.

Uniform scale from the more restrictive axis, then a translation that puts
the bounding box center on the origin.
"""

from __future__ import annotations

from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.registry import Layer, stage
from goldenspiral.engine.viewport import fit_to_viewport


@stage(
    id="S2.01",
    layer=Layer.VIEWPORT,
    dependencies=["S1.01"],
    description="Scale and center squares for the viewport",
)
def fit_squares(ctx: SpiralContext) -> None:
    ctx.scaling = fit_to_viewport(
        ctx.positions,
        ctx.sizes,
        ctx.viewport,
        margin_factor=ctx.config.margin_factor,
        rotation_threshold=ctx.config.rotation_gain_threshold,
    )
