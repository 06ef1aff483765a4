"""S3.01 — Two-phase reveal for the current animation progress."""

from __future__ import annotations

from goldenspiral.engine.animation import reveal
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.registry import Layer, stage


@stage(
    id="S3.01",
    layer=Layer.ANIMATION,
    dependencies=["S0.01"],
    description="Visible squares and arc coverage at the current progress",
)
def reveal_counts(ctx: SpiralContext) -> None:
    ctx.reveal = reveal(ctx.num_squares, ctx.progress)
