"""S0.02 — Golden ratio convergence.

Display data only. Nothing downstream in geometry reads these fields.
"""

from __future__ import annotations

from goldenspiral.engine import ratios as ratio_analysis
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.registry import Layer, stage


@stage(
    id="S0.02",
    layer=Layer.SEQUENCE,
    dependencies=["S0.01"],
    description="Consecutive ratios and their distance from phi",
)
def golden_ratio_convergence(ctx: SpiralContext) -> None:
    ctx.ratios = ratio_analysis.ratios(ctx.magnitudes)
    ctx.convergence = ratio_analysis.convergence(ctx.ratios)
    ctx.ratio_table = ratio_analysis.ratio_table(ctx.magnitudes)
    ctx.closest_ratio_index = ratio_analysis.closest_index(ctx.magnitudes)
    ctx.convergence_distance = ctx.ratio_table[-1].convergence if ctx.ratio_table else None
