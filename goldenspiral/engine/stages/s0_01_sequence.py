"""S0.01 — Fibonacci magnitudes.

First ``ctx.n`` Fibonacci numbers; each is one square's side and one arc's radius.
"""

from __future__ import annotations

from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.registry import Layer, stage
from goldenspiral.engine.sequence import generate


@stage(
    id="S0.01",
    layer=Layer.SEQUENCE,
    description="Generate the first n Fibonacci magnitudes",
)
def fibonacci_sequence(ctx: SpiralContext) -> None:
    ctx.magnitudes = generate(ctx.n)
