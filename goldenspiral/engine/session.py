"""SpiralSession — state holder between a UI and the pure frame pipeline.

Owns the AnimationState, the current viewport and the last valid frame.
Rejected updates (ValueError) leave all three untouched.
"""

from __future__ import annotations

import logging

from goldenspiral.engine.animation import AnimationState
from goldenspiral.engine.config import PipelineConfig
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.pipeline import Pipeline, create_pipeline
from goldenspiral.engine.registry import Layer
from goldenspiral.engine.types import Viewport

logger = logging.getLogger(__name__)


class SpiralSession:
    def __init__(
        self,
        n: int = 8,
        viewport: Viewport | None = None,
        speed: float = 1.0,
        config: PipelineConfig | None = None,
        pipeline: Pipeline | None = None,
    ) -> None:
        self.config = config or PipelineConfig()
        self.pipeline = pipeline or create_pipeline(self.config)
        self.viewport = viewport or Viewport(800.0, 600.0)
        self.state = AnimationState()
        self.state.set_speed(speed)
        self._frame = SpiralContext()
        self.update_count(n)

    def frame(self) -> SpiralContext:
        return self._frame

    def update_count(self, n: int) -> SpiralContext:
        """Clamp ``n`` to the recognized range, rebuild geometry and restart at progress 0."""
        clamped = max(self.config.min_square_count, min(self.config.max_square_count, int(n)))
        if clamped != n:
            logger.info("Square count %d clamped to %d", n, clamped)
        self._rebuild(clamped, self.viewport, 0.0)
        self.state.set_count(clamped, self.config.min_square_count, self.config.max_square_count)
        return self._frame

    def resize(self, width: float, height: float) -> SpiralContext:
        viewport = Viewport(float(width), float(height))
        if viewport.width <= 0 or viewport.height <= 0:
            logger.warning("Rejected viewport %s x %s", width, height)
            raise ValueError(f"Viewport must be positive, got {width} x {height}")
        self._rebuild(self.state.count, viewport, self.state.progress)
        self.viewport = viewport
        return self._frame

    def advance(self, elapsed_ms: float) -> SpiralContext:
        """Tick the animation and refresh only the reveal of the current frame."""
        self.state.tick(elapsed_ms, self.config.base_duration_per_square_ms)
        return self._refresh_reveal()

    def seek(self, progress: float) -> SpiralContext:
        self.state.set_progress(progress)
        return self._refresh_reveal()

    def _refresh_reveal(self) -> SpiralContext:
        self._frame.progress = self.state.progress
        self.pipeline.run_layer(self._frame, Layer.ANIMATION)
        return self._frame

    def _rebuild(self, n: int, viewport: Viewport, progress: float) -> None:
        ctx = SpiralContext(n=n, viewport=viewport, progress=progress)
        # Raises before self._frame is replaced, keeping the last valid frame
        self.pipeline.run(ctx)
        self._frame = ctx
