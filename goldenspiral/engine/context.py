"""SpiralContext — the single mutable state object flowing through all stages.

Inputs (n, viewport, progress) are set by the caller; every other field is
filled by a stage and recomputed from scratch on each run.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from goldenspiral.engine.config import PipelineConfig
from goldenspiral.engine.types import (
    ArcDescriptor,
    Position,
    RatioInfo,
    Reveal,
    ScalingResult,
    Viewport,
)


@dataclass
class SpiralContext:
    """Shared state for one frame of the visualization."""

    # --- Inputs ---
    n: int = 8
    viewport: Viewport = field(default_factory=lambda: Viewport(800.0, 600.0))
    progress: float = 1.0
    config: PipelineConfig = field(default_factory=PipelineConfig)

    # --- Sequence layer ---
    magnitudes: list[int] = field(default_factory=list)
    ratios: list[float] = field(default_factory=list)
    convergence: list[float] = field(default_factory=list)
    ratio_table: list[RatioInfo] = field(default_factory=list)
    closest_ratio_index: int = -1
    # Distance of the last ratio from phi, None below two magnitudes
    convergence_distance: float | None = None

    # --- Geometry layer (unscaled, Y-up) ---
    positions: list[Position] = field(default_factory=list)
    arcs: list[ArcDescriptor] = field(default_factory=list)
    # Same chain in drawable form (see arcs.trace_arcs)
    path_arcs: list[ArcDescriptor] = field(default_factory=list)

    # --- Viewport layer (scaled, centered on origin) ---
    scaling: ScalingResult | None = None
    fitted_arcs: list[ArcDescriptor] = field(default_factory=list)
    fitted_path_arcs: list[ArcDescriptor] = field(default_factory=list)

    # --- Animation layer ---
    reveal: Reveal = field(default_factory=Reveal)

    # --- Bookkeeping ---
    completed_stages: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def sizes(self) -> list[float]:
        return [float(m) for m in self.magnitudes]

    @property
    def scale(self) -> float:
        return self.scaling.scale if self.scaling is not None else 1.0

    @property
    def num_squares(self) -> int:
        return len(self.magnitudes)
