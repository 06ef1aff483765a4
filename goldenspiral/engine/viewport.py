"""Viewport fitting: uniform scale plus a translation that centers the spiral.

Pipeline for fit_to_viewport():
    1. unscaled bounding box
    2. rotation check (inert, see should_rotate)
    3. scale factor from the more restrictive axis
    4. scale positions and sizes
    5. bounding box of the scaled geometry
    6. centering offset, applied to positions only
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from goldenspiral.engine.types import BoundingBox, Position, ScalingResult, Viewport

logger = logging.getLogger(__name__)

MARGIN_FACTOR = 0.90
ROTATION_GAIN_THRESHOLD = 0.05


def bounding_box(positions: Sequence[Position], sizes: Sequence[float]) -> BoundingBox:
    """Box enclosing every square ``positions[i]`` with side ``sizes[i]``."""
    if len(positions) == 0:
        raise ValueError("Cannot create bounding box from empty list")
    if len(positions) != len(sizes):
        raise ValueError(
            f"Positions and sizes must have same length ({len(positions)} != {len(sizes)})"
        )

    xs = np.array([p.x for p in positions], dtype=np.float64)
    ys = np.array([p.y for p in positions], dtype=np.float64)
    side = np.asarray(sizes, dtype=np.float64)

    return BoundingBox(
        min_x=float(np.min(xs)),
        min_y=float(np.min(ys)),
        max_x=float(np.max(xs + side)),
        max_y=float(np.max(ys + side)),
    )


def scale(bbox: BoundingBox, viewport: Viewport, margin_factor: float = MARGIN_FACTOR) -> float:
    """Largest uniform factor keeping the box inside ``margin_factor`` of the viewport."""
    if viewport.width <= 0 or viewport.height <= 0:
        raise ValueError(f"Viewport must be positive, got {viewport.width} x {viewport.height}")
    if bbox.width <= 0 or bbox.height <= 0:
        raise ValueError(f"Bounding box must have positive extent, got {bbox.width} x {bbox.height}")

    scale_x = viewport.width * margin_factor / bbox.width
    scale_y = viewport.height * margin_factor / bbox.height
    return min(scale_x, scale_y)


def rotation_gain(bbox: BoundingBox, viewport: Viewport, margin_factor: float = MARGIN_FACTOR) -> float:
    """Relative scale improvement if the viewport axes were swapped (0.10 = 10% larger)."""
    upright = scale(bbox, viewport, margin_factor)
    swapped = scale(bbox, Viewport(viewport.height, viewport.width), margin_factor)
    return swapped / upright - 1.0


def should_rotate(
    bbox: BoundingBox,
    viewport: Viewport,
    threshold: float = ROTATION_GAIN_THRESHOLD,
) -> bool:
    """Always False.

    Rotating stored corner anchors breaks the edge sharing between squares.
    Rotation belongs to the renderer as one rigid canvas transform, so the
    geometry is never rotated here whatever rotation_gain() reports.
    """
    return False


def _diagnostics(
    n: int,
    viewport: Viewport,
    unscaled: BoundingBox,
    scaled: BoundingBox,
    rotated: bool,
    factor: float,
    gain: float,
) -> str:
    lines = [
        "Spiral Scaling Diagnostics:",
        f"  n = {n}",
        f"  Canvas: {viewport.width} x {viewport.height}",
        f"  Unscaled bbox: {unscaled.width} x {unscaled.height}",
        f"  Rotation gain: {gain:.4f}",
        f"  Rotated: {rotated}",
        f"  Scale factor: {factor}",
        f"  Scaled bbox: {scaled.width} x {scaled.height}",
    ]
    return "\n".join(lines)


def fit_to_viewport(
    positions: Sequence[Position],
    sizes: Sequence[float],
    viewport: Viewport,
    margin_factor: float = MARGIN_FACTOR,
    rotation_threshold: float = ROTATION_GAIN_THRESHOLD,
) -> ScalingResult:
    """Scale and center squares so their bounding box sits on the origin."""
    unscaled = bounding_box(positions, sizes)

    rotated = should_rotate(unscaled, viewport, rotation_threshold)
    factor = scale(unscaled, viewport, margin_factor)

    scaled_positions = [p * factor for p in positions]
    scaled_sizes = [float(s) * factor for s in sizes]

    scaled = bounding_box(scaled_positions, scaled_sizes)
    offset = Position(-scaled.width / 2 - scaled.min_x, -scaled.height / 2 - scaled.min_y)
    centered = [p + offset for p in scaled_positions]

    gain = rotation_gain(unscaled, viewport, margin_factor)
    diagnostics = _diagnostics(len(positions), viewport, unscaled, scaled, rotated, factor, gain)
    logger.debug(diagnostics)

    return ScalingResult(
        positions=centered,
        sizes=scaled_sizes,
        scale=factor,
        rotated=rotated,
        diagnostics=diagnostics,
        offset=offset,
    )
