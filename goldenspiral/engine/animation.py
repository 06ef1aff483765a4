"""Animation state machine and the two-phase reveal derived from its progress.

Phase 1 (progress 0.0 - 0.5): squares appear one at a time.
Phase 2 (progress 0.5 - 1.0): every square is shown and the arc chain draws,
ending each frame on a partially swept arc for smooth motion.

The state is owned by one caller and advanced by one periodic driver;
tick() is the timed-callback contract that driver uses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from goldenspiral.engine.types import Reveal

logger = logging.getLogger(__name__)

MIN_SPEED = 0.5
MAX_SPEED = 2.0
BASE_DURATION_PER_SQUARE_MS = 500.0
FRAME_INTERVAL_MS = 16.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def progress_delta(
    elapsed_ms: float,
    n: int,
    speed: float,
    base_per_square_ms: float = BASE_DURATION_PER_SQUARE_MS,
) -> float:
    """Progress gained in ``elapsed_ms``; a full run lasts n * base / speed."""
    if n <= 0:
        raise ValueError(f"n must be greater than 0, got: {n}")
    total_ms = (n * base_per_square_ms) / speed
    return elapsed_ms / total_ms


def reveal(n: int, progress: float) -> Reveal:
    """Squares and arcs visible at ``progress`` for an n-square spiral."""
    progress = _clamp(progress, 0.0, 1.0)
    square_phase = min(progress * 2.0, 1.0)
    spiral_phase = _clamp((progress - 0.5) * 2.0, 0.0, 1.0)

    visible = int(_clamp(int(n * square_phase), 0, n))

    total = n * spiral_phase
    complete = int(total)
    fraction = total - complete
    if complete >= n:
        complete, fraction = n, 0.0

    return Reveal(
        visible_squares=visible,
        complete_arcs=complete,
        partial_fraction=fraction,
        partial_sweep=90.0 * fraction,
        square_phase=square_phase,
        spiral_phase=spiral_phase,
    )


@dataclass
class AnimationState:
    """Progress in [0, 1], play/pause flag and speed multiplier in [0.5, 2.0]."""

    progress: float = 0.0
    is_animating: bool = False
    speed: float = 1.0
    count: int = 8

    def __post_init__(self) -> None:
        self.progress = _clamp(self.progress, 0.0, 1.0)
        self.speed = _clamp(self.speed, MIN_SPEED, MAX_SPEED)

    def start(self) -> None:
        # Play is disallowed once the animation has completed
        if self.progress < 1.0:
            self.is_animating = True

    def pause(self) -> None:
        self.is_animating = False

    def reset(self) -> None:
        self.progress = 0.0
        self.is_animating = True

    def set_progress(self, progress: float) -> None:
        self.progress = _clamp(progress, 0.0, 1.0)
        if self.progress >= 1.0:
            self.is_animating = False

    def set_speed(self, speed: float) -> None:
        self.speed = _clamp(speed, MIN_SPEED, MAX_SPEED)

    def set_count(self, n: int, low: int = 1, high: int = 15) -> None:
        """Change the square count; a new count always restarts from progress 0."""
        self.count = int(_clamp(n, low, high))
        self.progress = 0.0

    def tick(self, elapsed_ms: float, base_per_square_ms: float = BASE_DURATION_PER_SQUARE_MS) -> float:
        """Advance by ``elapsed_ms`` of wall time; no-op while paused or complete."""
        if self.is_animating and self.progress < 1.0:
            delta = progress_delta(elapsed_ms, self.count, self.speed, base_per_square_ms)
            self.set_progress(self.progress + delta)
            if not self.is_animating:
                logger.debug("Animation complete (n=%d, speed=%.1fx)", self.count, self.speed)
        return self.progress

    def reveal(self) -> Reveal:
        return reveal(self.count, self.progress)
