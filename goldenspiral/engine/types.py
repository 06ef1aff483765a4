"""Value types shared by every engine module.

Coordinates follow the turtle convention: origin arbitrary, Y increases upward.
Renderers flip Y themselves (see goldenspiral.render.coordinates).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    x: float
    y: float

    def __add__(self, other: Position) -> Position:
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Position) -> Position:
        return Position(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> Position:
        return Position(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ORIGIN = Position(0.0, 0.0)


@dataclass(frozen=True)
class BoundingBox:
    """Union box of placed squares: (min_x, min_y, max_x, max_y)."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Position:
        return Position((self.min_x + self.max_x) / 2, (self.min_y + self.max_y) / 2)

    def include(self, position: Position, size: float) -> BoundingBox:
        """Return a new box extended to cover the square at ``position``."""
        return BoundingBox(
            min_x=min(self.min_x, position.x),
            min_y=min(self.min_y, position.y),
            max_x=max(self.max_x, position.x + size),
            max_y=max(self.max_y, position.y + size),
        )


@dataclass(frozen=True)
class Viewport:
    width: float
    height: float


@dataclass(frozen=True)
class ScalingResult:
    """Geometry fitted into a viewport, centered on the origin."""

    positions: list[Position]
    sizes: list[float]
    scale: float
    rotated: bool = False
    diagnostics: str = ""
    # Translation added to every scaled position
    offset: Position = ORIGIN

    def __post_init__(self) -> None:
        if len(self.positions) != len(self.sizes):
            raise ValueError(
                f"Positions and sizes must have same length "
                f"({len(self.positions)} != {len(self.sizes)})"
            )


@dataclass(frozen=True)
class ArcDescriptor:
    """One quarter-circle of the spiral. Angles in degrees, CCW from +X."""

    center: Position
    radius: float
    start_angle: float
    sweep_angle: float = 90.0


@dataclass(frozen=True)
class RatioInfo:
    numerator: int
    denominator: int
    ratio: float
    convergence: float


@dataclass(frozen=True)
class Reveal:
    """What a renderer shows at one animation progress value."""

    visible_squares: int = 0
    complete_arcs: int = 0
    partial_fraction: float = 0.0
    partial_sweep: float = 0.0
    square_phase: float = 0.0
    spiral_phase: float = 0.0

    @property
    def has_partial_arc(self) -> bool:
        return self.partial_fraction > 0.0
