"""Serializable frame snapshot — the structured output for external consumers."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RatioModel(BaseModel):
    numerator: int
    denominator: int
    ratio: float
    convergence: float


class SquareModel(BaseModel):
    index: int
    magnitude: int
    label: str
    color_index: int
    color: str
    # Geometry space: fitted, centered, Y-up, bottom-left anchor
    x: float
    y: float
    size: float
    # Screen space: Y-down, top-left corner
    screen_left: float
    screen_top: float
    show_label: bool = True


class ArcModel(BaseModel):
    index: int
    center: tuple[float, float]
    radius: float
    start_angle: float
    sweep_angle: float = 90.0


class RevealModel(BaseModel):
    visible_squares: int = 0
    complete_arcs: int = 0
    partial_sweep: float = 0.0


class AnimationModel(BaseModel):
    progress: float = 0.0
    is_animating: bool = False
    speed: float = 1.0


class FrameResponse(BaseModel):
    n: int
    viewport: tuple[float, float]
    magnitudes: list[int] = Field(default_factory=list)
    ratios: list[RatioModel] = Field(default_factory=list)
    closest_ratio_index: int = -1
    convergence_distance: float | None = None
    scale: float = 1.0
    rotated: bool = False
    diagnostics: str = ""
    squares: list[SquareModel] = Field(default_factory=list)
    # Canonical arc chain, fitted to the viewport
    arcs: list[ArcModel] = Field(default_factory=list)
    reveal: RevealModel = Field(default_factory=RevealModel)
    animation: AnimationModel = Field(default_factory=AnimationModel)
    errors: dict[str, str] = Field(default_factory=dict)
