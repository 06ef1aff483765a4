"""Screen-space scene for one frame: what a renderer draws, already revealed and flipped.

Squares come from the fitted placement, arcs from the fitted drawable chain.
Only the prefix selected by ctx.reveal is included; the last arc may be
partially swept.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from goldenspiral.engine.arcs import sweep_point
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.types import ArcDescriptor, Viewport
from goldenspiral.render.coordinates import to_screen, to_screen_angle
from goldenspiral.render.palette import SQUARE_COLORS, square_color


@dataclass
class RenderedSquare:
    index: int
    magnitude: int
    label: str
    color_index: int
    color: str
    # Top-left corner on screen
    left: float
    top: float
    size: float
    show_label: bool = True
    font_size: float = 12.0


@dataclass
class RenderedArc:
    index: int
    center: tuple[float, float]
    radius: float
    # Screen convention: clockwise-positive degrees
    start_angle: float
    sweep_angle: float
    start: tuple[float, float]
    end: tuple[float, float]
    partial: bool = False


@dataclass
class Scene:
    width: float
    height: float
    squares: list[RenderedSquare] = field(default_factory=list)
    arcs: list[RenderedArc] = field(default_factory=list)
    rotated: bool = False

    @property
    def path_start(self) -> tuple[float, float] | None:
        return self.arcs[0].start if self.arcs else None


def _font_size(size: float, ratio: float, low: float, high: float) -> float:
    return max(low, min(high, size * ratio))


def _render_arc(index: int, arc: ArcDescriptor, viewport: Viewport, fraction: float) -> RenderedArc:
    return RenderedArc(
        index=index,
        center=to_screen(arc.center, viewport),
        radius=arc.radius,
        start_angle=to_screen_angle(arc.start_angle),
        sweep_angle=to_screen_angle(arc.sweep_angle * fraction),
        start=to_screen(sweep_point(arc, 0.0), viewport),
        end=to_screen(sweep_point(arc, fraction), viewport),
        partial=fraction < 1.0,
    )


def build_scene(ctx: SpiralContext) -> Scene:
    """Convert a computed frame into screen-space squares and arcs."""
    if ctx.scaling is None:
        raise ValueError("Frame has no fitted geometry; run the pipeline first")

    cfg = ctx.config
    viewport = ctx.viewport
    scene = Scene(width=viewport.width, height=viewport.height, rotated=ctx.scaling.rotated)

    visible = min(ctx.reveal.visible_squares, len(ctx.scaling.positions))
    for i in range(visible):
        size = ctx.scaling.sizes[i]
        # Anchor is bottom-left in geometry; Y-down puts the top edge at y - size
        x, y = to_screen(ctx.scaling.positions[i], viewport)
        scene.squares.append(
            RenderedSquare(
                index=i,
                magnitude=ctx.magnitudes[i],
                label=str(ctx.magnitudes[i]),
                color_index=i % len(SQUARE_COLORS),
                color=square_color(i),
                left=x,
                top=y - size,
                size=size,
                show_label=size >= cfg.min_label_size,
                font_size=_font_size(size, cfg.label_font_ratio, cfg.label_font_min, cfg.label_font_max),
            )
        )

    arcs = ctx.fitted_path_arcs
    complete = min(ctx.reveal.complete_arcs, len(arcs))
    for i in range(complete):
        scene.arcs.append(_render_arc(i, arcs[i], viewport, 1.0))

    if ctx.reveal.has_partial_arc and complete < len(arcs):
        scene.arcs.append(_render_arc(complete, arcs[complete], viewport, ctx.reveal.partial_fraction))

    return scene
