"""PNG rendering of a Scene with matplotlib (Agg backend, no display needed)."""

from __future__ import annotations

import logging
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np
from matplotlib.patches import Rectangle

from goldenspiral.render.palette import (
    BACKGROUND_COLOR,
    LABEL_COLOR,
    SPIRAL_COLOR,
    SPIRAL_STROKE_WIDTH,
    SQUARE_STROKE_WIDTH,
)
from goldenspiral.render.scene import RenderedArc, Scene

logger = logging.getLogger(__name__)

# Polyline vertices per full 90 degree arc
_ARC_SAMPLES = 48


def arc_points(arc: RenderedArc, samples: int = _ARC_SAMPLES) -> tuple[np.ndarray, np.ndarray]:
    """Screen-space polyline along the arc (clockwise-positive angles, Y down)."""
    k = max(2, int(samples * abs(arc.sweep_angle) / 90.0) + 1)
    angles = np.radians(np.linspace(arc.start_angle, arc.start_angle + arc.sweep_angle, k))
    cx, cy = arc.center
    return cx + arc.radius * np.cos(angles), cy + arc.radius * np.sin(angles)


def draw_scene(ax, scene: Scene) -> None:
    """Draw a scene onto an existing axes using screen coordinates."""
    ax.set_facecolor(BACKGROUND_COLOR)

    for sq in scene.squares:
        ax.add_patch(
            Rectangle(
                (sq.left, sq.top),
                sq.size,
                sq.size,
                fill=False,
                edgecolor=sq.color,
                linewidth=SQUARE_STROKE_WIDTH,
            )
        )
        if sq.show_label:
            ax.text(
                sq.left + sq.size / 2,
                sq.top + sq.size / 2,
                sq.label,
                color=LABEL_COLOR,
                fontsize=sq.font_size * 0.75,  # px -> pt at 96 dpi
                ha="center",
                va="center",
            )

    for arc in scene.arcs:
        xs, ys = arc_points(arc)
        ax.plot(xs, ys, color=SPIRAL_COLOR, linewidth=SPIRAL_STROKE_WIDTH, solid_capstyle="round")

    ax.set_xlim(0, scene.width)
    ax.set_ylim(scene.height, 0)
    ax.set_aspect("equal")
    ax.axis("off")


def render_png(scene: Scene, path: str | Path, dpi: int = 100) -> Path:
    """Write the scene as a PNG of scene.width x scene.height pixels."""
    out = Path(path)
    fig = plt.figure(figsize=(scene.width / dpi, scene.height / dpi), dpi=dpi, facecolor=BACKGROUND_COLOR)
    ax = fig.add_axes([0, 0, 1, 1])
    draw_scene(ax, scene)
    fig.savefig(str(out), dpi=dpi, facecolor=BACKGROUND_COLOR)
    plt.close(fig)
    logger.info("Saved frame: %s (%d squares, %d arcs)", out, len(scene.squares), len(scene.arcs))
    return out
