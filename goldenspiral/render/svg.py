"""Standalone SVG documents for a Scene.

No new dependencies: plain string formatting over screen-space coordinates.
"""

from __future__ import annotations

from goldenspiral.render.palette import (
    BACKGROUND_COLOR,
    LABEL_COLOR,
    SPIRAL_COLOR,
    SPIRAL_STROKE_WIDTH,
    SQUARE_STROKE_WIDTH,
)
from goldenspiral.render.scene import RenderedSquare, Scene


def _square_to_svg(sq: RenderedSquare) -> str:
    return (
        f'<rect x="{sq.left:.2f}" y="{sq.top:.2f}" width="{sq.size:.2f}" height="{sq.size:.2f}" '
        f'fill="none" stroke="{sq.color}" stroke-width="{SQUARE_STROKE_WIDTH}"/>'
    )


def _label_to_svg(sq: RenderedSquare) -> str:
    cx = sq.left + sq.size / 2
    cy = sq.top + sq.size / 2
    return (
        f'<text x="{cx:.2f}" y="{cy:.2f}" font-size="{sq.font_size:.1f}" '
        f'text-anchor="middle" dominant-baseline="central" fill="{LABEL_COLOR}">{sq.label}</text>'
    )


def spiral_path_data(scene: Scene) -> str:
    """SVG path data for the revealed arc chain, empty when nothing is drawn yet."""
    if not scene.arcs:
        return ""

    sx, sy = scene.arcs[0].start
    d = f"M {sx:.2f},{sy:.2f}"
    for arc in scene.arcs:
        ex, ey = arc.end
        # Sweep flag 0: counter-clockwise on screen, large-arc never needed for <= 90 degrees
        d += f" A {arc.radius:.2f},{arc.radius:.2f} 0 0 0 {ex:.2f},{ey:.2f}"
    return d


def render_svg(scene: Scene) -> str:
    """Render squares, labels and the spiral as one SVG document."""
    w, h = scene.width, scene.height
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{w:g}" height="{h:g}" viewBox="0 0 {w:g} {h:g}">',
        f'<rect width="100%" height="100%" fill="{BACKGROUND_COLOR}"/>',
    ]

    body: list[str] = []
    body.extend(_square_to_svg(sq) for sq in scene.squares)
    body.extend(_label_to_svg(sq) for sq in scene.squares if sq.show_label)

    d = spiral_path_data(scene)
    if d:
        body.append(
            f'<path d="{d}" fill="none" stroke="{SPIRAL_COLOR}" '
            f'stroke-width="{SPIRAL_STROKE_WIDTH}" stroke-linecap="round"/>'
        )

    if scene.rotated:
        parts.append(f'<g transform="rotate(-90 {w / 2:g} {h / 2:g})">')
        parts.extend(body)
        parts.append("</g>")
    else:
        parts.extend(body)

    parts.append("</svg>")
    return "\n".join(parts)
