"""Geometry (Y-up, origin at center) to screen (Y-down, origin top-left)."""

from __future__ import annotations

from goldenspiral.engine.types import Position, Viewport


def to_screen(position: Position, viewport: Viewport) -> tuple[float, float]:
    return (position.x + viewport.width / 2, viewport.height / 2 - position.y)


def from_screen(x: float, y: float, viewport: Viewport) -> Position:
    return Position(x - viewport.width / 2, viewport.height / 2 - y)


def to_screen_angle(angle_deg: float) -> float:
    """Flipping Y mirrors angles: CCW in geometry is clockwise on screen."""
    return -angle_deg
