"""Arc chain: quarter circles that trace the spiral through the squares.

Reproduces the turtle idiom "turn 90 degrees while moving forward by r" with
explicit geometry. For each radius, starting at position p with heading t:

    center  = p + r * (cos(t + 90), sin(t + 90))   # 90 degrees left of heading
    end     = center + r * (cos(t + 90), sin(t + 90))
    heading = (t + 90) mod 360

The end point of one arc is the start point of the next, so the chain has no
gaps. Arcs live in the same unscaled space as the placed squares; fit_arcs()
applies the viewport transform.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from goldenspiral.engine.types import ORIGIN, ArcDescriptor, Position

QUARTER_TURN = 90.0


def _polar(angle_deg: float) -> Position:
    rad = math.radians(angle_deg)
    return Position(math.cos(rad), math.sin(rad))


def point_on_arc(arc: ArcDescriptor, angle_deg: float) -> Position:
    """Point of the arc's circle at ``angle_deg`` measured from the center."""
    return arc.center + _polar(angle_deg) * arc.radius


def arc_start(arc: ArcDescriptor) -> Position:
    """Where the turtle stood when the arc began (opposite the perpendicular)."""
    return point_on_arc(arc, arc.start_angle - QUARTER_TURN)


def arc_end(arc: ArcDescriptor) -> Position:
    """Where the next arc starts."""
    return point_on_arc(arc, arc.start_angle + QUARTER_TURN)


def build_arcs(
    radii: Sequence[float],
    start_position: Position = ORIGIN,
    start_angle: float = 0.0,
) -> list[ArcDescriptor]:
    """One ArcDescriptor per radius; start angles cycle 0, 90, 180, 270 from 0."""
    arcs: list[ArcDescriptor] = []
    position = start_position
    heading = start_angle

    for radius in radii:
        radius = float(radius)
        perpendicular = heading + QUARTER_TURN
        center = position + _polar(perpendicular) * radius

        arc = ArcDescriptor(
            center=center,
            radius=radius,
            start_angle=heading,
            sweep_angle=QUARTER_TURN,
        )
        arcs.append(arc)

        position = arc_end(arc)
        heading = (heading + QUARTER_TURN) % 360.0

    return arcs


def fit_arcs(arcs: Sequence[ArcDescriptor], scale: float, offset: Position) -> list[ArcDescriptor]:
    """Apply the same scale and centering offset that fit_to_viewport gave the squares."""
    return [
        ArcDescriptor(
            center=arc.center * scale + offset,
            radius=arc.radius * scale,
            start_angle=arc.start_angle,
            sweep_angle=arc.sweep_angle,
        )
        for arc in arcs
    ]


def trace_arcs(
    radii: Sequence[float],
    start_position: Position = ORIGIN,
    start_angle: float = 0.0,
) -> list[ArcDescriptor]:
    """The spiral as a pen draws it: consecutive arcs share endpoints when swept.

    Same turtle walk as build_arcs(), but each descriptor's start_angle is
    measured from the center to the arc's first point and the walk advances
    along the drawn quarter circle. Arc i lies inside square i of place().
    """
    arcs: list[ArcDescriptor] = []
    position = start_position
    heading = start_angle

    for radius in radii:
        radius = float(radius)
        center = position + _polar(heading + QUARTER_TURN) * radius
        arc = ArcDescriptor(
            center=center,
            radius=radius,
            start_angle=(heading - QUARTER_TURN) % 360.0,
            sweep_angle=QUARTER_TURN,
        )
        arcs.append(arc)

        position = point_on_arc(arc, arc.start_angle + QUARTER_TURN)
        heading = (heading + QUARTER_TURN) % 360.0

    return arcs


def sweep_point(arc: ArcDescriptor, fraction: float = 1.0) -> Position:
    """Point reached after sweeping ``fraction`` of the arc from its start angle."""
    return point_on_arc(arc, arc.start_angle + arc.sweep_angle * fraction)
