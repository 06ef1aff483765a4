"""Bounding-box walk: place each Fibonacci square against one edge of the union box.

Square 0 sits at the origin, square 1 directly above it. Every later square
is attached to the current bounding box, cycling LEFT, DOWN, RIGHT, UP.

Expected anchors for [1, 1, 2, 3, 5]:
    (0, 0), (0, 1), (-2, 0), (-2, -3), (1, -3)

Anchors are the bottom-left corner in Y-up coordinates, not the centroid.
"""

from __future__ import annotations

import enum
from collections.abc import Callable, Sequence

from goldenspiral.engine.types import ORIGIN, BoundingBox, Position


class Direction(enum.IntEnum):
    LEFT = 0
    DOWN = 1
    RIGHT = 2
    UP = 3


# Direction -> anchor of a square of the given size attached to the box
_ATTACH: dict[Direction, Callable[[BoundingBox, float], Position]] = {
    Direction.LEFT: lambda box, size: Position(box.min_x - size, box.min_y),
    Direction.DOWN: lambda box, size: Position(box.min_x, box.min_y - size),
    Direction.RIGHT: lambda box, size: Position(box.max_x, box.min_y),
    Direction.UP: lambda box, size: Position(box.min_x, box.max_y),
}


def direction_for(index: int) -> Direction:
    """Attachment direction of square ``index`` (valid for index >= 2)."""
    return Direction((index - 2) % 4)


def attach(box: BoundingBox, direction: Direction, size: float) -> Position:
    return _ATTACH[direction](box, size)


def place(sizes: Sequence[float]) -> list[Position]:
    """Anchor position of every square, same length as ``sizes``."""
    if len(sizes) == 0:
        return []

    positions = [ORIGIN]
    if len(sizes) == 1:
        return positions

    first = float(sizes[0])
    positions.append(Position(0.0, first))
    if len(sizes) == 2:
        return positions

    box = BoundingBox(min_x=0.0, min_y=0.0, max_x=first, max_y=first + float(sizes[1]))

    for i in range(2, len(sizes)):
        size = float(sizes[i])
        position = attach(box, direction_for(i), size)
        positions.append(position)
        box = box.include(position, size)

    return positions
