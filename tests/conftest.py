"""Shared test fixtures."""

from __future__ import annotations

import pytest

from goldenspiral.engine.pipeline import compute_frame
from goldenspiral.engine.types import Viewport


# Canonical regression cases

CANONICAL_SIZES = [1, 1, 2, 3, 5]
CANONICAL_POSITIONS = [(0, 0), (0, 1), (-2, 0), (-2, -3), (1, -3)]

EIGHT_SIZES = [1, 1, 2, 3, 5, 8, 13, 21]

VIEWPORTS = [
    Viewport(800, 600),
    Viewport(600, 800),
    Viewport(1920, 1080),
    Viewport(320, 2000),
    Viewport(500, 500),
]


@pytest.fixture
def canonical_sizes() -> list[int]:
    return list(CANONICAL_SIZES)


@pytest.fixture
def viewport() -> Viewport:
    return Viewport(800, 600)


@pytest.fixture
def frame(viewport):
    """Complete 8-square frame at progress 1.0."""
    return compute_frame(8, viewport, progress=1.0)
