"""Tests for screen-space scene construction."""

import pytest

from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.pipeline import compute_frame
from goldenspiral.engine.types import Position, Viewport
from goldenspiral.render.coordinates import from_screen, to_screen
from goldenspiral.render.palette import SQUARE_COLORS
from goldenspiral.render.scene import build_scene


def test_to_screen_flips_y():
    vp = Viewport(800, 600)
    assert to_screen(Position(0, 0), vp) == (400, 300)
    assert to_screen(Position(10, 20), vp) == (410, 280)
    assert from_screen(410, 280, vp) == Position(10, 20)


def test_complete_frame(frame):
    scene = build_scene(frame)
    assert len(scene.squares) == 8
    assert len(scene.arcs) == 8
    assert not any(a.partial for a in scene.arcs)
    assert scene.rotated is False


def test_squares_fit_on_screen(frame):
    scene = build_scene(frame)
    for sq in scene.squares:
        assert sq.left >= -1e-6 and sq.top >= -1e-6
        assert sq.left + sq.size <= scene.width + 1e-6
        assert sq.top + sq.size <= scene.height + 1e-6


def test_square_styling(frame):
    scene = build_scene(frame)
    assert [sq.label for sq in scene.squares] == ["1", "1", "2", "3", "5", "8", "13", "21"]
    assert scene.squares[3].color == SQUARE_COLORS[3]
    # 8 squares in 800x600 scale by 540 / 34
    assert scene.squares[0].size == pytest.approx(540 / 34)
    assert scene.squares[0].show_label is False
    assert scene.squares[7].show_label is True
    assert scene.squares[7].font_size == 48.0


def test_color_cycles_past_palette():
    ctx = compute_frame(10, Viewport(800, 600))
    scene = build_scene(ctx)
    assert scene.squares[8].color_index == 0
    assert scene.squares[9].color == SQUARE_COLORS[1]


def test_arcs_connect_on_screen(frame):
    arcs = build_scene(frame).arcs
    for current, following in zip(arcs, arcs[1:]):
        assert current.end[0] == pytest.approx(following.start[0], abs=1e-6)
        assert current.end[1] == pytest.approx(following.start[1], abs=1e-6)


def test_path_starts_at_first_square_corner(frame):
    scene = build_scene(frame)
    first = scene.squares[0]
    # Bottom-left of square 0 on screen
    assert scene.path_start[0] == pytest.approx(first.left)
    assert scene.path_start[1] == pytest.approx(first.top + first.size)


def test_square_phase_hides_arcs():
    scene = build_scene(compute_frame(8, Viewport(800, 600), progress=0.25))
    assert len(scene.squares) == 4
    assert scene.arcs == []
    assert scene.path_start is None


def test_partial_arc():
    scene = build_scene(compute_frame(5, Viewport(800, 600), progress=0.75))
    assert len(scene.squares) == 5
    assert len(scene.arcs) == 3
    assert [a.partial for a in scene.arcs] == [False, False, True]
    assert scene.arcs[-1].sweep_angle == pytest.approx(-45.0)
    assert scene.arcs[0].sweep_angle == pytest.approx(-90.0)


def test_requires_fitted_frame():
    with pytest.raises(ValueError, match="fitted"):
        build_scene(SpiralContext())
