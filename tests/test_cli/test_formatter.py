"""Tests for frame serialization and the text report."""

import pytest

from goldenspiral.engine.animation import AnimationState
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.pipeline import compute_frame
from goldenspiral.engine.types import Viewport
from goldenspiral.formatter import context_to_frame, context_to_text
from goldenspiral.models.frame import FrameResponse


def test_frame_lists_every_square():
    ctx = compute_frame(8, Viewport(800, 600), progress=0.1)
    frame = context_to_frame(ctx)
    assert isinstance(frame, FrameResponse)
    # Reveal limits drawing, not the snapshot
    assert len(frame.squares) == 8
    assert frame.reveal.visible_squares == 1
    assert frame.animation.progress == pytest.approx(0.1)


def test_square_screen_coordinates(frame):
    model = context_to_frame(frame)
    sq = model.squares[0]
    assert sq.screen_left == pytest.approx(sq.x + 400)
    assert sq.screen_top == pytest.approx(300 - sq.y - sq.size)
    assert sq.label == "1"
    assert sq.show_label is False
    assert model.squares[7].show_label is True


def test_arcs_are_fitted(frame):
    model = context_to_frame(frame)
    assert [a.start_angle for a in model.arcs[:5]] == [0.0, 90.0, 180.0, 270.0, 0.0]
    assert model.arcs[0].radius == pytest.approx(frame.scale)


def test_animation_state_overrides_progress(frame):
    state = AnimationState(progress=0.4, is_animating=True, speed=1.5)
    model = context_to_frame(frame, state)
    assert model.animation.is_animating is True
    assert model.animation.speed == 1.5
    assert model.animation.progress == 0.4


def test_empty_context():
    model = context_to_frame(SpiralContext())
    assert model.squares == []
    assert model.arcs == []
    assert model.rotated is False


def test_text_report(frame):
    text = context_to_text(frame, decimals=4)
    assert "1, 1, 2, 3, 5, 8, 13, 21" in text
    assert "Distance from phi" in text
    assert "21 / 13" in text
    assert "Viewport 800 x 600" in text
    assert "Errors" not in text


def test_text_report_lists_errors():
    ctx = SpiralContext()
    ctx.errors["S0.01"] = "n must be greater than 0, got: 0"
    text = context_to_text(ctx)
    assert "Errors" in text
    assert "S0.01: n must be greater than 0" in text


def test_progress_is_clamped():
    vp = Viewport(800, 600)
    assert context_to_frame(compute_frame(5, vp, progress=5.0)).animation.progress == 1.0
    frame = context_to_frame(compute_frame(5, vp, progress=-2.0))
    assert frame.animation.progress == 0.0
    assert frame.reveal.visible_squares == 0
