"""Tests for SVG and PNG frame rendering."""

import pytest

from goldenspiral.engine.pipeline import compute_frame
from goldenspiral.engine.types import Viewport
from goldenspiral.render.matplotlib_renderer import arc_points, render_png
from goldenspiral.render.scene import build_scene
from goldenspiral.render.svg import render_svg, spiral_path_data


def test_svg_complete_frame(frame):
    svg = render_svg(build_scene(frame))
    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")
    # Background plus one rect per square
    assert svg.count("<rect") == 9
    assert svg.count("<path") == 1
    assert ">21</text>" in svg
    assert ">3</text>" in svg
    # Squares 0-2 are too small for labels
    assert ">1</text>" not in svg
    assert ">2</text>" not in svg


def test_svg_path_data(frame):
    d = spiral_path_data(build_scene(frame))
    assert d.startswith("M ")
    assert d.count(" A ") == 8


def test_svg_without_arcs():
    scene = build_scene(compute_frame(8, Viewport(800, 600), progress=0.1))
    svg = render_svg(scene)
    assert "<path" not in svg
    assert spiral_path_data(scene) == ""


def test_arc_points_follow_arc(frame):
    arc = build_scene(frame).arcs[4]
    xs, ys = arc_points(arc)
    assert xs[0] == pytest.approx(arc.start[0], abs=1e-6)
    assert ys[0] == pytest.approx(arc.start[1], abs=1e-6)
    assert xs[-1] == pytest.approx(arc.end[0], abs=1e-6)
    assert ys[-1] == pytest.approx(arc.end[1], abs=1e-6)


def test_render_png(tmp_path, frame):
    out = render_png(build_scene(frame), tmp_path / "frame.png")
    assert out.exists()
    assert out.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"
