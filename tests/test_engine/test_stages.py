"""Tests for the registered frame stages."""

import goldenspiral.engine.stages.s0_01_sequence
import goldenspiral.engine.stages.s0_02_ratios
import goldenspiral.engine.stages.s1_01_placement
import goldenspiral.engine.stages.s1_02_arc_chain
import goldenspiral.engine.stages.s2_01_fit_viewport
import goldenspiral.engine.stages.s2_02_fit_arcs
import goldenspiral.engine.stages.s3_01_reveal

import pytest

from goldenspiral.engine.config import PipelineConfig
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.pipeline import Pipeline
from goldenspiral.engine.registry import Layer, get_registry
from goldenspiral.engine.types import Position, Viewport


def test_all_stages_registered():
    ids = {s.id for s in get_registry().all()}
    assert ids == {"S0.01", "S0.02", "S1.01", "S1.02", "S2.01", "S2.02", "S3.01"}


def test_sequence_layer():
    ctx = SpiralContext(n=5)
    Pipeline().run_layer(ctx, Layer.SEQUENCE)

    assert ctx.magnitudes == [1, 1, 2, 3, 5]
    assert ctx.ratios == pytest.approx([1.0, 2.0, 1.5, 5 / 3])
    assert len(ctx.ratio_table) == 4
    assert ctx.closest_ratio_index == 3
    assert ctx.convergence_distance == pytest.approx(ctx.ratio_table[-1].convergence)


def test_single_square_has_no_ratios():
    ctx = SpiralContext(n=1)
    Pipeline().run_layer(ctx, Layer.SEQUENCE)
    assert ctx.ratio_table == []
    assert ctx.closest_ratio_index == -1
    assert ctx.convergence_distance is None


def test_geometry_layer():
    ctx = SpiralContext(n=5)
    pipeline = Pipeline()
    pipeline.run_layer(ctx, Layer.SEQUENCE)
    pipeline.run_layer(ctx, Layer.GEOMETRY)

    assert ctx.positions[4] == Position(1, -3)
    assert [a.start_angle for a in ctx.arcs] == [0, 90, 180, 270, 0]
    assert len(ctx.path_arcs) == 5


def test_viewport_layer_uses_same_transform_for_arcs():
    ctx = Pipeline().run(SpiralContext(n=6, viewport=Viewport(1000, 1000)))
    scaling = ctx.scaling

    for raw, fitted in zip(ctx.arcs, ctx.fitted_arcs):
        assert fitted.radius == pytest.approx(raw.radius * scaling.scale)
        assert fitted.center.x == pytest.approx(raw.center.x * scaling.scale + scaling.offset.x)
        assert fitted.center.y == pytest.approx(raw.center.y * scaling.scale + scaling.offset.y)

    # The drawn spiral starts at square 0's anchor
    first = ctx.fitted_path_arcs[0]
    start = first.center + Position(0, -first.radius)
    assert start.x == pytest.approx(scaling.positions[0].x, abs=1e-6)
    assert start.y == pytest.approx(scaling.positions[0].y, abs=1e-6)


def test_margin_factor_from_config():
    ctx = Pipeline(config=PipelineConfig(margin_factor=0.5)).run(SpiralContext(n=5))
    assert ctx.scale == pytest.approx(50.0)


def test_reveal_layer_follows_progress():
    ctx = Pipeline().run(SpiralContext(n=8, progress=0.25))
    assert ctx.reveal.visible_squares == 4
    assert ctx.reveal.complete_arcs == 0
