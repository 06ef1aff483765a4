"""Tests for the goldenspiral command-line entry point."""

import json

from goldenspiral.main import main


def test_text_report(capsys):
    assert main(["-n", "5"]) == 0
    out = capsys.readouterr().out
    assert "Fibonacci Sequence" in out
    assert "1, 1, 2, 3, 5" in out
    assert "5 / 3" in out
    assert "<- closest" in out


def test_invalid_count(capsys):
    assert main(["-n", "0"]) == 2
    assert "greater than 0" in capsys.readouterr().err


def test_invalid_viewport(capsys):
    assert main(["-n", "5", "--width", "0"]) == 2
    assert "positive" in capsys.readouterr().err


def test_progress_out_of_range_is_clamped(capsys):
    assert main(["-n", "5", "--json", "--progress", "5"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["animation"]["progress"] == 1.0


def test_json_output(capsys):
    assert main(["-n", "5", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["magnitudes"] == [1, 1, 2, 3, 5]
    assert len(data["squares"]) == 5
    assert len(data["arcs"]) == 5
    assert data["closest_ratio_index"] == 3
    assert data["rotated"] is False
    assert data["reveal"]["complete_arcs"] == 5


def test_diagnostics(capsys):
    assert main(["-n", "3", "--diagnostics"]) == 0
    assert "Spiral Scaling Diagnostics:" in capsys.readouterr().out


def test_writes_svg(tmp_path, capsys):
    out = tmp_path / "spiral.svg"
    assert main(["-n", "6", "--svg", str(out)]) == 0
    text = out.read_text(encoding="utf-8")
    assert text.startswith("<svg")
    assert "<path" in text


def test_play(capsys):
    assert main(["-n", "2", "--play", "--speed", "2"]) == 0
    out = capsys.readouterr().out
    # 2 squares * 500ms / 2.0 = 500ms of 16ms frames
    assert "Animation complete: 32 frames" in out
    assert "2.0x" in out


def test_play_invalid_count(capsys):
    assert main(["-n", "0", "--play"]) == 2
    assert "greater than 0" in capsys.readouterr().err
