"""Pipeline configuration — engine tunables that are not user settings."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls fitting, labelling and failure behaviour of the frame pipeline."""

    # Fraction of the viewport the spiral may occupy on its governing axis
    margin_factor: float = 0.90

    # Rotation would need to beat the upright scale by this fraction (currently inert)
    rotation_gain_threshold: float = 0.05

    # Animation: milliseconds per square at 1.0x speed
    base_duration_per_square_ms: float = 500.0

    # Labels are skipped on squares smaller than this many pixels
    min_label_size: float = 40.0
    label_font_ratio: float = 0.3
    label_font_min: float = 12.0
    label_font_max: float = 48.0

    # Recognized square-count range for interactive sessions
    min_square_count: int = 1
    max_square_count: int = 15

    # Re-raise stage exceptions instead of recording them in ctx.errors
    fail_fast: bool = True
