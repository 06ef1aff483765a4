"""Shared accessors for process-wide objects."""

from __future__ import annotations

from goldenspiral.config import settings
from goldenspiral.engine.config import PipelineConfig


def get_pipeline_config() -> PipelineConfig:
    """PipelineConfig seeded from settings."""
    return PipelineConfig(base_duration_per_square_ms=settings.base_duration_per_square_ms)
