"""GoldenSpiral geometry and animation-state engine."""

from goldenspiral.engine.registry import stage, Layer, get_registry
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.pipeline import Pipeline, compute_frame, create_pipeline

__all__ = [
    "stage",
    "Layer",
    "get_registry",
    "SpiralContext",
    "Pipeline",
    "compute_frame",
    "create_pipeline",
]
