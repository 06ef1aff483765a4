"""Pipeline orchestrator — runs frame stages in dependency order."""

from __future__ import annotations

import importlib
import logging
import pkgutil
import time

from goldenspiral.engine.config import PipelineConfig
from goldenspiral.engine.context import SpiralContext
from goldenspiral.engine.registry import Layer, StageRegistry, get_registry
from goldenspiral.engine.types import Viewport

logger = logging.getLogger(__name__)

_STAGE_PACKAGE = "goldenspiral.engine.stages"


def register_stages() -> int:
    """Import every stage module so @stage decorators fire. Returns the stage count."""
    package = importlib.import_module(_STAGE_PACKAGE)
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{_STAGE_PACKAGE}.{module_name}")
    return get_registry().count


class Pipeline:
    """Orchestrates the stage pipeline."""

    def __init__(
        self,
        registry: StageRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or PipelineConfig()

    def run(self, ctx: SpiralContext) -> SpiralContext:
        """Run every registered stage on the given context."""
        start = time.perf_counter()
        ctx.config = self.config

        ordered = self.registry.resolve_order()
        logger.debug("Pipeline: %d stages queued (n=%d)", len(ordered), ctx.n)

        for spec in ordered:
            self._run_stage(spec, ctx)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d stages in %.1fms",
            len(ctx.completed_stages),
            len(ordered),
            total,
        )
        return ctx

    def run_layer(self, ctx: SpiralContext, layer: Layer) -> SpiralContext:
        """Run only stages in a specific layer."""
        ctx.config = self.config
        for spec in self.registry.get_layer(layer):
            self._run_stage(spec, ctx)
        return ctx

    def _run_stage(self, spec, ctx: SpiralContext) -> None:
        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
        except Exception as e:
            if self.config.fail_fast:
                logger.warning("  %s FAILED: %s", spec.id, e)
                raise
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED (recorded): %s", spec.id, e)
            return
        ctx.completed_stages.add(spec.id)
        elapsed = (time.perf_counter() - t0) * 1000
        logger.debug("  %s completed in %.2fms", spec.id, elapsed)


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline with all stages registered."""
    register_stages()
    return Pipeline(config=config)


def compute_frame(
    n: int,
    viewport: Viewport,
    progress: float = 1.0,
    config: PipelineConfig | None = None,
) -> SpiralContext:
    """Build one complete frame. Raises ValueError for n <= 0 or a non-positive viewport."""
    ctx = SpiralContext(n=n, viewport=viewport, progress=max(0.0, min(1.0, progress)))
    return create_pipeline(config).run(ctx)
