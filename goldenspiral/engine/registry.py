"""Stage registry — frame stages are plain functions collected by the @stage decorator.

    @stage(id="S1.01", layer=Layer.GEOMETRY, dependencies=["S0.01"])
    def square_placement(ctx: SpiralContext) -> None:
        ctx.positions = place(ctx.sizes)

Each module under engine/stages registers itself on import.
"""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from goldenspiral.engine.context import SpiralContext

logger = logging.getLogger(__name__)

StageFn = Callable[["SpiralContext"], None]


class Layer(enum.IntEnum):
    SEQUENCE = 0
    GEOMETRY = 1
    VIEWPORT = 2
    ANIMATION = 3


@dataclass
class StageSpec:
    id: str
    layer: Layer
    fn: StageFn
    dependencies: list[str] = field(default_factory=list)
    description: str = ""


class StageRegistry:
    def __init__(self) -> None:
        self._stages: dict[str, StageSpec] = {}

    def register(self, spec: StageSpec) -> None:
        if spec.id in self._stages:
            raise ValueError(f"Duplicate stage ID: {spec.id}")
        self._stages[spec.id] = spec
        logger.debug("Registered stage %s in layer %s", spec.id, spec.layer.name)

    def get(self, stage_id: str) -> StageSpec:
        return self._stages[stage_id]

    def get_layer(self, layer: Layer) -> list[StageSpec]:
        return [s for s in self.all() if s.layer == layer]

    def all(self) -> list[StageSpec]:
        return sorted(self._stages.values(), key=lambda s: (s.layer, s.id))

    def dependencies_of(self, stage_ids: set[str]) -> set[str]:
        """``stage_ids`` plus every stage they transitively depend on."""
        closure: set[str] = set()
        pending = list(stage_ids)
        while pending:
            sid = pending.pop()
            if sid in closure or sid not in self._stages:
                continue
            closure.add(sid)
            pending.extend(self._stages[sid].dependencies)
        return closure

    def resolve_order(self, requested_ids: set[str] | None = None) -> list[StageSpec]:
        """Stages in dependency order, ties broken by id. None selects every stage."""
        if requested_ids is None:
            selected = dict(self._stages)
        else:
            keep = self.dependencies_of(requested_ids)
            selected = {sid: s for sid, s in self._stages.items() if sid in keep}

        waiting: dict[str, int] = {}
        dependents: dict[str, list[str]] = {sid: [] for sid in selected}
        for sid, spec in selected.items():
            known = [dep for dep in spec.dependencies if dep in selected]
            waiting[sid] = len(known)
            for dep in known:
                dependents[dep].append(sid)

        ready = [sid for sid, n in waiting.items() if n == 0]
        heapq.heapify(ready)
        ordered: list[StageSpec] = []
        while ready:
            sid = heapq.heappop(ready)
            ordered.append(selected[sid])
            for child in dependents[sid]:
                waiting[child] -= 1
                if waiting[child] == 0:
                    heapq.heappush(ready, child)

        if len(ordered) < len(selected):
            stuck = sorted(sid for sid, n in waiting.items() if n > 0)
            raise ValueError(f"Circular dependency detected among: {stuck}")
        return ordered

    def __len__(self) -> int:
        return len(self._stages)

    @property
    def count(self) -> int:
        return len(self)


_registry = StageRegistry()


def get_registry() -> StageRegistry:
    return _registry


def stage(*, id: str, layer: Layer, dependencies: list[str] | None = None, description: str = ""):
    """Register the decorated function as a frame stage and return it unchanged."""

    def register(fn: StageFn) -> StageFn:
        _registry.register(
            StageSpec(id=id, layer=layer, fn=fn, dependencies=list(dependencies or ()), description=description)
        )
        return fn

    return register
