"""Golden ratio convergence of consecutive magnitudes.

Display-only: nothing here feeds back into placement or fitting.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from goldenspiral.engine.types import RatioInfo

PHI = 1.618033988749895


def _as_array(values: Sequence[float]) -> NDArray[np.float64]:
    return np.asarray(values, dtype=np.float64)


def ratios(sequence: Sequence[int]) -> list[float]:
    """ratios[i] = sequence[i+1] / sequence[i]. Empty for fewer than 2 values."""
    if len(sequence) < 2:
        return []
    seq = _as_array(sequence)
    return [float(r) for r in seq[1:] / seq[:-1]]


def convergence(values: Sequence[float]) -> list[float]:
    """Absolute distance of each ratio from PHI (smaller = closer)."""
    if len(values) == 0:
        return []
    return [float(d) for d in np.abs(_as_array(values) - PHI)]


def ratio_info(sequence: Sequence[int], index: int) -> RatioInfo | None:
    """Ratio of sequence[index+1] / sequence[index], or None when out of range."""
    if index < 0 or index >= len(sequence) - 1:
        return None

    numerator = int(sequence[index + 1])
    denominator = int(sequence[index])
    ratio = numerator / denominator
    return RatioInfo(
        numerator=numerator,
        denominator=denominator,
        ratio=ratio,
        convergence=abs(ratio - PHI),
    )


def ratio_table(sequence: Sequence[int]) -> list[RatioInfo]:
    """RatioInfo for every consecutive pair, in order."""
    table = []
    for i in range(len(sequence) - 1):
        info = ratio_info(sequence, i)
        if info is not None:
            table.append(info)
    return table


def closest_index(sequence: Sequence[int]) -> int:
    """Index of the ratio closest to PHI, -1 if there is no ratio.

    Ties resolve to the first occurrence (np.argmin scans left to right).
    """
    dist = convergence(ratios(sequence))
    if not dist:
        return -1
    return int(np.argmin(dist))
