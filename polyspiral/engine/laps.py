"""Lap position resolver — how many insets and outsets apply at a given side."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def lap_counts(side: int, sides: int) -> tuple[int, int]:
    """Return (num_insets, num_outsets) for the 1-based `side`.

    Three counters offset by 0, 1 and 2 sides tick once per full lap. The
    leading and trailing counters add an inset each; the middle one adds a
    pair of outsets.
    """
    if side < 1:
        raise ValueError(f"side is 1-based, got {side}")
    if sides < 3:
        raise ValueError(f"sides must be at least 3, got {sides}")
    a = side // sides
    b = max(side - 1, 0) // sides
    c = max(side - 2, 0) // sides
    return a + c, 2 * b


def lap_count_table(count: int, sides: int) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Vectorized lap_counts for sides 1..count."""
    if sides < 3:
        raise ValueError(f"sides must be at least 3, got {sides}")
    side = np.arange(1, count + 1, dtype=np.int64)
    a = side // sides
    b = np.maximum(side - 1, 0) // sides
    c = np.maximum(side - 2, 0) // sides
    return a + c, 2 * b
