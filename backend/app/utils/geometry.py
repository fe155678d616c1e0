"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def bbox(points: NDArray[np.float64]) -> tuple[float, float, float, float]:
    """Compute (xmin, ymin, xmax, ymax) bounding box."""
    if len(points) == 0:
        return (0.0, 0.0, 0.0, 0.0)
    return (
        float(np.min(points[:, 0])),
        float(np.min(points[:, 1])),
        float(np.max(points[:, 0])),
        float(np.max(points[:, 1])),
    )


def points_from_flat(values: list[float]) -> NDArray[np.float64]:
    """Pair a flat [x0, y0, x1, y1, ...] list into an Nx2 array. A trailing odd value is dropped."""
    n = len(values) // 2
    if n == 0:
        return np.empty((0, 2))
    return np.asarray(values[: n * 2], dtype=np.float64).reshape(n, 2)
