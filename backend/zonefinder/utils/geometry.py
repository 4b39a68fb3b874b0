"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def finite_points(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Drop rows holding inf or nan."""
    points = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    return points[np.all(np.isfinite(points), axis=1)]


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


def midpoint(a: NDArray[np.float64], b: NDArray[np.float64]) -> NDArray[np.float64]:
    with np.errstate(invalid="ignore"):
        return (np.asarray(a, dtype=np.float64) + np.asarray(b, dtype=np.float64)) / 2
