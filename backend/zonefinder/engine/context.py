"""Node and Community records shared by the zone engine.

Nodes are owned by the caller's graph model and only read here.
Communities are rebuilt from scratch on every solve pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable

import numpy as np
from numpy.typing import NDArray
from shapely.geometry import Point, Polygon
from shapely.geometry.base import BaseGeometry

from zonefinder.engine.directions import DIRECTION_COUNT

GroupId = Hashable  # None marks "no group"


@dataclass(frozen=True)
class Node:
    """A positioned graph node."""

    id: Hashable
    x: float
    y: float
    group: GroupId = None


@dataclass(eq=False)
class Community:
    """Geometry of one group for a single solve pass."""

    group: GroupId
    # Member nodes in partition (input) order
    nodes: list[Node]
    # Arithmetic mean of member positions
    center: tuple[float, float]
    # 12x2 offsets from center, one row per direction vector (may hold inf / nan)
    outline: NDArray[np.float64] = field(
        default_factory=lambda: np.zeros((DIRECTION_COUNT, 2))
    )

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def zone_points(self) -> NDArray[np.float64]:
        """Outline translated into canvas coordinates."""
        return self.outline + np.asarray(self.center, dtype=np.float64)

    @property
    def zone_polygon(self) -> BaseGeometry | None:
        """Polygon over the finite zone points; None when fewer than 3 distinct ones."""
        pts = self.zone_points
        pts = pts[np.all(np.isfinite(pts), axis=1)]
        if len(np.unique(pts, axis=0)) < 3:
            return None
        poly = Polygon(pts)
        if not poly.is_valid:
            poly = poly.buffer(0)
        if poly.is_empty:
            return None
        return poly

    @property
    def zone_area(self) -> float:
        poly = self.zone_polygon
        if poly is None:
            return 0.0
        return float(poly.area)

    @property
    def coverage(self) -> float:
        """Fraction of member nodes inside or on the zone polygon."""
        poly = self.zone_polygon
        if poly is None or not self.nodes:
            return 0.0
        inside = sum(1 for n in self.nodes if poly.covers(Point(n.x, n.y)))
        return inside / len(self.nodes)
