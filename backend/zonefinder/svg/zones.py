"""Paint community zones as SVG.

A zone is traced through its outline points with quadratic curves: move to
the first point, curve through every interior point to the midpoint of it and
its successor, line to the last point, close. Commands whose coordinates are
not finite are dropped, the same way a canvas ignores them.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from zonefinder.engine.config import ZoneStyleConfig
from zonefinder.engine.context import Community
from zonefinder.svg.serializer import format_number, serialize_svg
from zonefinder.utils.geometry import bbox, finite_points, midpoint


def _finite(*points: NDArray[np.float64]) -> bool:
    return all(bool(np.all(np.isfinite(p))) for p in points)


def _xy(p: NDArray[np.float64]) -> str:
    return f"{format_number(float(p[0]))} {format_number(float(p[1]))}"


def zone_path_data(points: NDArray[np.float64]) -> str:
    """SVG path ``d`` for a closed zone through ``points`` (canvas coordinates)."""
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 2)
    n = len(pts)
    if n == 0:
        return ""

    parts: list[str] = []
    started = False

    if _finite(pts[0]):
        parts.append(f"M {_xy(pts[0])}")
        started = True

    for i in range(1, n - 1):
        ctrl = pts[i]
        end = midpoint(pts[i], pts[i + 1])
        if not _finite(ctrl, end):
            continue
        if not started:
            # No current point yet: the curve starts at its control point
            parts.append(f"M {_xy(ctrl)}")
            started = True
        parts.append(f"Q {_xy(ctrl)} {_xy(end)}")

    last = pts[n - 1]
    if n > 1 and _finite(last):
        if started:
            parts.append(f"L {_xy(last)}")
        else:
            parts.append(f"M {_xy(last)}")
            started = True

    if not started:
        return ""
    parts.append("Z")
    return " ".join(parts)


def fit_viewbox(
    communities: Sequence[Community],
    style: ZoneStyleConfig,
) -> tuple[float, float, float, float]:
    """(min_x, min_y, width, height) around every finite zone point and node."""
    chunks = [finite_points(c.zone_points) for c in communities]
    chunks += [np.array([(n.x, n.y) for n in c.nodes], dtype=np.float64) for c in communities if c.nodes]
    pts = finite_points(np.concatenate(chunks)) if chunks else np.empty((0, 2))

    if len(pts) == 0:
        half = style.min_extent / 2
        return (-half, -half, style.min_extent, style.min_extent)

    xmin, ymin, xmax, ymax = bbox(pts)
    extent = max(xmax - xmin, ymax - ymin, style.min_extent)
    pad = extent * style.padding_pct
    cx = (xmin + xmax) / 2
    cy = (ymin + ymax) / 2
    size = extent + 2 * pad
    return (cx - size / 2, cy - size / 2, size, size)


def zone_elements(
    communities: Sequence[Community],
    style: ZoneStyleConfig | None = None,
) -> list[dict[str, str]]:
    """Zone paths (in community order) followed by node markers."""
    style = style or ZoneStyleConfig()
    elements: list[dict[str, str]] = []

    for i, community in enumerate(communities):
        d = zone_path_data(community.zone_points)
        if not d:
            continue
        elements.append({
            "tag": "path",
            "d": d,
            "fill": style.fill_for(i),
            "data-group": "" if community.group is None else str(community.group),
        })

    if style.draw_nodes:
        for community in communities:
            for node in community.nodes:
                elements.append({
                    "tag": "circle",
                    "cx": format_number(node.x),
                    "cy": format_number(node.y),
                    "r": format_number(style.node_radius),
                    "fill": style.node_fill,
                    "data-node": str(node.id),
                })

    return elements


def render_zones_svg(
    communities: Sequence[Community],
    style: ZoneStyleConfig | None = None,
    title: str = "",
) -> str:
    """Full SVG document with one filled zone per community."""
    style = style or ZoneStyleConfig()
    return serialize_svg(
        zone_elements(communities, style),
        viewbox=fit_viewbox(communities, style),
        title=title,
        description=f"{len(communities)} community zones",
    )
