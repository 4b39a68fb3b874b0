"""Community center of mass."""

from __future__ import annotations

from collections.abc import Sequence

from zonefinder.engine.context import Node
from zonefinder.engine.errors import DegenerateInputError


def community_center(nodes: Sequence[Node]) -> tuple[float, float]:
    """Arithmetic mean of node positions, summed in input order."""
    if len(nodes) == 0:
        raise DegenerateInputError("Cannot compute the center of an empty community")
    sum_x = 0.0
    sum_y = 0.0
    for node in nodes:
        sum_x += node.x
        sum_y += node.y
    return (sum_x / len(nodes), sum_y / len(nodes))
