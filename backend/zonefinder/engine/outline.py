"""12-direction extremal projection.

For each direction d and member offset r = p - center the candidate is

    q = (|r|^2 / (r . d)) * d

and the outline point is the candidate with the largest |q.x|, starting
from (0, 0) and replacing only on a strict increase. Only the x component
is compared, so the two vertical directions always stay at (0, 0).

Floating point is left to IEEE-754: r . d == 0 gives an infinite scale,
inf * 0 gives nan. nan never wins the comparison, an infinite x always does.
A single-node community has r = (0, 0) and keeps (0, 0) everywhere.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from zonefinder.engine.context import Node
from zonefinder.engine.directions import DIRECTION_COUNT, DIRECTION_VECTORS


def projection_candidates(
    offsets: NDArray[np.float64],
    directions: NDArray[np.float64] = DIRECTION_VECTORS,
) -> NDArray[np.float64]:
    """Candidate points for every (node, direction) pair, shape (n, k, 2)."""
    length = np.sqrt(offsets[:, 0] * offsets[:, 0] + offsets[:, 1] * offsets[:, 1])
    # (n, k)
    dots = offsets[:, 0:1] * directions[:, 0] + offsets[:, 1:2] * directions[:, 1]
    with np.errstate(divide="ignore", invalid="ignore"):
        scale = (length * length)[:, None] / dots
        return scale[:, :, None] * directions[None, :, :]


def select_outline(candidates: NDArray[np.float64]) -> NDArray[np.float64]:
    """Reduce (n, k, 2) candidates to k points by first-max of |x| over (0, 0)."""
    n, k = candidates.shape[:2]
    outline = np.zeros((k, 2), dtype=np.float64)
    if n == 0:
        return outline

    key = np.abs(candidates[:, :, 0])
    # nan loses every comparison; -1 keeps it below the 0 accumulator
    key = np.where(np.isnan(key), -1.0, key)
    best = np.argmax(key, axis=0)  # first occurrence on ties
    cols = np.arange(k)
    wins = key[best, cols] > 0.0
    outline[wins] = candidates[best[wins], cols[wins]]
    return outline


def project_outline(
    nodes: Sequence[Node],
    center: tuple[float, float],
) -> NDArray[np.float64]:
    """Outline offsets from ``center``: one point per direction vector, shape (12, 2)."""
    if len(nodes) == 0:
        return np.zeros((DIRECTION_COUNT, 2), dtype=np.float64)

    positions = np.array([(n.x, n.y) for n in nodes], dtype=np.float64)
    offsets = positions - np.asarray(center, dtype=np.float64)
    return select_outline(projection_candidates(offsets))
