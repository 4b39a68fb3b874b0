"""Fixed direction table for outline sampling.

12 unit vectors, 30° apart, starting at +y (90°) and walking clockwise.
Row order is the outline point order; the renderer joins points in sequence.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

_HALF = 1 / 2
_ROOT3_HALF = np.sqrt(3) / 2

DIRECTION_VECTORS: NDArray[np.float64] = np.array(
    [
        [0.0, 1.0],
        [_HALF, _ROOT3_HALF],
        [_ROOT3_HALF, _HALF],
        [1.0, 0.0],
        [_ROOT3_HALF, -_HALF],
        [_HALF, -_ROOT3_HALF],
        [0.0, -1.0],
        [-_HALF, -_ROOT3_HALF],
        [-_ROOT3_HALF, -_HALF],
        [-1.0, 0.0],
        [-_ROOT3_HALF, _HALF],
        [-_HALF, _ROOT3_HALF],
    ],
    dtype=np.float64,
)
DIRECTION_VECTORS.setflags(write=False)

DIRECTION_COUNT = len(DIRECTION_VECTORS)  # 12

# Compass-style angles (degrees) for each row, useful for labelling
DIRECTION_ANGLES = [(90 - 30 * j) % 360 for j in range(DIRECTION_COUNT)]
