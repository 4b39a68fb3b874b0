"""Tests for the direction table."""

import math

import numpy as np

from zonefinder.engine.directions import DIRECTION_ANGLES, DIRECTION_COUNT, DIRECTION_VECTORS


def test_twelve_unit_vectors():
    assert DIRECTION_COUNT == 12
    assert DIRECTION_VECTORS.shape == (12, 2)
    np.testing.assert_allclose(np.linalg.norm(DIRECTION_VECTORS, axis=1), 1.0)


def test_starts_up_and_walks_clockwise():
    np.testing.assert_array_equal(DIRECTION_VECTORS[0], [0.0, 1.0])
    np.testing.assert_array_equal(DIRECTION_VECTORS[3], [1.0, 0.0])
    np.testing.assert_array_equal(DIRECTION_VECTORS[6], [0.0, -1.0])
    np.testing.assert_array_equal(DIRECTION_VECTORS[9], [-1.0, 0.0])
    assert DIRECTION_VECTORS[1][0] == 0.5
    assert DIRECTION_VECTORS[2][1] == 0.5


def test_angles_match_vectors():
    assert DIRECTION_ANGLES[:4] == [90, 60, 30, 0]
    for (dx, dy), deg in zip(DIRECTION_VECTORS, DIRECTION_ANGLES):
        assert math.isclose(dx, math.cos(math.radians(deg)), abs_tol=1e-12)
        assert math.isclose(dy, math.sin(math.radians(deg)), abs_tol=1e-12)


def test_table_is_read_only():
    assert not DIRECTION_VECTORS.flags.writeable
