"""Shared test fixtures."""

from __future__ import annotations

import pytest

from zonefinder.engine.context import Node


def make_nodes(positions: list[tuple[float, float]], group=None) -> list[Node]:
    return [Node(id=i, x=x, y=y, group=group) for i, (x, y) in enumerate(positions)]


def as_collection(nodes: list[Node]) -> dict:
    return {n.id: n for n in nodes}


# Four nodes on the axes around the origin
SQUARE = [(10.0, 0.0), (-10.0, 0.0), (0.0, 10.0), (0.0, -10.0)]

# No two nodes tie on |x| for any direction, nothing perpendicular to an axis
SCATTER = [(3.0, 1.0), (-2.0, 5.0), (-4.0, -3.0), (6.0, -2.0)]

# Three communities plus two ungrouped nodes, as a JSON request body
GRAPH_BODY = {
    "nodes": {
        "a1": {"x": 0, "y": 0, "group": 1},
        "a2": {"x": 40, "y": 10, "group": 1},
        "a3": {"x": 20, "y": 35, "group": 1},
        "b1": {"x": 200, "y": 200, "group": "blue"},
        "b2": {"x": 230, "y": 180, "group": "blue"},
        "c1": {"x": -100, "y": 50, "group": 7},
        "u1": {"x": 90, "y": 90},
        "u2": {"x": 95, "y": 120},
    },
}


@pytest.fixture
def square_nodes() -> list[Node]:
    return make_nodes(SQUARE, group="sq")


@pytest.fixture
def scatter_nodes() -> list[Node]:
    return make_nodes(SCATTER, group="sc")


@pytest.fixture
def graph_body() -> dict:
    return GRAPH_BODY
