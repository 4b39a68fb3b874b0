"""Tests for CommunityZoneFinder."""

import dataclasses

import numpy as np
import pytest

from zonefinder.engine.context import Node
from zonefinder.engine.errors import UnknownNodeError
from zonefinder.engine.finder import CommunityZoneFinder, zone_registry
from tests.conftest import SCATTER, as_collection, make_nodes


def _three_groups() -> dict:
    nodes = (
        make_nodes([(0, 0), (40, 10), (20, 35)], group="a")
        + make_nodes([(200, 200), (230, 180), (215, 240)], group="b")
        + make_nodes([(-100, 50), (-60, 80)], group="c")
    )
    # make_nodes restarts ids per call
    return {i: dataclasses.replace(n, id=i) for i, n in enumerate(nodes)}


def test_solve_builds_one_community_per_group():
    finder = CommunityZoneFinder(_three_groups())
    communities = finder.solve()

    assert [c.group for c in communities] == ["a", "b", "c"]
    assert [c.node_count for c in communities] == [3, 3, 2]
    assert communities[0].center == (20.0, 15.0)
    for c in communities:
        assert c.outline.shape == (12, 2)


def test_ungrouped_nodes_form_the_first_community():
    nodes = {
        0: Node(id=1, x=0, y=0, group=5),
        1: Node(id=2, x=10, y=0, group=5),
        2: Node(id=3, x=3, y=3),
    }
    communities = CommunityZoneFinder(nodes, node_indices=[0, 1, 2]).solve()
    assert [c.group for c in communities] == [None, 5]
    assert [n.id for n in communities[0].nodes] == [3]
    assert [n.id for n in communities[1].nodes] == [1, 2]


def test_solve_is_repeatable():
    finder = CommunityZoneFinder(_three_groups())
    first = finder.solve()
    second = finder.solve()

    assert len(first) == len(second)
    for a, b in zip(first, second):
        assert a is not b
        assert a.group == b.group
        assert a.center == b.center
        np.testing.assert_array_equal(a.outline, b.outline)


def test_regrouping_a_node_only_touches_two_communities():
    nodes = _three_groups()
    finder = CommunityZoneFinder(nodes)
    before = {c.group: c for c in finder.solve()}

    nodes[2] = dataclasses.replace(nodes[2], group="b")
    after = {c.group: c for c in finder.solve()}

    assert after["a"].node_count == 2
    assert after["b"].node_count == 4
    np.testing.assert_array_equal(before["c"].outline, after["c"].outline)
    assert before["c"].center == after["c"].center
    assert not np.array_equal(before["a"].outline, after["a"].outline, equal_nan=True)


def test_renderer_receives_communities():
    received = []
    finder = CommunityZoneFinder(_three_groups(), renderer=received.append)
    communities = finder.solve()
    assert received == [communities]


def test_renderer_skipped_on_failure():
    received = []
    finder = CommunityZoneFinder(
        as_collection(make_nodes(SCATTER)),
        node_indices=[0, 1, 99],
        renderer=received.append,
    )
    with pytest.raises(UnknownNodeError):
        finder.solve()
    assert received == []


def test_configure_stores_a_copy():
    options = {"smoothing": 3}
    finder = CommunityZoneFinder({}, options=options)
    options["smoothing"] = 5
    assert finder.options == {"smoothing": 3}

    finder.configure(None)
    assert finder.options == {}


def test_no_nodes_no_communities():
    assert CommunityZoneFinder({}).solve() == []


def test_zone_registry_uses_canvas_coordinates():
    communities = CommunityZoneFinder(_three_groups()).solve()
    registry = zone_registry(communities)

    assert list(registry) == ["a", "b", "c"]
    c = communities[1]
    assert len(registry["b"]) == 12
    expected = c.outline + np.array(c.center)
    np.testing.assert_array_equal(np.array(registry["b"]), expected)
