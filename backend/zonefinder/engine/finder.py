"""CommunityZoneFinder: partitions nodes and computes one zone outline per community."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Hashable

from zonefinder.engine.centroid import community_center
from zonefinder.engine.context import Community, GroupId, Node
from zonefinder.engine.outline import project_outline
from zonefinder.engine.partition import partition_by_group

logger = logging.getLogger(__name__)

ZoneRenderer = Callable[[list[Community]], None]

# Options the finder understands; none of them change the computation yet.
KNOWN_OPTIONS: frozenset[str] = frozenset()


def build_community(group: GroupId, nodes: list[Node]) -> Community:
    center = community_center(nodes)
    return Community(
        group=group,
        nodes=nodes,
        center=center,
        outline=project_outline(nodes, center),
    )


class CommunityZoneFinder:
    """Computes community zones from the current node positions.

    ``nodes`` and ``node_indices`` belong to the caller and are re-read on
    every ``solve()``; nothing is cached between passes.
    """

    def __init__(
        self,
        nodes: Mapping[Hashable, Node],
        node_indices: Sequence[Hashable] | None = None,
        options: Mapping[str, Any] | None = None,
        renderer: ZoneRenderer | None = None,
    ) -> None:
        self.nodes = nodes
        self.node_indices = node_indices
        self.renderer = renderer
        self.options: dict[str, Any] = {}
        self.configure(options)

    def configure(self, options: Mapping[str, Any] | None) -> None:
        self.options = dict(options or {})
        unknown = set(self.options) - KNOWN_OPTIONS
        if unknown:
            logger.debug("Ignoring unrecognized zone options: %s", sorted(unknown))

    def solve(self) -> list[Community]:
        """Run one full pass and hand the communities to the renderer."""
        start = time.perf_counter()

        indices = self.node_indices if self.node_indices is not None else list(self.nodes)
        partition = partition_by_group(self.nodes, indices)

        logger.info(
            "Zones: %d communities from %d active nodes",
            partition.community_count,
            len(indices),
        )

        communities: list[Community] = []
        for group, members in partition.buckets():
            community = build_community(group, members)
            communities.append(community)
            logger.debug(
                "  group %r: %d nodes, center=(%.2f, %.2f)",
                group,
                community.node_count,
                community.center[0],
                community.center[1],
            )

        if self.renderer is not None:
            self.renderer(communities)

        total = (time.perf_counter() - start) * 1000
        logger.info("Zones complete: %d communities in %.1fms", len(communities), total)
        return communities


def zone_registry(communities: Sequence[Community]) -> dict[GroupId, list[tuple[float, float]]]:
    """Group id -> zone points in canvas coordinates, as a renderer-side registry holds them."""
    return {
        c.group: [(float(x), float(y)) for x, y in c.zone_points]
        for c in communities
    }
