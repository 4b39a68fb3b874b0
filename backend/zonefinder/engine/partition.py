"""Group nodes into per-community buckets.

Buckets are created on first sight of a group id and kept in that order.
Nodes without a group land in the default bucket, which always exists and
always comes first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Hashable

from zonefinder.engine.context import GroupId, Node
from zonefinder.engine.errors import UnknownNodeError

logger = logging.getLogger(__name__)

DEFAULT_GROUP: GroupId = None


class Partition:
    """Ordered mapping of group id -> member nodes for one solve pass."""

    def __init__(self) -> None:
        self._buckets: dict[GroupId, list[Node]] = {DEFAULT_GROUP: []}

    def add(self, node: Node) -> None:
        group = node.group
        if group not in self._buckets:
            self._buckets[group] = []
        self._buckets[group].append(node)

    def __getitem__(self, group: GroupId) -> list[Node]:
        return self._buckets[group]

    def __contains__(self, group: object) -> bool:
        return group in self._buckets

    def __len__(self) -> int:
        return len(self._buckets)

    def groups(self) -> list[GroupId]:
        """All bucket keys, the (possibly empty) default bucket included."""
        return list(self._buckets)

    def buckets(self) -> Iterator[tuple[GroupId, list[Node]]]:
        """Non-empty buckets in creation order."""
        for group, members in self._buckets.items():
            if members:
                yield group, members

    @property
    def community_count(self) -> int:
        return sum(1 for members in self._buckets.values() if members)


def partition_by_group(
    nodes: Mapping[Hashable, Node],
    node_indices: Iterable[Hashable],
) -> Partition:
    """Bucket the active nodes by group, in ``node_indices`` order."""
    partition = Partition()
    for node_id in node_indices:
        try:
            node = nodes[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None
        partition.add(node)

    logger.debug(
        "Partitioned into %d communities (%d buckets)",
        partition.community_count,
        len(partition),
    )
    return partition
