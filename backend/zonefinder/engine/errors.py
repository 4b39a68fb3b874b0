"""Zone engine errors."""

from __future__ import annotations


class ZoneError(Exception):
    """Base class for failures that abort a solve pass."""


class DegenerateInputError(ZoneError, ValueError):
    """A community with no members reached the centroid step."""


class UnknownNodeError(ZoneError, KeyError):
    """An active node index has no entry in the node collection."""

    def __init__(self, node_id: object) -> None:
        super().__init__(node_id)
        self.node_id = node_id

    def __str__(self) -> str:
        return f"Unknown node id: {self.node_id!r}"
