"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from zonefinder.engine.context import Node


class NodeIn(BaseModel):
    x: float = Field(..., description="Node x position")
    y: float = Field(..., description="Node y position")
    group: int | str | None = Field(default=None, description="Community / group identifier")


class ZonesRequest(BaseModel):
    nodes: dict[str, NodeIn] = Field(..., description="Node id -> position and group")
    active: list[str] | None = Field(
        default=None,
        description="Ordered ids of participating nodes (defaults to every node, in order)",
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Finder options (reserved)",
    )

    def to_nodes(self) -> dict[str, Node]:
        return {
            node_id: Node(id=node_id, x=n.x, y=n.y, group=n.group)
            for node_id, n in self.nodes.items()
        }
