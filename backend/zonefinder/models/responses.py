"""API response models."""

from __future__ import annotations

import math

from pydantic import BaseModel, Field

from zonefinder.engine.context import Community


def _finite_or_none(value: float) -> float | None:
    return float(value) if math.isfinite(value) else None


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    directions: int = 0


class CommunityOut(BaseModel):
    group: int | str | None = None
    node_count: int = 0
    nodes: list[str] = Field(default_factory=list)
    center: tuple[float, float] = (0.0, 0.0)
    # Offsets from center; non-finite coordinates become null
    outline: list[tuple[float | None, float | None]] = Field(default_factory=list)
    zone_area: float = 0.0
    coverage: float = 0.0

    @classmethod
    def from_community(cls, community: Community) -> CommunityOut:
        return cls(
            group=community.group,
            node_count=community.node_count,
            nodes=[str(n.id) for n in community.nodes],
            center=community.center,
            outline=[(_finite_or_none(x), _finite_or_none(y)) for x, y in community.outline],
            zone_area=round(community.zone_area, 2),
            coverage=round(community.coverage, 4),
        )


class ZonesResponse(BaseModel):
    communities: list[CommunityOut] = Field(default_factory=list)
    community_count: int = 0
    processing_time_ms: float = 0.0
