"""POST /api/zones: community zone outlines for a node snapshot."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from zonefinder.dependencies import get_zone_style
from zonefinder.engine.config import ZoneStyleConfig
from zonefinder.engine.context import Community
from zonefinder.engine.errors import ZoneError
from zonefinder.engine.finder import CommunityZoneFinder
from zonefinder.models.requests import ZonesRequest
from zonefinder.models.responses import CommunityOut, ZonesResponse
from zonefinder.svg.zones import render_zones_svg

logger = logging.getLogger(__name__)

router = APIRouter()


def _solve(req: ZonesRequest) -> list[Community]:
    finder = CommunityZoneFinder(req.to_nodes(), node_indices=req.active, options=req.options)
    try:
        return finder.solve()
    except ZoneError as e:
        logger.warning("Zone solve failed: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e


@router.post("/zones", response_model=ZonesResponse)
async def zones(req: ZonesRequest) -> ZonesResponse:
    start = time.perf_counter()
    communities = _solve(req)
    elapsed = (time.perf_counter() - start) * 1000

    return ZonesResponse(
        communities=[CommunityOut.from_community(c) for c in communities],
        community_count=len(communities),
        processing_time_ms=round(elapsed, 3),
    )


@router.post("/zones/svg")
async def zones_svg(
    req: ZonesRequest,
    style: ZoneStyleConfig = Depends(get_zone_style),
) -> Response:
    communities = _solve(req)
    svg = render_zones_svg(communities, style=style, title="Community zones")
    return Response(content=svg, media_type="image/svg+xml")
