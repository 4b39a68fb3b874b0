"""Community zone engine."""

from zonefinder.engine.context import Community, Node
from zonefinder.engine.directions import DIRECTION_VECTORS
from zonefinder.engine.errors import DegenerateInputError, UnknownNodeError, ZoneError
from zonefinder.engine.finder import CommunityZoneFinder, zone_registry

__all__ = [
    "Community",
    "Node",
    "DIRECTION_VECTORS",
    "ZoneError",
    "DegenerateInputError",
    "UnknownNodeError",
    "CommunityZoneFinder",
    "zone_registry",
]
