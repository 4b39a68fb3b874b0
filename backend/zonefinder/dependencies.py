"""FastAPI dependency injection."""

from __future__ import annotations

from zonefinder.config import Settings, settings
from zonefinder.engine.config import ZoneStyleConfig


def get_settings() -> Settings:
    return settings


def get_zone_style() -> ZoneStyleConfig:
    return ZoneStyleConfig()
