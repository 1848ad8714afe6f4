"""FastAPI dependency injection."""

from __future__ import annotations

from polyspiral.config import Settings, settings
from polyspiral.engine import EngineConfig


def get_settings() -> Settings:
    return settings


def get_engine_config() -> EngineConfig:
    return EngineConfig(max_segments=settings.max_segments)
