"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from polyspiral.api import health, layout, measure

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(layout.router)
api_router.include_router(measure.router)
