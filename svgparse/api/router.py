"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from svgparse.api import events, health, path

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(events.router)
api_router.include_router(path.router)
api_router.include_router(path.paths_router)
