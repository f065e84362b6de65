"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under their prefixes.  When
new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, users, videos

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(videos.router, prefix="/videos", tags=["videos"])
router.include_router(health.router, tags=["health"])
