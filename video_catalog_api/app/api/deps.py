"""
FastAPI dependencies that hand the per‑application services to routes.

``create_app`` stores the services on ``app.state``; routes ask for
them with ``Depends(get_user_service)`` / ``Depends(get_video_service)``.
Tests may also override these providers through
``app.dependency_overrides``.
"""

from fastapi import Request

from ..services.user_service import UserService
from ..services.video_service import VideoService


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_video_service(request: Request) -> VideoService:
    return request.app.state.video_service
