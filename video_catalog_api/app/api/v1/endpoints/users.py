"""
User endpoints for API v1.

Provide registration and listing of users.  There is no
authentication; anyone may list or register users.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from video_catalog_api.app.api.deps import get_user_service
from video_catalog_api.app.schemas.common import BAD_REQUEST_RESPONSE
from video_catalog_api.app.schemas.user import UserCreate, UserRead
from video_catalog_api.app.services.user_service import UserService


router = APIRouter()


@router.get("", response_model=List[UserRead], description="List users")
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return every registered user in creation order."""
    return service.list_users()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_class=Response,
    responses=BAD_REQUEST_RESPONSE,
    description="Create new user",
)
async def create_user(user: UserCreate, service: UserService = Depends(get_user_service)) -> Response:
    """Register a new user.

    The response has no body; clients list users to see the new record.
    """
    service.create_user(user)
    return Response(status_code=status.HTTP_201_CREATED)
