"""
Video endpoints for API v1.

Listing with pagination and an owner filter, lookup by id, a mocked
upload and a partial metadata update.  Lookups that miss answer with
404 and an ``{error, message}`` body naming the requested id.
"""

from typing import Optional, Union
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse

from video_catalog_api.app.api.deps import get_video_service
from video_catalog_api.app.core.errors import RecordNotFoundError, not_found_response
from video_catalog_api.app.schemas.common import BAD_REQUEST_RESPONSE, NOT_FOUND_RESPONSE
from video_catalog_api.app.schemas.video import (
    DEFAULT_PAGE_LIMIT,
    MAX_PAGE_LIMIT,
    VideoCreate,
    VideoPage,
    VideoRead,
    VideoUpdate,
    VideoUploadResponse,
)
from video_catalog_api.app.services.video_service import VideoService


router = APIRouter()

_LOOKUP_RESPONSES = {**NOT_FOUND_RESPONSE, **BAD_REQUEST_RESPONSE}


@router.get("", response_model=VideoPage, responses=BAD_REQUEST_RESPONSE, description="List all videos")
async def list_videos(
    limit: int = Query(DEFAULT_PAGE_LIMIT, ge=1, le=MAX_PAGE_LIMIT),
    offset: int = Query(0, ge=0),
    user_id: Optional[UUID] = Query(None, alias="userId"),
    service: VideoService = Depends(get_video_service),
) -> VideoPage:
    """Return one page of videos.

    - **limit**, **offset** — pagination; an offset past the end returns
      an empty page while ``total`` still counts every match.
    - **userId** — only return videos uploaded by this user.
    """
    return service.list_videos(limit=limit, offset=offset, user_id=user_id)


@router.get("/{video_id}", response_model=VideoRead, responses=_LOOKUP_RESPONSES, description="Get video by ID")
async def get_video(
    video_id: UUID,
    service: VideoService = Depends(get_video_service),
) -> Union[VideoRead, JSONResponse]:
    try:
        return service.get_video(video_id)
    except RecordNotFoundError as e:
        return not_found_response(e)


@router.post(
    "/upload",
    response_model=VideoUploadResponse,
    responses=BAD_REQUEST_RESPONSE,
    status_code=status.HTTP_201_CREATED,
    description="Upload a new video",
)
async def upload_video(
    payload: VideoCreate,
    service: VideoService = Depends(get_video_service),
) -> VideoUploadResponse:
    """Register a video upload.

    No file is transferred: the record is created with synthetic file
    metadata and the client receives the URL it would upload to.
    """
    video = service.upload_video(payload)
    return VideoUploadResponse(
        id=video.id,
        message="Video upload initiated successfully",
        upload_url=service.upload_url_for(video),
    )


@router.patch("/{video_id}", response_model=VideoRead, responses=_LOOKUP_RESPONSES, description="Update video metadata")
async def update_video(
    video_id: UUID,
    updates: VideoUpdate,
    service: VideoService = Depends(get_video_service),
) -> Union[VideoRead, JSONResponse]:
    """Update a video's title; unspecified fields remain unchanged."""
    try:
        return service.update_video(video_id, updates)
    except RecordNotFoundError as e:
        return not_found_response(e)
