"""
Pydantic models for video data.

``VideoRead`` describes a stored video record.  Only ``title`` and
``userId`` come from the client (``VideoCreate``); the remaining
fields are synthesised by ``VideoService.upload_video``.  ``VideoUpdate``
is a partial payload: fields that are not sent are left untouched.
``VideoPage`` is one slice of the listing; its bounds are the
``DEFAULT_PAGE_LIMIT`` and ``MAX_PAGE_LIMIT`` constants.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from pydantic import Field, field_validator

from .common import ApiModel

TITLE_MIN_LENGTH = 1
TITLE_MAX_LENGTH = 100

DEFAULT_PAGE_LIMIT = 10
MAX_PAGE_LIMIT = 100


class VideoRead(ApiModel):
    """Schema for reading a video from the API."""

    id: UUID
    title: str
    filename: str
    url: str = Field(..., example="https://example.com/videos/3b9a….mp4")
    thumbnail: Optional[str] = Field(None, example="https://example.com/thumbnails/3b9a….jpg")
    # The mocked upload draws duration and size from ranges that start
    # at zero, so zero is accepted here.
    duration: Optional[int] = Field(None, ge=0, description="Length in seconds")
    file_size: int = Field(..., ge=0, description="Size in bytes")
    mime_type: str = Field(..., example="video/mp4")
    uploaded_at: datetime
    user_id: UUID


class VideoCreate(ApiModel):
    """Schema for the mocked upload request."""

    title: str = Field(..., min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH, example="My Clip")
    user_id: UUID = Field(..., example="11111111-1111-1111-1111-111111111111")


class VideoUpdate(ApiModel):
    """Schema for updating video metadata.

    All fields are optional; only provided fields will be updated.
    """

    title: Optional[str] = Field(None, min_length=TITLE_MIN_LENGTH, max_length=TITLE_MAX_LENGTH)

    @field_validator("title")
    @classmethod
    def reject_null_title(cls, v: Optional[str]) -> str:
        # Omitting ``title`` leaves it unchanged; sending ``null`` is an error.
        if v is None:
            raise ValueError("title may be omitted but not null")
        return v


class VideoUploadResponse(ApiModel):
    id: UUID
    message: str
    upload_url: Optional[str] = None


class VideoPage(ApiModel):
    """One page of the (optionally filtered) video listing."""

    videos: List[VideoRead]
    total: int
    limit: int
    offset: int
