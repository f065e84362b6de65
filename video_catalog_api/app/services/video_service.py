"""
Business logic for videos.

The ``VideoService`` keeps videos in an in‑memory list that preserves
insertion order.  Uploads are mocked: no file is received, and the
file related fields (filename, URLs, duration, size) are synthesised
from the title and from a ``VideoMetadataGenerator``.  Records are
never deleted; only the title can be changed after creation.
"""

import logging
import re
from typing import List, Optional
from uuid import UUID

from ..core.errors import RecordNotFoundError
from ..schemas.video import VideoCreate, VideoPage, VideoRead, VideoUpdate
from .metadata import VideoMetadataGenerator

VIDEO_MIME_TYPE = "video/mp4"
MAX_DURATION_SECONDS = 3600
MAX_FILE_SIZE_BYTES = 100_000_000

_WHITESPACE = re.compile(r"\s+")


def slugify_filename(title: str) -> str:
    """Build the stored filename: lowercase title, whitespace runs as ``-``."""
    return f"{_WHITESPACE.sub('-', title.lower())}.mp4"


class VideoService:
    """Owns the video collection for one application instance."""

    def __init__(
        self,
        generator: Optional[VideoMetadataGenerator] = None,
        media_base_url: str = "https://example.com",
        upload_base_url: str = "https://upload.example.com",
    ) -> None:
        self._videos: List[VideoRead] = []
        self.generator = generator or VideoMetadataGenerator()
        self.media_base_url = media_base_url.rstrip("/")
        self.upload_base_url = upload_base_url.rstrip("/")

    def list_videos(self, limit: int = 10, offset: int = 0, user_id: Optional[UUID] = None) -> VideoPage:
        """Return one page of videos, optionally restricted to one owner.

        ``total`` counts the filtered videos before slicing, so an
        ``offset`` past the end gives an empty page with the real total.
        """
        if limit < 1:
            raise ValueError(f"limit must be >= 1, got {limit}")
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        videos = self._videos
        if user_id is not None:
            videos = [v for v in videos if v.user_id == user_id]
        return VideoPage(
            videos=videos[offset:offset + limit],
            total=len(videos),
            limit=limit,
            offset=offset,
        )

    def get_video(self, video_id: UUID) -> VideoRead:
        return self._videos[self._index_of(video_id)]

    def upload_video(self, data: VideoCreate) -> VideoRead:
        """Register a mocked upload and return the stored record."""
        logger = logging.getLogger(__name__)
        gen = self.generator
        video = VideoRead(
            id=gen.new_id(),
            title=data.title,
            filename=slugify_filename(data.title),
            url=f"{self.media_base_url}/videos/{gen.new_id()}.mp4",
            thumbnail=f"{self.media_base_url}/thumbnails/{gen.new_id()}.jpg",
            duration=gen.randint(MAX_DURATION_SECONDS),
            file_size=gen.randint(MAX_FILE_SIZE_BYTES),
            mime_type=VIDEO_MIME_TYPE,
            uploaded_at=gen.now(),
            user_id=data.user_id,
        )
        self._videos.append(video)
        logger.info("User %s uploaded video %s (%s)", video.user_id, video.id, video.filename)
        return video

    def upload_url_for(self, video: VideoRead) -> str:
        return f"{self.upload_base_url}/{video.id}"

    def update_video(self, video_id: UUID, updates: VideoUpdate) -> VideoRead:
        """Overwrite the fields present in ``updates`` and return the record.

        Fields the client did not send are left as they are.
        """
        logger = logging.getLogger(__name__)
        index = self._index_of(video_id)
        changes = updates.model_dump(exclude_unset=True)
        if changes:
            self._videos[index] = self._videos[index].model_copy(update=changes)
            logger.info("Updated video %s: %s", video_id, ", ".join(sorted(changes)))
        return self._videos[index]

    def _index_of(self, video_id: UUID) -> int:
        for index, video in enumerate(self._videos):
            if video.id == video_id:
                return index
        logging.getLogger(__name__).warning("Video %s not found", video_id)
        raise RecordNotFoundError("Video", video_id)
