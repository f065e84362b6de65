import itertools
import random
import uuid
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from video_catalog_api.app.core.config import Settings
from video_catalog_api.app.main import create_app
from video_catalog_api.app.services.metadata import VideoMetadataGenerator
from video_catalog_api.app.services.user_service import UserService
from video_catalog_api.app.services.video_service import VideoService

FROZEN_NOW = datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
OWNER_A = uuid.UUID("11111111-1111-1111-1111-111111111111")
OWNER_B = uuid.UUID("22222222-2222-2222-2222-222222222222")


def sequential_ids():
    counter = itertools.count(1)
    return lambda: uuid.UUID(int=next(counter))


@pytest.fixture
def generator():
    return VideoMetadataGenerator(
        id_factory=sequential_ids(),
        clock=lambda: FROZEN_NOW,
        rng=random.Random(1234),
    )


@pytest.fixture
def settings():
    return Settings(
        project_name="Video Catalog API (tests)",
        log_level="WARNING",
        log_file=None,
        api_prefix="",
        media_base_url="https://example.com",
        upload_base_url="https://upload.example.com",
    )


@pytest.fixture
def user_service():
    return UserService()


@pytest.fixture
def video_service(generator):
    return VideoService(generator=generator)


@pytest.fixture
def client(settings, generator):
    app = create_app(settings=settings, generator=generator)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def upload(client):
    """Upload a video through the API and return its id."""

    def _upload(title="My Clip", user_id=OWNER_A):
        resp = client.post("/videos/upload", json={"title": title, "userId": str(user_id)})
        assert resp.status_code == 201, resp.text
        return resp.json()["id"]

    return _upload
