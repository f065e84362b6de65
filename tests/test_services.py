import uuid

import pytest

from video_catalog_api.app.core.errors import RecordNotFoundError
from video_catalog_api.app.schemas.user import UserCreate
from video_catalog_api.app.schemas.video import VideoCreate, VideoUpdate
from video_catalog_api.app.services.video_service import (
    MAX_DURATION_SECONDS,
    MAX_FILE_SIZE_BYTES,
    slugify_filename,
)

from .conftest import FROZEN_NOW, OWNER_A, OWNER_B


def _upload(service, title="My Clip", user_id=OWNER_A):
    return service.upload_video(VideoCreate(title=title, user_id=user_id))


# --- users ---

def test_list_users_starts_empty(user_service):
    assert user_service.list_users() == []


def test_create_user_appends_in_order(user_service):
    first = user_service.create_user(UserCreate(name="Ada", email="ada@example.com"))
    second = user_service.create_user(UserCreate(name="Alan", email="alan@example.com"))
    assert [u.id for u in user_service.list_users()] == [first.id, second.id]
    assert isinstance(first.id, uuid.UUID)
    assert first.id != second.id


def test_create_user_allows_duplicate_email(user_service):
    user_service.create_user(UserCreate(name="Ada", email="ada@example.com"))
    user_service.create_user(UserCreate(name="Ada", email="ada@example.com"))
    assert len(user_service.list_users()) == 2


def test_list_users_returns_a_copy(user_service):
    user_service.create_user(UserCreate(name="Ada", email="ada@example.com"))
    user_service.list_users().clear()
    assert len(user_service.list_users()) == 1


def test_services_do_not_share_state(user_service):
    from video_catalog_api.app.services.user_service import UserService

    user_service.create_user(UserCreate(name="Ada", email="ada@example.com"))
    assert UserService().list_users() == []


# --- filename ---

@pytest.mark.parametrize(
    "title, expected",
    [
        ("My Clip", "my-clip.mp4"),
        ("  Spaced   Out\tTitle ", "-spaced-out-title-.mp4"),
        ("UPPER", "upper.mp4"),
        ("line\nbreak", "line-break.mp4"),
    ],
)
def test_slugify_filename(title, expected):
    assert slugify_filename(title) == expected


# --- upload ---

def test_upload_synthesises_metadata(video_service):
    video = _upload(video_service)
    assert video.id == uuid.UUID(int=1)
    assert video.title == "My Clip"
    assert video.filename == "my-clip.mp4"
    assert video.url == f"https://example.com/videos/{uuid.UUID(int=2)}.mp4"
    assert video.thumbnail == f"https://example.com/thumbnails/{uuid.UUID(int=3)}.jpg"
    assert 0 <= video.duration < MAX_DURATION_SECONDS
    assert 0 <= video.file_size < MAX_FILE_SIZE_BYTES
    assert video.mime_type == "video/mp4"
    assert video.uploaded_at == FROZEN_NOW
    assert video.user_id == OWNER_A


def test_upload_url_contains_video_id(video_service):
    video = _upload(video_service)
    assert video_service.upload_url_for(video) == f"https://upload.example.com/{video.id}"


def test_upload_does_not_check_user_exists(video_service):
    stranger = uuid.uuid4()
    assert _upload(video_service, user_id=stranger).user_id == stranger


# --- get ---

def test_get_video_returns_record(video_service):
    video = _upload(video_service)
    assert video_service.get_video(video.id) == video


def test_get_missing_video_raises_with_id_in_message(video_service):
    missing = uuid.uuid4()
    with pytest.raises(RecordNotFoundError) as excinfo:
        video_service.get_video(missing)
    assert str(excinfo.value) == f"Video with id {missing} was not found"
    assert excinfo.value.record_id == missing


# --- list ---

@pytest.mark.parametrize(
    "count, limit, offset",
    [(0, 10, 0), (5, 10, 0), (5, 2, 0), (5, 2, 4), (5, 2, 5), (5, 3, 50), (12, 10, 10)],
)
def test_list_page_size(video_service, count, limit, offset):
    for i in range(count):
        _upload(video_service, title=f"clip {i}")
    page = video_service.list_videos(limit=limit, offset=offset)
    assert len(page.videos) == min(max(count - offset, 0), limit)
    assert page.total == count
    assert (page.limit, page.offset) == (limit, offset)


def test_list_preserves_insertion_order(video_service):
    titles = [f"clip {i}" for i in range(6)]
    for title in titles:
        _upload(video_service, title=title)
    page = video_service.list_videos(limit=3, offset=2)
    assert [v.title for v in page.videos] == titles[2:5]


def test_list_filters_by_user_before_slicing(video_service):
    for i in range(4):
        _upload(video_service, title=f"a{i}", user_id=OWNER_A)
        _upload(video_service, title=f"b{i}", user_id=OWNER_B)
    page = video_service.list_videos(limit=2, offset=1, user_id=OWNER_B)
    assert [v.title for v in page.videos] == ["b1", "b2"]
    assert page.total == 4


def test_list_filter_without_matches(video_service):
    _upload(video_service)
    page = video_service.list_videos(user_id=OWNER_B)
    assert page.videos == []
    assert page.total == 0


@pytest.mark.parametrize(
    "limit, offset, message",
    [(0, 0, "limit must be >= 1, got 0"), (10, -1, "offset must be >= 0, got -1")],
)
def test_list_rejects_invalid_bounds(video_service, limit, offset, message):
    with pytest.raises(ValueError, match=message):
        video_service.list_videos(limit=limit, offset=offset)


# --- update ---

def test_update_changes_only_title(video_service):
    before = _upload(video_service)
    after = video_service.update_video(before.id, VideoUpdate(title="X"))
    assert after.title == "X"
    assert after.model_dump(exclude={"title"}) == before.model_dump(exclude={"title"})
    assert video_service.get_video(before.id).title == "X"


def test_update_keeps_filename(video_service):
    video = _upload(video_service)
    assert video_service.update_video(video.id, VideoUpdate(title="Other")).filename == "my-clip.mp4"


def test_update_without_fields_is_a_no_op(video_service):
    video = _upload(video_service)
    assert video_service.update_video(video.id, VideoUpdate()) == video


def test_update_keeps_position_in_listing(video_service):
    ids = [_upload(video_service, title=t).id for t in ("a", "b", "c")]
    video_service.update_video(ids[1], VideoUpdate(title="B"))
    assert [v.title for v in video_service.list_videos().videos] == ["a", "B", "c"]


def test_update_missing_video_raises(video_service):
    with pytest.raises(RecordNotFoundError):
        video_service.update_video(uuid.uuid4(), VideoUpdate(title="X"))
