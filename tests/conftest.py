import pytest

from media_ingest.domain import MediaSelection

from fakes import FakeMediaApiClient, FakeTranscoder


@pytest.fixture
def selection() -> MediaSelection:
    return MediaSelection(
        file_name="lecture.mp4",
        media_type="video/mp4",
        data=b"\x00\x00\x00\x18ftypmp42",
    )


@pytest.fixture
def transcoder() -> FakeTranscoder:
    return FakeTranscoder()


@pytest.fixture
def api_client() -> FakeMediaApiClient:
    return FakeMediaApiClient()
