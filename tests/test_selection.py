from pathlib import Path

import pytest

from media_ingest.selection import SelectionHelper


@pytest.fixture
def videos(tmp_path: Path) -> list[Path]:
    paths = []
    for index in range(5):
        path = tmp_path / f"clip-{index}.mp4"
        path.write_bytes(f"video-{index}".encode())
        paths.append(path)
    return paths


def test_select_file_builds_selection_and_preview(videos):
    with SelectionHelper() as helper:
        selection = helper.select_file([videos[0]])

        assert selection.file_name == "clip-0.mp4"
        assert selection.media_type == "video/mp4"
        assert selection.data == b"video-0"
        assert helper.selection is selection
        assert helper.preview.uri.startswith("file://")
        assert helper.preview.path.read_bytes() == b"video-0"
        assert helper.active_previews == 1


def test_only_first_file_is_taken(videos):
    with SelectionHelper() as helper:
        selection = helper.select_file(videos[:3])

    assert selection.file_name == "clip-0.mp4"


@pytest.mark.parametrize("raw_input", [None, []])
def test_empty_input_keeps_prior_selection(videos, raw_input):
    with SelectionHelper() as helper:
        first = helper.select_file([videos[0]])
        preview = helper.preview

        assert helper.select_file(raw_input) is first
        assert helper.preview is preview
        assert preview.path.exists()


def test_reselection_releases_previous_previews(videos):
    with SelectionHelper() as helper:
        previews = []
        for video in videos:
            helper.select_file([video])
            previews.append(helper.preview)

        assert helper.active_previews == 1
        assert all(p.revoked and not p.path.exists() for p in previews[:-1])
        assert previews[-1].path.exists()
        assert helper.selection.data == b"video-4"


def test_close_revokes_preview_and_drops_selection(videos):
    helper = SelectionHelper()
    helper.select_file([videos[0]])
    preview = helper.preview

    helper.close()

    assert preview.revoked
    assert not preview.path.exists()
    assert helper.selection is None
    assert helper.active_previews == 0


def test_discarded_helper_releases_preview(videos):
    helper = SelectionHelper()
    helper.select_file([videos[0]])
    path = helper.preview.path

    del helper

    assert not path.exists()


def test_unexpected_media_type_is_still_selected(tmp_path):
    path = tmp_path / "clip.mov"
    path.write_bytes(b"mov")

    with SelectionHelper() as helper:
        selection = helper.select_file([path])

    assert selection.media_type == "video/quicktime"


@pytest.mark.parametrize("raw_input", ["clip-0.mp4", b"clip-0.mp4"])
def test_single_path_string_is_rejected(videos, raw_input):
    with SelectionHelper() as helper:
        helper.select_file([videos[1]])

        with pytest.raises(TypeError):
            helper.select_file(raw_input)

        assert helper.selection.file_name == "clip-1.mp4"
