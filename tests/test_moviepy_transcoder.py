import os

import pytest

from media_ingest.config import TranscoderConfig
from media_ingest.exceptions import TranscodeError
from media_ingest.infrastructure import moviepy_transcoder
from media_ingest.infrastructure.moviepy_transcoder import MoviepyTranscoder


class FakeAudioClip:
    def __init__(self, payload: bytes):
        self.payload = payload
        self.write_kwargs: dict = {}
        self.closed = False

    def write_audiofile(self, filename, codec=None, bitrate=None, logger=None):
        self.write_kwargs = {"codec": codec, "bitrate": bitrate}
        if logger is not None:
            for _ in logger.iter_bar(chunk=range(4)):
                pass
        with open(filename, "wb") as f:
            f.write(self.payload)

    def close(self):
        self.closed = True


class FakeVideoClip:
    def __init__(self, path: str, audio: FakeAudioClip | None):
        with open(path, "rb") as f:
            self.source = f.read()
        self.path = path
        self.audio = audio
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def clips(monkeypatch):
    opened: list[FakeVideoClip] = []
    state = {"audio": FakeAudioClip(b"ID3encoded")}

    def video_file_clip(path):
        clip = FakeVideoClip(path, state["audio"])
        opened.append(clip)
        return clip

    monkeypatch.setattr(moviepy_transcoder.moviepy, "VideoFileClip", video_file_clip)
    return opened, state


def test_convert_encodes_audio_with_fixed_graph(clips):
    opened, state = clips
    with MoviepyTranscoder(TranscoderConfig()) as transcoder:
        result = transcoder.convert(b"mp4-bytes", "video/mp4")

    assert result.data == b"ID3encoded"
    assert result.media_type == "audio/mpeg"
    assert result.file_name == "audio.mp3"
    assert state["audio"].write_kwargs == {"codec": "libmp3lame", "bitrate": "20k"}
    assert opened[0].source == b"mp4-bytes"
    assert os.path.basename(opened[0].path) == "input.mp4"
    assert opened[0].closed
    assert state["audio"].closed


def test_convert_leaves_no_slot_files_behind(clips):
    opened, _ = clips
    transcoder = MoviepyTranscoder(TranscoderConfig())
    transcoder.convert(b"mp4-bytes", "video/mp4")

    workdir = os.path.dirname(opened[0].path)
    assert os.listdir(workdir) == []

    transcoder.close()
    assert not os.path.exists(workdir)
    assert not transcoder.is_open


def test_convert_without_audio_stream_fails(clips):
    _, state = clips
    state["audio"] = None

    with MoviepyTranscoder(TranscoderConfig()) as transcoder:
        with pytest.raises(TranscodeError) as exc_info:
            transcoder.convert(b"silent-video", "video/mp4")

    assert isinstance(exc_info.value.cause, ValueError)


def test_convert_never_returns_empty_payload(clips):
    _, state = clips
    state["audio"] = FakeAudioClip(b"")

    with MoviepyTranscoder(TranscoderConfig()) as transcoder:
        with pytest.raises(TranscodeError):
            transcoder.convert(b"mp4-bytes", "video/mp4")


def test_engine_errors_are_wrapped(monkeypatch):
    def broken_clip(path):
        raise OSError("moov atom not found")

    monkeypatch.setattr(moviepy_transcoder.moviepy, "VideoFileClip", broken_clip)

    with MoviepyTranscoder(TranscoderConfig()) as transcoder:
        with pytest.raises(TranscodeError) as exc_info:
            transcoder.convert(b"garbage", "video/mp4")

    assert isinstance(exc_info.value.cause, OSError)


def test_initialization_failure_raises_transcode_error(monkeypatch):
    def no_space(prefix=None):
        raise OSError("No space left on device")

    monkeypatch.setattr(moviepy_transcoder.tempfile, "mkdtemp", no_space)

    with pytest.raises(TranscodeError):
        MoviepyTranscoder(TranscoderConfig()).open()


def test_progress_observers_receive_fractions(clips):
    received: list[float] = []
    with MoviepyTranscoder(TranscoderConfig()) as transcoder:
        unsubscribe = transcoder.subscribe(received.append)
        transcoder.convert(b"mp4-bytes", "video/mp4")
        unsubscribe()
        transcoder.convert(b"mp4-bytes", "video/mp4")

    assert received
    assert all(0.0 <= value <= 1.0 for value in received)
    assert received == sorted(received)
    assert received[-1] == 1.0
    assert len(received) <= 5


def test_failing_progress_observer_does_not_break_conversion(clips):
    def broken_observer(fraction):
        raise RuntimeError("ui gone")

    with MoviepyTranscoder(TranscoderConfig()) as transcoder:
        transcoder.subscribe(broken_observer)
        result = transcoder.convert(b"mp4-bytes", "video/mp4")

    assert result.data == b"ID3encoded"
