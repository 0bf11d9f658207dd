from media_ingest.config import load_config


def test_defaults(monkeypatch):
    for name in (
        "MEDIA_API_BASE_URL",
        "MEDIA_API_TIMEOUT",
        "TRANSCODE_AUDIO_CODEC",
        "TRANSCODE_AUDIO_BITRATE",
    ):
        monkeypatch.delenv(name, raising=False)

    config = load_config()

    assert config.api.base_url == "http://localhost:3333"
    assert config.api.timeout == 60.0
    assert config.transcoder.audio_codec == "libmp3lame"
    assert config.transcoder.audio_bitrate == "20k"
    assert config.transcoder.output_media_type == "audio/mpeg"
    assert config.selection.accepted_media_type == "video/mp4"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MEDIA_API_BASE_URL", "https://media.example.com")
    monkeypatch.setenv("MEDIA_API_TIMEOUT", "12.5")
    monkeypatch.setenv("TRANSCODE_AUDIO_BITRATE", "32k")

    config = load_config()

    assert config.api.base_url == "https://media.example.com"
    assert config.api.timeout == 12.5
    assert config.transcoder.audio_bitrate == "32k"
