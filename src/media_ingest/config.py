"""Application configuration loaded from environment variables."""

import os

from pydantic import BaseModel


class TranscoderConfig(BaseModel, frozen=True):
    """Fixed encode graph used to turn a video into a compact audio payload."""

    input_slot: str = "input.mp4"
    output_slot: str = "output.mp3"
    audio_codec: str = "libmp3lame"
    audio_bitrate: str = "20k"
    output_media_type: str = "audio/mpeg"
    output_file_name: str = "audio.mp3"


class MediaApiConfig(BaseModel, frozen=True):
    """Remote media service connection configuration."""

    base_url: str
    timeout: float = 60.0


class SelectionConfig(BaseModel, frozen=True):
    """Local file selection configuration."""

    accepted_media_type: str = "video/mp4"


class AppConfig(BaseModel, frozen=True):
    """Root application configuration."""

    api: MediaApiConfig
    transcoder: TranscoderConfig = TranscoderConfig()
    selection: SelectionConfig = SelectionConfig()


def load_config() -> AppConfig:
    """Loads configuration from environment variables."""
    return AppConfig(
        api=MediaApiConfig(
            base_url=os.getenv("MEDIA_API_BASE_URL", "http://localhost:3333"),
            timeout=float(os.getenv("MEDIA_API_TIMEOUT", "60")),
        ),
        transcoder=TranscoderConfig(
            audio_codec=os.getenv("TRANSCODE_AUDIO_CODEC", "libmp3lame"),
            audio_bitrate=os.getenv("TRANSCODE_AUDIO_BITRATE", "20k"),
        ),
    )
