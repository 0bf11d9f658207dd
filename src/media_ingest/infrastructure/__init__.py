"""Infrastructure implementations."""

from .http_media_api import HttpMediaApiClient
from .moviepy_transcoder import MoviepyTranscoder

__all__ = ["HttpMediaApiClient", "MoviepyTranscoder"]
