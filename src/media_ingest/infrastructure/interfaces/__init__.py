"""Abstract interfaces for infrastructure dependencies."""

from .media_api import MediaApiClient
from .transcoder import ProgressObserver, Transcoder

__all__ = ["MediaApiClient", "ProgressObserver", "Transcoder"]
