"""Abstract interface for the remote media service."""

from abc import ABC, abstractmethod
from typing import Any

from media_ingest.domain import TranscodeResult


class MediaApiClient(ABC):
    """Abstract base class for the media service's upload and transcription calls."""

    @abstractmethod
    def upload_audio(self, audio: TranscodeResult) -> str:
        """
        Creates a media record from an encoded audio payload.

        Args:
            audio: The encoded audio to upload.

        Returns:
            The remote media id assigned by the service.

        Raises:
            UploadError: On transport failure, non-success status or a
                response without a media id.
        """
        pass

    @abstractmethod
    def request_transcription(
        self, media_id: str, prompt: str | None = None
    ) -> dict[str, Any]:
        """
        Asks the service to transcribe a previously uploaded media record.

        Args:
            media_id: Id returned by upload_audio.
            prompt: Optional hint passed through unmodified.

        Returns:
            The acknowledgement body, if any.

        Raises:
            TranscriptionRequestError: On transport failure or non-success status.
        """
        pass
