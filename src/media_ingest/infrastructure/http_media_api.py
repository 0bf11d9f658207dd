"""requests implementation of the MediaApiClient interface."""

from typing import Any
from urllib.parse import quote

import requests

from media_ingest.config import MediaApiConfig
from media_ingest.domain import TranscodeResult
from media_ingest.exceptions import TranscriptionRequestError, UploadError
from media_ingest.logging import setup_logging

from .interfaces import MediaApiClient

logger = setup_logging()


class HttpMediaApiClient(MediaApiClient):
    """Talks to the media service over HTTP."""

    def __init__(self, session: requests.Session, config: MediaApiConfig):
        self._session = session
        self._config = config

    def _url(self, path: str) -> str:
        return f"{self._config.base_url.rstrip('/')}/{path.lstrip('/')}"

    def upload_audio(self, audio: TranscodeResult) -> str:
        files = {"file": (audio.file_name, audio.data, audio.media_type)}
        try:
            response = self._session.post(
                self._url("/videos"), files=files, timeout=self._config.timeout
            )
        except requests.RequestException as e:
            logger.exception(
                "Audio upload failed", extra={"file_name": audio.file_name}
            )
            raise UploadError(audio.file_name, e) from e

        if not response.ok:
            logger.error(
                "Audio upload rejected",
                extra={
                    "file_name": audio.file_name,
                    "status_code": response.status_code,
                },
            )
            raise UploadError(
                audio.file_name,
                Exception(f"HTTP {response.status_code}"),
                status_code=response.status_code,
            )

        try:
            media_id = response.json()["video"]["id"]
        except (ValueError, KeyError, TypeError) as e:
            logger.exception(
                "Upload response has no media id", extra={"file_name": audio.file_name}
            )
            raise UploadError(
                audio.file_name, e, status_code=response.status_code
            ) from e

        if media_id is None or str(media_id).strip() == "":
            logger.error("Upload response has a blank media id")
            raise UploadError(
                audio.file_name,
                ValueError("Blank media id"),
                status_code=response.status_code,
            )

        logger.info(
            "Audio uploaded",
            extra={
                "file_name": audio.file_name,
                "size": audio.size,
                "media_id": media_id,
            },
        )
        return str(media_id)

    def request_transcription(
        self, media_id: str, prompt: str | None = None
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {}
        if prompt is not None:
            payload["prompt"] = prompt

        try:
            response = self._session.post(
                self._url(f"/videos/{quote(media_id, safe='')}/transcription"),
                json=payload,
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            logger.exception(
                "Transcription request failed", extra={"media_id": media_id}
            )
            raise TranscriptionRequestError(media_id, e) from e

        if not response.ok:
            logger.error(
                "Transcription request rejected",
                extra={"media_id": media_id, "status_code": response.status_code},
            )
            raise TranscriptionRequestError(
                media_id,
                Exception(f"HTTP {response.status_code}"),
                status_code=response.status_code,
            )

        logger.info(
            "Transcription requested",
            extra={"media_id": media_id, "has_prompt": prompt is not None},
        )
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {"result": body}
