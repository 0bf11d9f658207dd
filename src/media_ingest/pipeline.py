"""Sequential convert -> upload -> transcribe pipeline."""

from collections.abc import Callable

from media_ingest.domain import (
    MediaSelection,
    PipelineEvent,
    PipelinePhase,
    advance,
    can_start,
)
from media_ingest.exceptions import PipelineError
from media_ingest.infrastructure.interfaces import MediaApiClient, Transcoder
from media_ingest.logging import setup_logging

logger = setup_logging()

_IN_FLIGHT = frozenset(
    {PipelinePhase.CONVERTING, PipelinePhase.UPLOADING, PipelinePhase.TRANSCRIBING}
)


class IngestionPipeline:
    """Drives one pipeline run at a time through its phases."""

    def __init__(
        self,
        transcoder: Transcoder,
        api_client: MediaApiClient,
        on_media_uploaded: Callable[[str], None] | None = None,
        on_phase_change: Callable[[PipelinePhase], None] | None = None,
    ):
        self._transcoder = transcoder
        self._api_client = api_client
        self._on_media_uploaded = on_media_uploaded
        self._on_phase_change = on_phase_change
        self._phase = PipelinePhase.IDLE
        self._media_id: str | None = None
        self._error: PipelineError | None = None

    @property
    def phase(self) -> PipelinePhase:
        return self._phase

    @property
    def media_id(self) -> str | None:
        return self._media_id

    @property
    def error(self) -> PipelineError | None:
        return self._error

    def start(
        self, selection: MediaSelection | None, prompt: str | None = None
    ) -> bool:
        """
        Runs convert, upload and transcription request for a selection.

        Does nothing when no selection is given or a run already happened
        since the last reset. Pipeline errors end the run in the failed phase
        and are exposed through `error` rather than raised. Any other exception
        also ends the run in the failed phase and is then re-raised.

        Returns:
            True if a run took place.
        """
        if selection is None:
            logger.info("Start ignored, no file selected")
            return False
        if not can_start(self._phase):
            logger.info(
                "Start ignored, pipeline busy", extra={"phase": self._phase.value}
            )
            return False

        logger.info(
            "Pipeline run started",
            extra={"file_name": selection.file_name, "has_prompt": prompt is not None},
        )
        try:
            self._apply(PipelineEvent.START)

            audio = self._transcoder.convert(selection.data, selection.media_type)
            self._apply(PipelineEvent.CONVERTED)

            media_id = self._api_client.upload_audio(audio)
            self._media_id = media_id
            self._apply(PipelineEvent.UPLOADED)

            self._api_client.request_transcription(media_id, prompt)
            self._apply(PipelineEvent.TRANSCRIPTION_REQUESTED)
        except PipelineError as e:
            self._error = e
            logger.error(
                "Pipeline run failed",
                extra={
                    "phase": self._phase.value,
                    "error": str(e),
                    "file_name": selection.file_name,
                },
            )
            self._apply(PipelineEvent.FAILED)
            return True
        except Exception:
            logger.exception(
                "Pipeline run crashed",
                extra={"phase": self._phase.value, "file_name": selection.file_name},
            )
            if self._phase in _IN_FLIGHT:
                self._apply(PipelineEvent.FAILED)
            raise

        logger.info(
            "Pipeline run finished",
            extra={"file_name": selection.file_name, "media_id": media_id},
        )
        if self._on_media_uploaded is not None:
            self._on_media_uploaded(media_id)
        return True

    def reset(self) -> bool:
        """Returns a finished pipeline to idle so a new run may start."""
        if not self._phase.is_terminal:
            return False
        self._phase = PipelinePhase.IDLE
        self._media_id = None
        self._error = None
        self._notify_phase()
        return True

    def _apply(self, event: PipelineEvent) -> None:
        self._phase = advance(self._phase, event)
        self._notify_phase()

    def _notify_phase(self) -> None:
        logger.info("Pipeline phase changed", extra={"phase": self._phase.value})
        if self._on_phase_change is not None:
            self._on_phase_change(self._phase)
