"""Custom exceptions for the media ingestion pipeline."""


class PipelineError(Exception):
    """Base class for errors that terminate a pipeline run."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class TranscodeError(PipelineError):
    """Raised when the audio track cannot be extracted or encoded."""

    def __init__(self, source_name: str, cause: Exception | None = None):
        self.source_name = source_name
        super().__init__(f"Failed to transcode audio from '{source_name}'", cause)


class UploadError(PipelineError):
    """Raised when uploading the encoded audio to the media service fails."""

    def __init__(
        self,
        file_name: str,
        cause: Exception | None = None,
        status_code: int | None = None,
    ):
        self.file_name = file_name
        self.status_code = status_code
        super().__init__(
            f"Failed to upload '{file_name}' to the media service", cause
        )


class TranscriptionRequestError(PipelineError):
    """Raised when requesting a transcription from the media service fails."""

    def __init__(
        self,
        media_id: str,
        cause: Exception | None = None,
        status_code: int | None = None,
    ):
        self.media_id = media_id
        self.status_code = status_code
        super().__init__(
            f"Failed to request transcription for media '{media_id}'", cause
        )


class InvalidTransitionError(Exception):
    """Raised when a phase transition is not part of the pipeline's ordering."""

    def __init__(self, phase: str, event: str):
        self.phase = phase
        self.event = event
        super().__init__(f"Event '{event}' is not valid in phase '{phase}'")
