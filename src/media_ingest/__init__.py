"""Client-side media ingestion pipeline: transcode, upload, request transcription."""

from media_ingest.domain import (
    MediaSelection,
    PipelinePhase,
    PreviewReference,
    TranscodeResult,
)
from media_ingest.exceptions import (
    PipelineError,
    TranscodeError,
    TranscriptionRequestError,
    UploadError,
)
from media_ingest.pipeline import IngestionPipeline
from media_ingest.selection import SelectionHelper

__all__ = [
    "IngestionPipeline",
    "MediaSelection",
    "PipelineError",
    "PipelinePhase",
    "PreviewReference",
    "SelectionHelper",
    "TranscodeError",
    "TranscodeResult",
    "TranscriptionRequestError",
    "UploadError",
]
