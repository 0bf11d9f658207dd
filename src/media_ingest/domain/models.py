"""Domain models for the media ingestion pipeline."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class PipelinePhase(str, Enum):
    """Discrete position of a pipeline run in its fixed step ordering."""

    IDLE = "idle"
    CONVERTING = "converting"
    UPLOADING = "uploading"
    TRANSCRIBING = "transcribing"
    DONE = "done"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (PipelinePhase.DONE, PipelinePhase.FAILED)


class PipelineEvent(str, Enum):
    """Step outcomes that drive phase transitions."""

    START = "start"
    CONVERTED = "converted"
    UPLOADED = "uploaded"
    TRANSCRIPTION_REQUESTED = "transcription_requested"
    FAILED = "failed"


class MediaSelection(BaseModel, frozen=True):
    """A locally selected source video."""

    file_name: str
    media_type: str
    data: bytes = Field(repr=False)
    source_path: Path | None = None

    @property
    def size(self) -> int:
        return len(self.data)


class TranscodeResult(BaseModel, frozen=True):
    """Audio payload derived from a MediaSelection."""

    file_name: str
    media_type: str
    data: bytes = Field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


class PreviewReference(BaseModel):
    """Revocable local reference to a selection, usable for immediate preview."""

    uri: str
    path: Path
    revoked: bool = False
