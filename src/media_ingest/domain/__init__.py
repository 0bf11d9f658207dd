"""Domain layer containing pipeline models and phase rules."""

from .models import (
    MediaSelection,
    PipelineEvent,
    PipelinePhase,
    PreviewReference,
    TranscodeResult,
)
from .phases import advance, can_start

__all__ = [
    "MediaSelection",
    "PipelineEvent",
    "PipelinePhase",
    "PreviewReference",
    "TranscodeResult",
    "advance",
    "can_start",
]
