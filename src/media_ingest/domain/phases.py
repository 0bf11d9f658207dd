"""Pure transition function over pipeline phases."""

from media_ingest.exceptions import InvalidTransitionError

from .models import PipelineEvent, PipelinePhase

_TRANSITIONS: dict[tuple[PipelinePhase, PipelineEvent], PipelinePhase] = {
    (PipelinePhase.IDLE, PipelineEvent.START): PipelinePhase.CONVERTING,
    (PipelinePhase.CONVERTING, PipelineEvent.CONVERTED): PipelinePhase.UPLOADING,
    (PipelinePhase.UPLOADING, PipelineEvent.UPLOADED): PipelinePhase.TRANSCRIBING,
    (
        PipelinePhase.TRANSCRIBING,
        PipelineEvent.TRANSCRIPTION_REQUESTED,
    ): PipelinePhase.DONE,
}

_FAILABLE = frozenset(
    {PipelinePhase.CONVERTING, PipelinePhase.UPLOADING, PipelinePhase.TRANSCRIBING}
)


def advance(phase: PipelinePhase, event: PipelineEvent) -> PipelinePhase:
    """
    Returns the phase reached by applying an event to the current phase.

    Success events move one step along idle -> converting -> uploading ->
    transcribing -> done. FAILED moves any in-flight phase to failed.

    Raises:
        InvalidTransitionError: If the event is not valid in the given phase.
    """
    if event is PipelineEvent.FAILED:
        if phase in _FAILABLE:
            return PipelinePhase.FAILED
        raise InvalidTransitionError(phase.value, event.value)

    try:
        return _TRANSITIONS[(phase, event)]
    except KeyError:
        raise InvalidTransitionError(phase.value, event.value) from None


def can_start(phase: PipelinePhase) -> bool:
    """Only an idle pipeline accepts a new run."""
    return phase is PipelinePhase.IDLE
