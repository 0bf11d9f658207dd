"""Abstract interface for audio transcoding."""

from abc import ABC, abstractmethod
from collections.abc import Callable

from media_ingest.domain import TranscodeResult

ProgressObserver = Callable[[float], None]


class Transcoder(ABC):
    """Abstract base class for engines that turn a video into an audio payload."""

    @abstractmethod
    def open(self) -> None:
        """
        Initializes the engine.

        Raises:
            TranscodeError: If the engine cannot be initialized.
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Releases engine resources. Safe to call more than once."""
        pass

    @abstractmethod
    def convert(self, source_data: bytes, source_media_type: str) -> TranscodeResult:
        """
        Extracts and re-encodes the audio track of a media payload.

        Args:
            source_data: Complete source media bytes.
            source_media_type: MIME type of the source container.

        Returns:
            TranscodeResult holding a standalone, non-empty audio payload.

        Raises:
            TranscodeError: If there is no audio stream or encoding fails.
        """
        pass

    def subscribe(self, observer: ProgressObserver) -> Callable[[], None]:
        """
        Registers an advisory progress observer receiving fractions in [0, 1].

        Returns a callable that removes the observer. Engines that cannot
        report progress accept the observer and never call it.
        """
        return lambda: None

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
