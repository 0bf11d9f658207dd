"""moviepy/ffmpeg implementation of the Transcoder interface."""

import os
import shutil
import tempfile

import moviepy
import proglog

from media_ingest.config import TranscoderConfig
from media_ingest.domain import TranscodeResult
from media_ingest.exceptions import TranscodeError
from media_ingest.logging import setup_logging

from .interfaces import ProgressObserver, Transcoder

logger = setup_logging()


class _ProgressRelay(proglog.ProgressBarLogger):
    """Forwards moviepy progress bar updates to registered observers."""

    def __init__(self, observers: list[ProgressObserver]):
        super().__init__()
        self._observers = observers

    def bars_callback(self, bar, attr, value, old_value=None):
        if attr != "index":
            return
        total = self.bars[bar].get("total")
        if not total:
            return
        fraction = min(max(value / total, 0.0), 1.0)
        for observer in list(self._observers):
            try:
                observer(fraction)
            except Exception:
                logger.exception("Progress observer failed", extra={"bar": bar})


class MoviepyTranscoder(Transcoder):
    """Extracts the audio track of a video and re-encodes it as low-bitrate MP3."""

    def __init__(self, config: TranscoderConfig):
        self._config = config
        self._workdir: str | None = None
        self._observers: list[ProgressObserver] = []

    @property
    def is_open(self) -> bool:
        return self._workdir is not None

    def open(self) -> None:
        if self._workdir is not None:
            return
        try:
            self._workdir = tempfile.mkdtemp(prefix="media-ingest-")
        except OSError as e:
            logger.exception("Transcoder initialization failed")
            raise TranscodeError(self._config.input_slot, e) from e
        logger.info("Transcoder initialized", extra={"workdir": self._workdir})

    def close(self) -> None:
        if self._workdir is None:
            return
        shutil.rmtree(self._workdir, ignore_errors=True)
        logger.info("Transcoder closed", extra={"workdir": self._workdir})
        self._workdir = None

    def subscribe(self, observer: ProgressObserver):
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def convert(self, source_data: bytes, source_media_type: str) -> TranscodeResult:
        self.open()
        input_path = os.path.join(self._workdir, self._config.input_slot)
        output_path = os.path.join(self._workdir, self._config.output_slot)

        logger.info(
            "Conversion started",
            extra={"media_type": source_media_type, "size": len(source_data)},
        )

        try:
            audio_data = self._encode(source_data, input_path, output_path)
        except TranscodeError:
            logger.exception(
                "Audio conversion failed", extra={"media_type": source_media_type}
            )
            raise
        except Exception as e:
            logger.exception(
                "Audio conversion failed", extra={"media_type": source_media_type}
            )
            raise TranscodeError(self._config.input_slot, e) from e
        finally:
            for path in (input_path, output_path):
                if os.path.exists(path):
                    os.remove(path)

        logger.info(
            "Conversion finished",
            extra={
                "output_size": len(audio_data),
                "bitrate": self._config.audio_bitrate,
            },
        )
        return TranscodeResult(
            file_name=self._config.output_file_name,
            media_type=self._config.output_media_type,
            data=audio_data,
        )

    def _encode(self, source_data: bytes, input_path: str, output_path: str) -> bytes:
        """Runs the fixed audio-only encode graph through moviepy."""
        with open(input_path, "wb") as f:
            f.write(source_data)

        video = moviepy.VideoFileClip(input_path)
        try:
            if video.audio is None:
                raise TranscodeError(
                    self._config.input_slot, ValueError("No audio stream in input")
                )
            video.audio.write_audiofile(
                output_path,
                codec=self._config.audio_codec,
                bitrate=self._config.audio_bitrate,
                logger=_ProgressRelay(self._observers),
            )
        finally:
            if video.audio is not None:
                video.audio.close()
            video.close()

        if not os.path.exists(output_path) or os.path.getsize(output_path) == 0:
            raise TranscodeError(
                self._config.input_slot, ValueError("Encoder produced no output")
            )

        with open(output_path, "rb") as f:
            return f.read()
