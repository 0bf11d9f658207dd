"""
Media Ingest CLI.

Converts a local video into a compact MP3, uploads it to the media service
and requests a transcription. It handles:
- Selecting the local video and keeping a preview copy for its lifetime.
- Transcoding the audio track with moviepy/ffmpeg.
- Uploading the audio and requesting its transcription over HTTP.
- Distributed tracing with Datadog.
- Structured JSON logging.
"""

import argparse
import sys
from pathlib import Path

import requests
from ddtrace import patch_all

from media_ingest.config import MediaApiConfig
from media_ingest.dependencies import (
    get_api_client,
    get_config,
    get_pipeline,
    get_selection_helper,
    get_transcoder,
)
from media_ingest.domain import PipelinePhase
from media_ingest.logging import setup_logging

patch_all()
logger = setup_logging()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="media-ingest",
        description="Upload a video's audio track and request its transcription.",
    )
    parser.add_argument("video", help="Path to the video file (video/mp4)")
    parser.add_argument(
        "--prompt",
        default=None,
        help="Keywords mentioned in the video, separated by commas",
    )
    parser.add_argument("--base-url", default=None, help="Media service base URL")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Runs a single pipeline run and returns the process exit code."""
    args = parse_args(argv)
    config = get_config()
    if args.base_url:
        api = MediaApiConfig(base_url=args.base_url, timeout=config.api.timeout)
        config = config.model_copy(update={"api": api})

    video_path = Path(args.video)
    if not video_path.is_file():
        logger.error("Video file not found", extra={"path": str(video_path)})
        return 2

    uploaded: list[str] = []

    last_percent = -1

    def log_progress(fraction: float) -> None:
        nonlocal last_percent
        percent = round(fraction * 100)
        if percent != last_percent:
            last_percent = percent
            logger.info("Convert progress", extra={"percent": percent})

    # Opened lazily by convert, so init failures end the run as failed.
    transcoder = get_transcoder(config)
    unsubscribe = transcoder.subscribe(log_progress)
    selection_helper = get_selection_helper(config)
    with selection_helper, requests.Session() as session:
        selection = selection_helper.select_file([video_path])
        pipeline = get_pipeline(
            transcoder,
            get_api_client(config, session),
            on_media_uploaded=uploaded.append,
        )
        try:
            pipeline.start(selection, args.prompt)
        finally:
            unsubscribe()
            transcoder.close()

    if pipeline.phase is not PipelinePhase.DONE:
        logger.error(
            "Upload failed",
            extra={"error": str(pipeline.error), "media_id": pipeline.media_id},
        )
        return 1

    print(uploaded[0])
    return 0


if __name__ == "__main__":
    sys.exit(main())
