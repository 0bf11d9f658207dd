"""Dependency injection configuration for the media ingestion pipeline."""

from collections.abc import Callable

import requests

from media_ingest.config import AppConfig, load_config
from media_ingest.domain import PipelinePhase
from media_ingest.infrastructure import HttpMediaApiClient, MoviepyTranscoder
from media_ingest.infrastructure.interfaces import MediaApiClient, Transcoder
from media_ingest.pipeline import IngestionPipeline
from media_ingest.selection import SelectionHelper


def get_config() -> AppConfig:
    """Returns the configuration loaded from the environment."""
    return load_config()


def get_transcoder(config: AppConfig) -> Transcoder:
    """Returns an unopened transcoder; callers own its lifecycle."""
    return MoviepyTranscoder(config.transcoder)


def get_api_client(config: AppConfig, session: requests.Session) -> MediaApiClient:
    """Returns the media service client bound to a caller-owned session."""
    return HttpMediaApiClient(session, config.api)


def get_selection_helper(config: AppConfig) -> SelectionHelper:
    """Returns a selection helper bound to the accepted media type."""
    return SelectionHelper(config.selection)


def get_pipeline(
    transcoder: Transcoder,
    api_client: MediaApiClient,
    on_media_uploaded: Callable[[str], None] | None = None,
    on_phase_change: Callable[[PipelinePhase], None] | None = None,
) -> IngestionPipeline:
    """Returns a pipeline wired to the given collaborators."""
    return IngestionPipeline(
        transcoder,
        api_client,
        on_media_uploaded=on_media_uploaded,
        on_phase_change=on_phase_change,
    )
