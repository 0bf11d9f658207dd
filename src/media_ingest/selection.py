"""Local file selection with a revocable preview reference."""

import mimetypes
import os
import tempfile
import weakref
from collections.abc import Sequence
from pathlib import Path

from media_ingest.config import SelectionConfig
from media_ingest.domain import MediaSelection, PreviewReference
from media_ingest.logging import setup_logging

logger = setup_logging()


class SelectionHelper:
    """
    Holds the user's current video selection.

    Each selection gets a preview reference backed by a private temporary
    copy of the payload. The reference is revoked when the selection is
    replaced or when the helper is closed or discarded.
    """

    def __init__(self, config: SelectionConfig | None = None):
        self._config = config or SelectionConfig()
        self._selection: MediaSelection | None = None
        self._preview: PreviewReference | None = None
        self._release_preview: weakref.finalize | None = None

    @property
    def selection(self) -> MediaSelection | None:
        return self._selection

    @property
    def preview(self) -> PreviewReference | None:
        return self._preview

    @property
    def active_previews(self) -> int:
        return 0 if self._preview is None or self._preview.revoked else 1

    def select_file(
        self, raw_input: Sequence[str | os.PathLike] | None
    ) -> MediaSelection | None:
        """
        Replaces the current selection with the first file of raw_input.

        raw_input is a sequence of paths, like a file picker's file list; a
        bare str or bytes path is rejected. An empty or missing input keeps
        the prior selection.

        Returns:
            The current selection after the call.

        Raises:
            TypeError: If raw_input is a single str or bytes path.
        """
        if isinstance(raw_input, (str, bytes)):
            raise TypeError("raw_input must be a sequence of paths, not a single path")
        if not raw_input:
            logger.info("No file supplied, keeping current selection")
            return self._selection

        path = Path(raw_input[0])
        data = path.read_bytes()
        media_type = (
            mimetypes.guess_type(path.name)[0] or self._config.accepted_media_type
        )
        if media_type != self._config.accepted_media_type:
            logger.warning(
                "Selected file is not of the accepted media type",
                extra={"file_name": path.name, "media_type": media_type},
            )

        selection = MediaSelection(
            file_name=path.name, media_type=media_type, data=data, source_path=path
        )
        preview = self._create_preview(selection)

        self._revoke_preview()
        self._selection = selection
        self._preview = preview
        self._release_preview = weakref.finalize(
            self, preview.path.unlink, missing_ok=True
        )

        logger.info(
            "File selected",
            extra={"file_name": path.name, "media_type": media_type, "size": len(data)},
        )
        return selection

    def close(self) -> None:
        """Revokes the active preview and drops the selection."""
        self._revoke_preview()
        self._selection = None

    def _create_preview(self, selection: MediaSelection) -> PreviewReference:
        suffix = Path(selection.file_name).suffix
        fd, temp_path = tempfile.mkstemp(prefix="preview-", suffix=suffix)
        with os.fdopen(fd, "wb") as f:
            f.write(selection.data)
        path = Path(temp_path)
        return PreviewReference(uri=path.as_uri(), path=path)

    def _revoke_preview(self) -> None:
        if self._preview is None:
            return
        if self._release_preview is not None:
            self._release_preview()
            self._release_preview = None
        self._preview.revoked = True
        logger.info("Preview revoked", extra={"uri": self._preview.uri})
        self._preview = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
