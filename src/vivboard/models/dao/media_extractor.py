"""Writes extracted media to the staging directory"""

import logging
from pathlib import Path
from typing import Iterable

from vivboard.errors import ArchiveIOError
from vivboard.models.media import LoadedMedia, RawMediaEntry


class MediaExtractor:
    """
    Materializes media read from an archive into a staging directory.

    Files are written as ``<staging_dir>/<id>.<ext>``; extracting the same
    archive twice overwrites the previous copies.
    """

    def __init__(self, staging_dir: Path) -> None:
        self.staging_dir: Path = Path(staging_dir)
        self.logger: logging.Logger = logging.getLogger("MediaExtractor")

    def extract(self, entries: Iterable[RawMediaEntry]) -> list[LoadedMedia]:
        """Write every entry to the staging directory, keeping archive order"""
        try:
            self.staging_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ArchiveIOError(
                f"Failed to create temp media dir {self.staging_dir}: {e}"
            ) from e

        loaded: list[LoadedMedia] = []
        for entry in entries:
            temp_path = self.staging_dir / entry.file_name
            try:
                _ = temp_path.write_bytes(entry.data)
            except OSError as e:
                raise ArchiveIOError(
                    f"Failed to write temp media {entry.file_name}: {e}"
                ) from e
            loaded.append(LoadedMedia(id=entry.id, temp_path=str(temp_path)))

        self.logger.debug("Extracted %d media to %s", len(loaded), self.staging_dir)
        return loaded

    def clear(self) -> int:
        """Delete every staged file, returning how many were removed"""
        if not self.staging_dir.exists():
            return 0

        removed = 0
        for staged in self.staging_dir.iterdir():
            if staged.is_file():
                staged.unlink()
                removed += 1
        self.logger.debug("Cleared %d staged media from %s", removed, self.staging_dir)
        return removed
