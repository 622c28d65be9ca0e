"""Archive-based persistence for boards and their media files"""

import logging
import os
import shutil
import tempfile
import zipfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from vivboard.errors import ArchiveFormatError, ArchiveIOError
from vivboard.models.dao import media_names
from vivboard.models.media import MediaEntry, RawMediaEntry

_UMASK: int = os.umask(0)
os.umask(_UMASK)


@dataclass(frozen=True)
class MediaWritten:
    """A media entry that was stored in the archive"""

    id: str
    entry_name: str
    size: int


@dataclass(frozen=True)
class MediaSkipped:
    """A media entry left out because its source file was not found"""

    id: str
    source_path: str
    reason: str


@dataclass
class WriteReport:
    """Outcome of a successful archive write"""

    path: Path
    written: list[MediaWritten] = field(default_factory=list)
    skipped: list[MediaSkipped] = field(default_factory=list)

    def add(self, outcome: MediaWritten | MediaSkipped) -> "WriteReport":
        """Accumulate one media outcome"""
        if isinstance(outcome, MediaWritten):
            self.written.append(outcome)
        else:
            self.skipped.append(outcome)
        return self


class BoardArchiveDAO:
    """
    Handles reading/writing the board archive format.

    Archive format: a ZIP container, store-only (no compression, media is
    usually already compressed).
    - board.json (the board document, UTF-8, written byte for byte)
    - media/{id}.{ext} (raw media files)
    """

    BOARD_ENTRY: str = "board.json"
    COMPRESSION: int = zipfile.ZIP_STORED

    @staticmethod
    def write(
        filepath: Path,
        board_json: str,
        media: Sequence[MediaEntry],
    ) -> WriteReport:
        """
        Write the board and its media to a single archive.

        Media whose source file does not exist are skipped with a warning;
        any other failure aborts the whole write. The archive is built next
        to the destination and only moved into place once finalized, so a
        failed write never leaves a finished-looking archive behind.

        Args:
            filepath: Output file path (created or overwritten)
            board_json: The board document, stored without transcoding
            media: Media entries, written in order

        Returns:
            The WriteReport listing written and skipped media
        """
        logger = logging.getLogger("BoardArchiveDAO")
        logger.debug("Saving board with %d media to archive: %s", len(media), filepath)

        filepath = Path(filepath)
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{filepath.name}.", suffix=".tmp", dir=filepath.parent
            )
        except OSError as e:
            raise ArchiveIOError(f"Failed to create file {filepath}: {e}") from e

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "wb") as raw_file:
                with zipfile.ZipFile(
                    raw_file, mode="w", compression=BoardArchiveDAO.COMPRESSION
                ) as archive:
                    report = BoardArchiveDAO._write_entries(
                        archive, filepath, board_json, media
                    )
            BoardArchiveDAO._copy_mode(tmp_path, filepath)
            os.replace(tmp_path, filepath)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise ArchiveIOError(f"Failed to write archive {filepath}: {e}") from e
        except BaseException:
            tmp_path.unlink(missing_ok=True)
            raise

        logger.debug(
            "Board archive saved: %d media written, %d skipped",
            len(report.written),
            len(report.skipped),
        )
        return report

    @staticmethod
    def _copy_mode(tmp_path: Path, filepath: Path) -> None:
        """Keep the mode of the replaced archive, or use the umask default"""
        if filepath.exists():
            shutil.copymode(filepath, tmp_path)
        else:
            os.chmod(tmp_path, 0o666 & ~_UMASK)

    @staticmethod
    def _write_entries(
        archive: zipfile.ZipFile,
        filepath: Path,
        board_json: str,
        media: Sequence[MediaEntry],
    ) -> WriteReport:
        """Write board.json then every media entry, folding the outcomes"""
        try:
            archive.writestr(BoardArchiveDAO.BOARD_ENTRY, board_json.encode("utf-8"))
        except OSError as e:
            raise ArchiveIOError(
                f"Failed to write {BoardArchiveDAO.BOARD_ENTRY}: {e}"
            ) from e

        report = WriteReport(path=filepath)
        for entry in media:
            report.add(BoardArchiveDAO._write_media(archive, entry))
        return report

    @staticmethod
    def _write_media(
        archive: zipfile.ZipFile, entry: MediaEntry
    ) -> MediaWritten | MediaSkipped:
        """Store one media file, or report it as skipped when the source is missing"""
        source = Path(entry.source_path)
        if not source.is_file():
            logging.getLogger("BoardArchiveDAO").warning(
                "Media source not found, skipping: %s", entry.source_path
            )
            return MediaSkipped(
                id=entry.id, source_path=entry.source_path, reason="source not found"
            )

        entry_name = media_names.archive_entry_name(entry.id, source)
        try:
            data = source.read_bytes()
        except OSError as e:
            raise ArchiveIOError(f"Failed to read {entry.source_path}: {e}") from e

        try:
            archive.writestr(entry_name, data)
        except OSError as e:
            raise ArchiveIOError(f"Failed to write {entry_name}: {e}") from e

        return MediaWritten(id=entry.id, entry_name=entry_name, size=len(data))

    @staticmethod
    def read(filepath: Path) -> tuple[str, list[RawMediaEntry]]:
        """
        Read the board and its media from an archive.

        Args:
            filepath: Path to the archive

        Returns:
            Tuple of (board_json, media entries in archive order)
        """
        logger = logging.getLogger("BoardArchiveDAO")
        logger.debug("Loading board from archive: %s", filepath)

        try:
            archive = zipfile.ZipFile(filepath, mode="r")
        except zipfile.BadZipFile as e:
            raise ArchiveFormatError(f"Failed to read archive {filepath}: {e}") from e
        except OSError as e:
            raise ArchiveIOError(f"Failed to open file {filepath}: {e}") from e

        with archive:
            board_json = BoardArchiveDAO._read_board(archive)

            media: list[RawMediaEntry] = []
            for info in archive.infolist():
                name = media_names.parse_entry_name(info.filename)
                if name is None:
                    continue

                data = BoardArchiveDAO._read_entry(archive, info)
                media.append(
                    RawMediaEntry(
                        id=name.id,
                        extension=name.extension,
                        file_name=name.file_name,
                        data=data,
                    )
                )

        logger.debug("Board archive loaded: %d media", len(media))
        return board_json, media

    @staticmethod
    def _read_board(archive: zipfile.ZipFile) -> str:
        """Read the required board.json entry"""
        try:
            info = archive.getinfo(BoardArchiveDAO.BOARD_ENTRY)
        except KeyError as e:
            raise ArchiveFormatError(
                "Archive is not a valid board archive: "
                f"{BoardArchiveDAO.BOARD_ENTRY} not found"
            ) from e

        data = BoardArchiveDAO._read_entry(archive, info)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ArchiveFormatError(
                f"{BoardArchiveDAO.BOARD_ENTRY} is not valid UTF-8: {e}"
            ) from e

    @staticmethod
    def _read_entry(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> bytes:
        try:
            return archive.read(info)
        except (zipfile.BadZipFile, NotImplementedError) as e:
            raise ArchiveFormatError(f"Failed to read {info.filename}: {e}") from e
        except OSError as e:
            raise ArchiveIOError(f"Failed to read {info.filename}: {e}") from e
