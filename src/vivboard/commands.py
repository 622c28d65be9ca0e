"""Save and open requests coming from the board UI"""

import asyncio
import logging
from pathlib import Path
from typing import Awaitable, Callable, Protocol, Sequence

from vivboard.config import settings
from vivboard.errors import SelectionCancelledError, SessionLockError
from vivboard.models.dao.board_archive_dao import BoardArchiveDAO, WriteReport
from vivboard.models.dao.media_extractor import MediaExtractor
from vivboard.models.media import LoadBoardResult, MediaEntry
from vivboard.session import BoardSession


class FilePicker(Protocol):
    """Asks the user for a file; None means the dialog was cancelled"""

    async def choose_save_path(self) -> Path | None: ...

    async def choose_open_path(self) -> Path | None: ...


class BoardCommands:
    """
    Save/open entry points for one running board.

    Archive I/O runs in a worker thread so the caller's event loop stays
    responsive. The session is only updated after an operation succeeds.
    """

    def __init__(
        self,
        picker: FilePicker,
        session: BoardSession | None = None,
        staging_dir: Path | None = None,
    ) -> None:
        self.picker: FilePicker = picker
        self.session: BoardSession = session or BoardSession()
        self.extractor: MediaExtractor = MediaExtractor(
            staging_dir or settings.TEMP_MEDIA_DIR_PATH
        )
        self.logger: logging.Logger = logging.getLogger("BoardCommands")

    async def save_board_archive(
        self, board_json: str, media: Sequence[MediaEntry]
    ) -> WriteReport:
        """Save as: always ask for a destination, then bind to it"""
        path = await self._choose(self.picker.choose_save_path, "save")
        return await self.save_board_to(path, board_json, media)

    async def save_current_board(
        self, board_json: str, media: Sequence[MediaEntry]
    ) -> WriteReport:
        """Save: overwrite the bound file, or ask for one when unbound"""
        target = self.session.save_target()
        if target.path is None:
            path = await self._choose(self.picker.choose_save_path, "save")
            return await self.save_board_to(path, board_json, media)

        self.logger.debug("Saving to current board file %s", target.path)
        return await self._write(target.path, board_json, media)

    async def load_board_archive(self) -> LoadBoardResult:
        """Open: ask for an archive, extract it and bind to it"""
        path = await self._choose(self.picker.choose_open_path, "open")
        return await self.load_board_from(path)

    async def save_board_to(
        self, path: Path, board_json: str, media: Sequence[MediaEntry]
    ) -> WriteReport:
        """Write the board to the given file and bind the session to it"""
        report = await self._write(path, board_json, media)
        self._remember(path)
        return report

    async def load_board_from(self, path: Path) -> LoadBoardResult:
        """Read the given archive, stage its media and bind the session to it"""
        try:
            board_json, raw_media = await asyncio.to_thread(BoardArchiveDAO.read, path)
            loaded = await asyncio.to_thread(self.extractor.extract, raw_media)
        except Exception as e:
            self.logger.error("Error loading board from %s: %s", path, e)
            raise

        self._remember(path)
        return LoadBoardResult(json=board_json, media=loaded)

    def get_current_file_path(self) -> str | None:
        """The bound file, for display; None when unbound"""
        return self.session.current_path_str()

    async def _write(
        self, path: Path, board_json: str, media: Sequence[MediaEntry]
    ) -> WriteReport:
        try:
            report = await asyncio.to_thread(
                BoardArchiveDAO.write, path, board_json, media
            )
        except Exception as e:
            self.logger.error("Error saving board to %s: %s", path, e)
            raise

        for skipped in report.skipped:
            self.logger.info("Media %s was not saved: %s", skipped.id, skipped.reason)
        return report

    async def _choose(
        self, ask: Callable[[], Awaitable[Path | None]], action: str
    ) -> Path:
        path = await ask()
        if path is None:
            self.logger.debug("User cancelled %s dialog", action)
            raise SelectionCancelledError(f"User cancelled {action} dialog")
        return Path(path)

    def _remember(self, path: Path) -> None:
        """Record the file; failing to lock only loses the path, not the operation"""
        try:
            self.session.record(path)
        except SessionLockError as e:
            self.logger.warning("Could not remember current board file %s: %s", path, e)
