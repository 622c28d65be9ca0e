"""File dialogs used to pick where boards are saved and opened from"""

import logging
from pathlib import Path

from PyQt6.QtWidgets import QFileDialog, QWidget

from vivboard.config import settings


class QtFilePicker:
    """Asks for board archive paths with the native Qt file dialogs"""

    def __init__(self, parent: QWidget | None = None, start_dir: Path | None = None):
        self.parent: QWidget | None = parent
        self.start_dir: Path = start_dir or Path.home()
        self.logger: logging.Logger = logging.getLogger("QtFilePicker")

    @property
    def name_filter(self) -> str:
        return f"{settings.ARCHIVE_FILTER_NAME} (*.{settings.ARCHIVE_EXTENSION})"

    async def choose_save_path(self) -> Path | None:
        """Ask where to save the board, adding the archive extension if missing"""
        file_name, _ = QFileDialog.getSaveFileName(
            self.parent, "Save Board", str(self.start_dir), self.name_filter
        )
        if not file_name:
            return None

        path = Path(file_name)
        if not path.suffix:
            path = path.with_suffix(f".{settings.ARCHIVE_EXTENSION}")
        self.start_dir = path.parent
        self.logger.debug("Save destination selected: %s", path)
        return path

    async def choose_open_path(self) -> Path | None:
        """Ask which board archive to open"""
        file_name, _ = QFileDialog.getOpenFileName(
            self.parent, "Open Board", str(self.start_dir), self.name_filter
        )
        if not file_name:
            return None

        path = Path(file_name)
        self.start_dir = path.parent
        self.logger.debug("Board selected for opening: %s", path)
        return path
