"""Tracks which archive file the open board belongs to"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from vivboard.config import settings
from vivboard.errors import SessionLockError


class SessionState(Enum):
    """Whether the board is associated with a file on disk"""

    UNBOUND = "unbound"
    BOUND = "bound"


@dataclass(frozen=True)
class SaveTarget:
    """Where a plain "save" should go: the bound file, or ask the user"""

    path: Path | None


class BoardSession:
    """
    Holds the path of the archive last saved or opened.

    The lock only guards the stored value, never the archive I/O itself.
    There is no way back to UNBOUND once a file has been recorded.
    """

    def __init__(self, lock_timeout: float | None = None) -> None:
        self._lock: threading.Lock = threading.Lock()
        self._current_path: Path | None = None
        self.lock_timeout: float = (
            settings.SESSION_LOCK_TIMEOUT if lock_timeout is None else lock_timeout
        )
        self.logger: logging.Logger = logging.getLogger("BoardSession")

    def _acquire(self) -> None:
        if not self._lock.acquire(timeout=self.lock_timeout):
            raise SessionLockError("Failed to lock state")

    def record(self, path: Path) -> None:
        """Bind the session to the file just saved or opened"""
        self._acquire()
        try:
            self._current_path = Path(path)
        finally:
            self._lock.release()
        self.logger.debug("Current board file is now %s", path)

    def get(self) -> Path | None:
        """The bound path, or None when unbound"""
        self._acquire()
        try:
            return self._current_path
        finally:
            self._lock.release()

    @property
    def state(self) -> SessionState:
        return SessionState.UNBOUND if self.get() is None else SessionState.BOUND

    def save_target(self) -> SaveTarget:
        """Decide where a plain save goes: reuse the bound file or prompt"""
        return SaveTarget(path=self.get())

    def current_path_str(self) -> str | None:
        """The bound path as a string for display, None if unbound or locked"""
        try:
            path = self.get()
        except SessionLockError as e:
            self.logger.warning("Could not read current board file: %s", e)
            return None
        return None if path is None else str(path)
