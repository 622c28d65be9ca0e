"""Errors raised while saving and opening board archives"""


class BoardArchiveError(Exception):
    """Base class for every board archive failure"""


class SelectionCancelledError(BoardArchiveError):
    """The user dismissed the file dialog; not a failure, but not a success either"""


class ArchiveIOError(BoardArchiveError):
    """Creating, opening, reading or writing a file failed"""


class ArchiveFormatError(BoardArchiveError, ValueError):
    """The file is not a board archive, or is missing its board.json entry"""


class SessionLockError(BoardArchiveError):
    """The current-file state could not be locked in time"""


class InvalidMediaIdError(BoardArchiveError, ValueError):
    """A media id cannot be stored as a single archive entry name"""
