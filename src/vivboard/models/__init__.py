"""The models used to describe board media and the archive layer"""

__all__ = [
    "BoardArchiveDAO",
    "LoadBoardResult",
    "LoadedMedia",
    "MediaEntry",
    "MediaExtractor",
    "RawMediaEntry",
    "WriteReport",
]

from .media import LoadBoardResult, LoadedMedia, MediaEntry, RawMediaEntry
from .dao.board_archive_dao import BoardArchiveDAO, WriteReport
from .dao.media_extractor import MediaExtractor
