"""
Mapping between media ids and archive entry names.

Media are stored as ``media/<id>.<ext>``. Ids are recovered by splitting the
file name on its *last* dot, so an id may itself contain dots
(``abc.def`` + ``png`` -> ``media/abc.def.png`` -> ``abc.def``), but callers
must not rely on an id that ends in something looking like an extension
when the source file has none: ``media/<id>.bin`` is always written instead.

Ids must be non-empty and must not contain a path separator.
"""

from dataclasses import dataclass
from pathlib import PurePath

from vivboard.errors import ArchiveFormatError, InvalidMediaIdError

MEDIA_PREFIX: str = "media/"
FALLBACK_EXTENSION: str = "bin"

_SEPARATORS: tuple[str, ...] = ("/", "\\")


@dataclass(frozen=True)
class MediaName:
    """The parts of a media entry name"""

    id: str
    extension: str | None
    file_name: str


def media_extension(source_path: str | PurePath) -> str:
    """Lower-cased extension of the source file, without the dot, or "bin" """
    suffix = PurePath(source_path).suffix
    if not suffix:
        return FALLBACK_EXTENSION
    return suffix[1:].lower()


def validate_media_id(media_id: str) -> None:
    """Reject ids that cannot be stored as a single entry name"""
    if not media_id:
        raise InvalidMediaIdError("Media id cannot be empty")
    if any(sep in media_id for sep in _SEPARATORS):
        raise InvalidMediaIdError(
            f"Media id cannot contain a path separator: {media_id!r}"
        )


def archive_entry_name(media_id: str, source_path: str | PurePath) -> str:
    """Archive entry name for a media id and its source file"""
    validate_media_id(media_id)
    return f"{MEDIA_PREFIX}{media_id}.{media_extension(source_path)}"


def split_file_name(file_name: str) -> tuple[str, str | None]:
    """Split "<id>.<ext>" on the last dot; no dot means no extension"""
    stem, dot, extension = file_name.rpartition(".")
    if not dot:
        return file_name, None
    return stem, extension


def parse_entry_name(name: str) -> MediaName | None:
    """
    Recover the media id from an archive entry name.

    Returns None for entries outside ``media/`` and for the ``media/``
    directory marker itself.
    """
    if not name.startswith(MEDIA_PREFIX) or name == MEDIA_PREFIX:
        return None

    file_name = name[len(MEDIA_PREFIX) :]
    if any(sep in file_name for sep in _SEPARATORS) or file_name in (".", ".."):
        raise ArchiveFormatError(f"Invalid media entry name in archive: {name!r}")

    media_id, extension = split_file_name(file_name)
    return MediaName(id=media_id, extension=extension, file_name=file_name)
