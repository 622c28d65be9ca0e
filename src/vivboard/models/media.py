"""Media models exchanged with the board UI when saving and opening archives"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class MediaEntry:
    """A media file referenced by the board, to be packed into the archive"""

    id: str
    source_path: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MediaEntry":
        """Deserialize from the UI payload ({"id", "sourcePath"})"""
        return cls(id=str(data["id"]), source_path=str(data["sourcePath"]))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the UI payload"""
        return {"id": self.id, "sourcePath": self.source_path}


@dataclass
class LoadedMedia:
    """A media file extracted from an archive into the staging directory"""

    id: str
    temp_path: str

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the UI payload ({"id", "tempPath"})"""
        return {"id": self.id, "tempPath": self.temp_path}


@dataclass
class RawMediaEntry:
    """A media entry read from an archive, not yet written to disk"""

    id: str
    extension: str | None
    file_name: str
    data: bytes = field(repr=False)


@dataclass
class LoadBoardResult:
    """The board JSON and its media, as handed back to the UI after opening"""

    json: str
    media: list[LoadedMedia] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the UI payload ({"json", "media"})"""
        return {
            "json": self.json,
            "media": [loaded.to_dict() for loaded in self.media],
        }
