"""Data models for parsed playlists."""

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True)
class Track:
    """A single entry from a raw playlist file."""

    position: int
    title: str
    artist: str = ""
    raw: str = ""
    source_number: int | None = None

    @property
    def has_artist(self) -> bool:
        return bool(self.artist)

    @property
    def display_text(self) -> str:
        """Artist and title, or the raw line if it could not be split.

        Tab separated rows fall back to the title column.
        """
        if self.has_artist:
            return f"{self.artist} - {self.title}"
        if self.raw and "\t" not in self.raw:
            return self.raw
        return self.title

    def __str__(self) -> str:
        return self.display_text


@dataclass(frozen=True)
class ColumnLayout:
    """Column indexes taken from the header row of a tab separated export."""

    ARTIST_NAMES = ("artist",)
    TITLE_NAMES = ("title", "track title", "name", "track")

    artist: int
    title: int

    @classmethod
    def from_header(cls, line: str) -> "ColumnLayout | None":
        """Build a layout from a header line, or None if it is not a header."""
        if "\t" not in line:
            return None

        names = [name.strip().lower() for name in line.split("\t")]
        artist = next((i for i, name in enumerate(names) if name in cls.ARTIST_NAMES), None)
        title = next((i for i, name in enumerate(names) if name in cls.TITLE_NAMES), None)
        if artist is None or title is None:
            return None
        return cls(artist=artist, title=title)


@dataclass(frozen=True)
class PlaylistInfo:
    """Source file metadata shown in the info block."""

    name: str
    size: int
    modified: datetime

    @property
    def human_size(self) -> str:
        if self.size < 1024:
            return f"{self.size} B"
        size = float(self.size)
        for unit in ("KB", "MB", "GB"):
            size /= 1024
            if size < 1024:
                break
        return f"{size:.1f} {unit}"


@dataclass
class Playlist:
    """A parsed playlist file."""

    path: Path
    info: PlaylistInfo
    tracks: list[Track] = field(default_factory=list)
    source_format: str = "text"

    @property
    def track_count(self) -> int:
        return len(self.tracks)

    def __str__(self) -> str:
        return f"{self.info.name} ({self.track_count} tracks)"
