"""Parser for raw DJ playlist exports."""

import codecs
import re
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from playlistformatter.playlist.models import ColumnLayout, Playlist, PlaylistInfo, Track


class PlaylistError(Exception):
    """Base exception for playlist input errors."""

    pass


class InputFileError(PlaylistError):
    """Input path is empty, missing or not a regular file."""

    pass


class ParseError(PlaylistError):
    """Playlist file or its metadata could not be read or decoded."""

    pass


# Lines made only of separator characters: "-----", "=== ===", "***"
SEPARATOR_PATTERN = re.compile(r"^[\s\-=_*~#]+$")

# Leading position: "1. ", "01) ", "12: "
NUMBER_PATTERN = re.compile(r"^(\d{1,4})\s*[.):]\s+")

# Leading timestamp: "00:12 ", "[01:02:03] "
TIMESTAMP_PATTERN = re.compile(r"^\[?\d{1,2}:\d{2}(?::\d{2})?\]?\s+")

# Artist / title separator: " - ", also en and em dash
ARTIST_TITLE_SEPARATOR = re.compile(r"\s+[-–—]\s+")


def parse_line(raw: str, position: int, layout: ColumnLayout | None = None) -> Track | None:
    """
    Parse one raw playlist line into a Track.

    Returns None for blank lines, separator lines and, before a column
    layout is known, column headers.
    Lines that cannot be split into artist and title still produce a Track
    with an empty artist and the raw text preserved.
    """
    line = raw.strip()
    if not line or SEPARATOR_PATTERN.match(line):
        return None
    if layout is None and ColumnLayout.from_header(line):
        return None

    if layout and "\t" in line:
        track = _parse_columns(line, position, layout)
        if track:
            return track

    text = " ".join(field.strip() for field in line.split("\t") if field.strip())

    source_number = None
    match = NUMBER_PATTERN.match(text)
    if match:
        source_number = int(match.group(1))
        text = text[match.end() :]
    text = TIMESTAMP_PATTERN.sub("", text, count=1).strip()

    parts = ARTIST_TITLE_SEPARATOR.split(text, maxsplit=1)
    if len(parts) == 2 and parts[0].strip() and parts[1].strip():
        return Track(
            position=position,
            title=parts[1].strip(),
            artist=parts[0].strip(),
            raw=line,
            source_number=source_number,
        )

    return Track(position=position, title=text or line, raw=line, source_number=source_number)


def _parse_columns(line: str, position: int, layout: ColumnLayout) -> Track | None:
    """Extract a track from a tab separated row using header column indexes."""
    fields = [field.strip() for field in line.split("\t")]

    title = fields[layout.title] if layout.title < len(fields) else ""
    artist = fields[layout.artist] if layout.artist < len(fields) else ""
    if not title:
        return None

    return Track(position=position, title=title, artist=artist, raw=line)


def validate_input_path(value: str | Path) -> Path:
    """Check the input argument refers to a regular file and return its absolute path."""
    text = str(value).strip()
    if not text:
        raise InputFileError("Empty input file")

    path = Path(text).expanduser()
    if not path.is_file():
        raise InputFileError(f"File does not exist or is not accessible: '{path}'")

    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise InputFileError(f"Failed to resolve input path '{path}': {e}") from e


class PlaylistParser:
    """Build Playlist objects from raw playlist files."""

    def __init__(self, origin: int = 1, log: Callable[[str], None] | None = None):
        if origin not in (0, 1):
            raise ValueError(f"Position origin must be 0 or 1, got {origin}")
        self.origin = origin
        self.log = log or (lambda message: None)

    def parse_file(self, path: Path) -> Playlist:
        """Read and parse a playlist file."""
        path = Path(path)
        if not path.is_file():
            raise ParseError(f"Playlist file is not readable: '{path}'")

        try:
            data = path.read_bytes()
            stat = path.stat()
        except OSError as e:
            raise ParseError(f"Failed to read playlist file '{path}': {e}") from e

        try:
            text = self.decode(data)
        except UnicodeDecodeError as e:
            raise ParseError(f"Failed to decode playlist file '{path}': {e}") from e

        info = PlaylistInfo(
            name=path.name,
            size=stat.st_size,
            modified=datetime.fromtimestamp(stat.st_mtime),
        )
        tracks, layout = self.parse_text(text)

        playlist = Playlist(
            path=path,
            info=info,
            tracks=tracks,
            source_format="tabular" if layout else "text",
        )
        self.log(f"Parsed {playlist.track_count} tracks from {path} ({playlist.source_format})")
        return playlist

    def parse_text(self, text: str) -> tuple[list[Track], ColumnLayout | None]:
        """Parse playlist contents into tracks, in line order."""
        tracks: list[Track] = []
        layout: ColumnLayout | None = None
        header_line: str | None = None

        for number, line in enumerate(text.splitlines(), 1):
            stripped = line.strip()
            if layout is None:
                layout = ColumnLayout.from_header(stripped)
                if layout:
                    header_line = stripped
                    self.log(f"Column header on line {number}: {layout}")
                    continue
            elif stripped == header_line:
                continue

            track = parse_line(line, self.origin + len(tracks), layout)
            if track is None:
                if stripped:
                    self.log(f"Skipping line {number}: {stripped!r}")
                continue
            tracks.append(track)

        return tracks, layout

    @staticmethod
    def decode(data: bytes) -> str:
        """Decode file contents: UTF-16 when a UTF-16 BOM is present, otherwise UTF-8."""
        if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
            return data.decode("utf-16")
        return data.decode("utf-8-sig")


def load_playlist(
    path: str | Path,
    origin: int = 1,
    log: Callable[[str], None] | None = None,
) -> Playlist:
    """Validate the input path and parse the playlist it points to."""
    absolute_path = validate_input_path(path)
    return PlaylistParser(origin=origin, log=log).parse_file(absolute_path)
