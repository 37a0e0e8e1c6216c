"""Raw playlist parsing module."""

from playlistformatter.playlist.models import ColumnLayout, Playlist, PlaylistInfo, Track
from playlistformatter.playlist.parser import (
    InputFileError,
    ParseError,
    PlaylistError,
    PlaylistParser,
    load_playlist,
    parse_line,
    validate_input_path,
)

__all__ = [
    "ColumnLayout",
    "InputFileError",
    "ParseError",
    "Playlist",
    "PlaylistError",
    "PlaylistInfo",
    "PlaylistParser",
    "Track",
    "load_playlist",
    "parse_line",
    "validate_input_path",
]
