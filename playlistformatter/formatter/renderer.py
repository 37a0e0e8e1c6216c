"""Render parsed playlists as display text."""

from rich.console import Console
from rich.markup import escape

from playlistformatter.formatter.styles import FormattingStyle
from playlistformatter.playlist.models import Playlist, Track

TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def render(playlist: Playlist, style: FormattingStyle) -> list[str]:
    """Render playlist tracks as lines of text for the given style."""
    if style == FormattingStyle.BASIC:
        return [track.display_text for track in playlist.tracks]
    if style == FormattingStyle.NUMBERED:
        return _render_numbered(playlist.tracks)
    return _render_pretty(playlist.tracks)


def render_text(playlist: Playlist, style: FormattingStyle) -> str:
    """Render playlist as a single string, as printed and saved."""
    lines = render(playlist, style)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def _render_numbered(tracks: list[Track]) -> list[str]:
    # Pad numbers to the widest one so columns line up from 10 tracks upwards
    width = len(str(len(tracks)))
    return [f"{number:>{width}}: {track.display_text}" for number, track in enumerate(tracks, 1)]


def _render_pretty(tracks: list[Track]) -> list[str]:
    number_width = max(1, len(str(len(tracks))))
    artist_width = max([len("Artist")] + [len(track.artist) for track in tracks])
    title_width = max([len("Title")] + [len(track.title) for track in tracks])

    def row(number: str, artist: str, title: str) -> str:
        return f"{number:>{number_width}}  {artist:<{artist_width}}  {title}".rstrip()

    lines = [
        row("#", "Artist", "Title"),
        row("-" * number_width, "-" * artist_width, "-" * title_width),
    ]
    for number, track in enumerate(tracks, 1):
        lines.append(row(str(number), track.artist, track.title))
    return lines


def info_lines(playlist: Playlist) -> list[str]:
    """Summary of the source file shown before a pretty listing."""
    info = playlist.info
    return [
        f"Playlist: {info.name}",
        f"Path:     {playlist.path}",
        f"Tracks:   {playlist.track_count}",
        f"Size:     {info.human_size}",
        f"Modified: {info.modified.strftime(TIME_FORMAT)}",
    ]


def print_info(playlist: Playlist, console: Console) -> None:
    """Print the info block."""
    title, *details = info_lines(playlist)
    console.print(f"[bold]{escape(title)}[/bold]", soft_wrap=True)
    for line in details:
        console.print(f"[dim]{escape(line)}[/dim]", soft_wrap=True)
    console.print()


def print_playlist(playlist: Playlist, style: FormattingStyle, console: Console) -> None:
    """Print rendered lines exactly as they would be saved."""
    for line in render(playlist, style):
        console.print(line, markup=False, highlight=False, emoji=False, soft_wrap=True)
