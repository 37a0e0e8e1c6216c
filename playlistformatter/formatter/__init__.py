"""Playlist rendering module."""

from playlistformatter.formatter.renderer import info_lines, print_info, print_playlist, render, render_text
from playlistformatter.formatter.styles import FormattingStyle

__all__ = ["FormattingStyle", "info_lines", "print_info", "print_playlist", "render", "render_text"]
