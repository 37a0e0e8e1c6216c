from __future__ import annotations

import logging

from typer.testing import CliRunner

from playlistformatter import __version__
from playlistformatter.cli import LogLevel, app, err_console, setup_logging
from playlistformatter.formatter import FormattingStyle, render_text
from playlistformatter.playlist import load_playlist

runner = CliRunner()


def test_basic_style_prints_tracks_and_drops_blank_lines(playlist_file) -> None:
    result = runner.invoke(app, [str(playlist_file), "--basic"])

    assert result.exit_code == 0
    assert result.stdout == "Artist - Title\nOther - Song\n"


def test_numbered_style_prints_positions(playlist_file) -> None:
    result = runner.invoke(app, [str(playlist_file), "-n"])

    assert result.exit_code == 0
    assert result.stdout == "1: Artist - Title\n2: Other - Song\n"


def test_pretty_style_is_default_and_shows_info(playlist_file) -> None:
    result = runner.invoke(app, [str(playlist_file)])

    assert result.exit_code == 0
    assert "Playlist: set.txt" in result.stdout
    assert "Tracks:   2" in result.stdout
    assert result.stdout.endswith(render_text(load_playlist(playlist_file), FormattingStyle.PRETTY))


def test_conflicting_styles_are_rejected(playlist_file) -> None:
    result = runner.invoke(app, [str(playlist_file), "--basic", "--numbered"])

    assert result.exit_code == 2


def test_missing_file_fails(tmp_path) -> None:
    result = runner.invoke(app, [str(tmp_path / "missing.txt")])

    assert result.exit_code == 1


def test_save_without_path_writes_next_to_source(playlist_file) -> None:
    result = runner.invoke(app, [str(playlist_file), "--basic", "--save"])

    target = playlist_file.parent / "set_formatted.txt"
    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == "Artist - Title\nOther - Song\n"


def test_save_with_default_flag_uses_default_directory(playlist_file, tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("PLAYLIST_FORMATTER_DEFAULT_OUTPUT_DIR", str(tmp_path / "exports"))

    result = runner.invoke(app, [str(playlist_file), "-n", "-s", "-d"])

    target = tmp_path / "exports" / "set_formatted.txt"
    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == "1: Artist - Title\n2: Other - Song\n"


def test_force_overwrites_existing_output(playlist_file, tmp_path) -> None:
    target = tmp_path / "out.txt"
    target.write_text("something else entirely\n", encoding="utf-8")

    result = runner.invoke(app, [str(playlist_file), str(target), "--basic", "--force"])

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == "Artist - Title\nOther - Song\n"


def test_existing_output_without_force_is_left_untouched(playlist_file, tmp_path) -> None:
    target = tmp_path / "out.txt"
    target.write_bytes(b"keep me\n")

    result = runner.invoke(app, [str(playlist_file), str(target), "--basic"])

    assert result.exit_code == 1
    assert target.read_bytes() == b"keep me\n"


def test_save_flag_with_output_path(playlist_file, tmp_path) -> None:
    target = tmp_path / "nested" / "saved.txt"

    result = runner.invoke(app, [str(playlist_file), "--save", str(target), "--log", "debug"])

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8") == render_text(
        load_playlist(playlist_file), FormattingStyle.PRETTY
    )


def test_version_option() -> None:
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_tabular_row_without_artist_prints_and_saves_title(write_playlist, tmp_path) -> None:
    source = write_playlist(
        [
            "#\tTrack Title\tArtist\tBPM",
            "1\tFirst Song\tFirst Artist\t122.00",
            "2\tID\t\t124.00",
        ]
    )
    target = tmp_path / "out.txt"

    result = runner.invoke(app, [str(source), str(target), "--numbered", "--log", "error"])

    assert result.exit_code == 0
    assert result.stdout == "1: First Artist - First Song\n2: ID\n"
    assert target.read_text(encoding="utf-8") == result.stdout


def test_logging_uses_error_console() -> None:
    setup_logging(LogLevel.INFO)

    handlers = logging.getLogger().handlers
    assert any(getattr(handler, "console", None) is err_console for handler in handlers)
