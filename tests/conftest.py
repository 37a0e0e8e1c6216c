from __future__ import annotations

from pathlib import Path

import pytest

from playlistformatter.config import AppConfig


@pytest.fixture
def write_playlist(tmp_path):
    def _write(lines: list[str], name: str = "set.txt", encoding: str = "utf-8") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding=encoding)
        return path

    return _write


@pytest.fixture
def playlist_file(write_playlist) -> Path:
    return write_playlist(["1. Artist - Title", "", "2. Other - Song"])


@pytest.fixture
def config(tmp_path) -> AppConfig:
    return AppConfig(default_output_dir=tmp_path / "default_out")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    for name in (
        "PLAYLIST_FORMATTER_DEFAULT_OUTPUT_DIR",
        "PLAYLIST_FORMATTER_OUTPUT_SUFFIX",
        "PLAYLIST_FORMATTER_OUTPUT_EXTENSION",
        "PLAYLIST_FORMATTER_POSITION_ORIGIN",
        "PLAYLIST_FORMATTER_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
