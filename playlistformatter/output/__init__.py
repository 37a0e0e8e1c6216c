"""Rendered playlist persistence."""

from playlistformatter.output.writer import (
    OutputExistsError,
    PersistenceError,
    SaveRequest,
    resolve_output_path,
    save_playlist,
)

__all__ = ["OutputExistsError", "PersistenceError", "SaveRequest", "resolve_output_path", "save_playlist"]
