"""Output path resolution and playlist file writing."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from playlistformatter.config import AppConfig


class PersistenceError(Exception):
    """Base exception for saving a rendered playlist."""

    pass


class OutputExistsError(PersistenceError):
    """Output file already exists and overwriting was not allowed."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Output file already exists: '{path}' (use --force to overwrite)")


@dataclass
class SaveRequest:
    """Resolved save options from the command line."""

    enabled: bool = False
    path: Path | None = None
    use_default_dir: bool = False
    overwrite: bool = False

    @classmethod
    def from_args(
        cls,
        output: str | Path | None = None,
        save: bool = False,
        use_default_dir: bool = False,
        overwrite: bool = False,
    ) -> "SaveRequest":
        """Build a request from the output argument and save flags."""
        path = Path(output) if output is not None and str(output).strip() else None
        return cls(
            enabled=save or path is not None,
            path=path,
            use_default_dir=use_default_dir,
            overwrite=overwrite,
        )


def resolve_output_path(request: SaveRequest, source: Path, config: AppConfig) -> Path | None:
    """
    Decide where a rendered playlist should be saved.

    An explicit path wins; a directory gets the generated file name inside it.
    Without a path the generated name goes to the default output directory
    when requested, otherwise next to the source file. Returns None if no
    save was requested.
    """
    if request.path is not None:
        target = request.path.expanduser()
        if target.is_dir():
            target = target / config.output_name(source)
        return target

    if not request.enabled:
        return None

    if request.use_default_dir:
        return config.default_output_dir / config.output_name(source)
    return source.parent / config.output_name(source)


def save_playlist(
    text: str,
    target: Path,
    overwrite: bool = False,
    source: Path | None = None,
    log: Callable[[str], None] | None = None,
) -> Path:
    """
    Write rendered playlist text to target.

    Writes go to a temporary file in the target directory which then
    replaces the target, so a failed write leaves any existing file intact.
    """
    log = log or (lambda message: None)
    target = Path(target)

    if source is not None and target.resolve() == Path(source).resolve():
        raise PersistenceError(f"Refusing to overwrite the source playlist: '{target}'")

    if target.exists() and not overwrite:
        raise OutputExistsError(target)

    try:
        if not target.parent.exists():
            log(f"Creating output directory: {target.parent}")
        target.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PersistenceError(f"Failed to create output directory '{target.parent}': {e}") from e

    temp_path = target.with_name(f".{target.name}.tmp")
    try:
        with temp_path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
        temp_path.replace(target)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise PersistenceError(f"Failed to write output file '{target}': {e}") from e

    log(f"Wrote {len(text)} characters to {target}")
    return target
