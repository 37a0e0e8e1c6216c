"""Command-line interface for the playlist formatter."""

import logging
from enum import Enum
from typing import Annotated, NoReturn, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from playlistformatter import __version__
from playlistformatter.config import load_config
from playlistformatter.formatter import FormattingStyle, print_info, print_playlist, render_text
from playlistformatter.output import PersistenceError, SaveRequest, resolve_output_path, save_playlist
from playlistformatter.playlist import PlaylistError, load_playlist

app = typer.Typer(
    name="playlist-formatter",
    help="DJ playlist formatting utility. Reads raw playlist files and creates a nicely formatted version.",
    no_args_is_help=True,
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger("playlistformatter")


class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"

    def to_logging_level(self) -> int:
        return {
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.WARN: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
        }[self]


def setup_logging(level: LogLevel) -> None:
    """Configure process logging with timestamps on stderr."""
    logging.basicConfig(
        level=level.to_logging_level(),
        format="%(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )
    logger.debug(f"Using log level: {level.value}")


def fail(message: str) -> NoReturn:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(1)


def version_callback(value: bool) -> None:
    if value:
        console.print(f"playlist-formatter {__version__}")
        raise typer.Exit()


@app.command()
def format_playlist(
    file: Annotated[str, typer.Argument(help="Playlist file to process")],
    output: Annotated[
        Optional[str],
        typer.Argument(help="Optional output path to save playlist to"),
    ] = None,
    default: Annotated[
        bool,
        typer.Option("--default", "-d", help="Use default save dir"),
    ] = False,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
    log: Annotated[
        Optional[LogLevel],
        typer.Option("--log", "-l", help="Log level", metavar="LEVEL", case_sensitive=False),
    ] = None,
    basic: Annotated[
        bool,
        typer.Option("--basic", "-b", help="Use basic print formatting style"),
    ] = False,
    numbered: Annotated[
        bool,
        typer.Option("--numbered", "-n", help="Use numbered print formatting style"),
    ] = False,
    save: Annotated[
        bool,
        typer.Option(
            "--save",
            "-s",
            help="Save formatted playlist to file. Uses OUTPUT if given, otherwise a generated name",
        ),
    ] = False,
    version: Annotated[
        Optional[bool],
        typer.Option("--version", "-V", callback=version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    """Format a raw DJ playlist file."""
    config = load_config()
    setup_logging(log or LogLevel(config.log_level))

    try:
        style = FormattingStyle.from_flags(basic=basic, numbered=numbered)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    logger.debug(f"Formatting style: {style}")

    request = SaveRequest.from_args(output, save=save, use_default_dir=default, overwrite=force)

    try:
        playlist = load_playlist(file, origin=config.position_origin, log=logger.debug)
    except PlaylistError as e:
        fail(str(e))
    logger.debug(f"Playlist file: {playlist.path}")

    if style == FormattingStyle.PRETTY:
        print_info(playlist, console)

    print_playlist(playlist, style, console)

    target = resolve_output_path(request, playlist.path, config)
    if target is None:
        return

    try:
        saved = save_playlist(
            render_text(playlist, style),
            target,
            overwrite=request.overwrite,
            source=playlist.path,
            log=logger.debug,
        )
    except PersistenceError as e:
        fail(str(e))
    logger.info(f"Saved playlist to {saved}")


if __name__ == "__main__":
    app()
