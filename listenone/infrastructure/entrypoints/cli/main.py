import typer

from listenone import __version__
from listenone.infrastructure.config.loggers import configure_loggers
from listenone.infrastructure.config.settings.app import app_settings
from listenone.infrastructure.entrypoints.cli.commands.albums import app as albums_app
from listenone.infrastructure.entrypoints.cli.commands.artists import app as artists_app
from listenone.infrastructure.entrypoints.cli.commands.lyrics import app as lyrics_app
from listenone.infrastructure.entrypoints.cli.commands.playlists import app as playlists_app
from listenone.infrastructure.types import LogHandler
from listenone.infrastructure.types import LogLevel

app = typer.Typer(
    name="listenone",
    help="Browse the Kugou and Netease music catalogs from a single place.",
    no_args_is_help=True,
)
app.add_typer(playlists_app, name="playlists", help="Browse playlists.")
app.add_typer(albums_app, name="albums", help="Browse albums.")
app.add_typer(artists_app, name="artists", help="Browse artists.")
app.add_typer(lyrics_app, name="lyrics", help="Read lyrics.")


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"Listenone Version: {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show the version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: LogLevel = typer.Option(
        "DEBUG" if app_settings.DEBUG else app_settings.LOG_LEVEL,
        "--log-level",
        help="Minimum level of the application logs.",
    ),
    log_handlers: list[LogHandler] = typer.Option(
        app_settings.LOG_HANDLERS,
        "--log-handler",
        help="Logging handler to use, may be repeated.",
    ),
) -> None:
    configure_loggers(level=log_level, handlers=log_handlers)
