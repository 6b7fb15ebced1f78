import asyncio

import typer

from listenone.infrastructure.entrypoints.cli.commands.playlists.listing import list_logic
from listenone.infrastructure.entrypoints.cli.commands.playlists.show import show_logic
from listenone.infrastructure.entrypoints.cli.commands.playlists.top import top_logic

app = typer.Typer()


@app.command("list", help="List the featured playlists of a provider.")
def list_playlists(
    provider: str = typer.Option(..., "--provider", "-p", help="Provider name, e.g. kugou or netease"),
    filter_id: str | None = typer.Option(None, "--filter-id", help="Provider category of the playlists"),
    offset: int = typer.Option(0, "--offset", help="How many playlists to skip", min=0),
):
    """
    List one page of playlists. Providers without pagination return all the
    playlists found for the given offset.
    """
    try:
        asyncio.run(list_logic(provider=provider, filter_id=filter_id, offset=offset))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e


@app.command("show", help="Show a playlist with its tracks.")
def show(
    provider: str = typer.Option(..., "--provider", "-p", help="Provider name, e.g. kugou or netease"),
    playlist_id: str = typer.Option(..., "--id", help="Native playlist id"),
):
    try:
        asyncio.run(show_logic(provider=provider, playlist_id=playlist_id))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e


@app.command("top", help="List the charts of a provider.")
def top(
    provider: str = typer.Option(..., "--provider", "-p", help="Provider name, e.g. kugou or netease"),
):
    try:
        asyncio.run(top_logic(provider=provider))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e
