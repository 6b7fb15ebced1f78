import asyncio

import typer

from listenone.infrastructure.entrypoints.cli.commands.albums.show import show_logic

app = typer.Typer()


@app.command("show", help="Show an album with its tracks.")
def show(
    provider: str = typer.Option(..., "--provider", "-p", help="Provider name, e.g. kugou or netease"),
    album_id: str = typer.Option(..., "--id", help="Native album id"),
):
    """
    Show an album. An album unknown by the provider is displayed with
    placeholders rather than failing.
    """
    try:
        asyncio.run(show_logic(provider=provider, album_id=album_id))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e
