import asyncio

import typer

from listenone.infrastructure.entrypoints.cli.commands.artists.show import show_logic

app = typer.Typer()


@app.command("show", help="Show an artist with its popular tracks.")
def show(
    provider: str = typer.Option(..., "--provider", "-p", help="Provider name, e.g. kugou or netease"),
    artist_id: str = typer.Option(..., "--id", help="Native artist id"),
):
    try:
        asyncio.run(show_logic(provider=provider, artist_id=artist_id))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e
