import asyncio

import typer

from listenone.infrastructure.entrypoints.cli.commands.lyrics.show import show_logic

app = typer.Typer()


@app.command("show", help="Show the lyric of a track.")
def show(
    provider: str = typer.Option(..., "--provider", "-p", help="Provider name, e.g. kugou or netease"),
    track_id: str = typer.Option(..., "--id", help="Native track id"),
):
    try:
        asyncio.run(show_logic(provider=provider, track_id=track_id))
    except Exception as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from e
