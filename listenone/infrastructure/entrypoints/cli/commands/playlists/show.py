from listenone.infrastructure.entrypoints.cli.dependencies import get_catalog_aggregator
from listenone.infrastructure.entrypoints.cli.render import render_playlist


async def show_logic(provider: str, playlist_id: str) -> None:
    async with get_catalog_aggregator() as aggregator:
        playlist = await aggregator.get_playlist_with_tracks(provider, playlist_id)

    render_playlist(playlist)
