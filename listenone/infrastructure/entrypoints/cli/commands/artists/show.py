from listenone.infrastructure.entrypoints.cli.dependencies import get_catalog_aggregator
from listenone.infrastructure.entrypoints.cli.render import render_artist


async def show_logic(provider: str, artist_id: str) -> None:
    async with get_catalog_aggregator() as aggregator:
        artist = await aggregator.get_artist(provider, artist_id)

    render_artist(artist)
