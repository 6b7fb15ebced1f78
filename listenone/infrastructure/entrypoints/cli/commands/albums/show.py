from listenone.infrastructure.entrypoints.cli.dependencies import get_catalog_aggregator
from listenone.infrastructure.entrypoints.cli.render import render_album


async def show_logic(provider: str, album_id: str) -> None:
    async with get_catalog_aggregator() as aggregator:
        album = await aggregator.get_album(provider, album_id)

    render_album(album)
