from listenone.infrastructure.entrypoints.cli.dependencies import get_catalog_aggregator
from listenone.infrastructure.entrypoints.cli.render import render_playlists_page


async def top_logic(provider: str) -> None:
    async with get_catalog_aggregator() as aggregator:
        page = await aggregator.get_top_playlists(provider)

    render_playlists_page(page, title="Charts")
