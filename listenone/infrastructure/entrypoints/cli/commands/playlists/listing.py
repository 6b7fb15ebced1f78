from listenone.application.services.catalog import PlaylistQuery
from listenone.infrastructure.entrypoints.cli.dependencies import get_catalog_aggregator
from listenone.infrastructure.entrypoints.cli.render import render_playlists_page


async def list_logic(provider: str, filter_id: str | None, offset: int) -> None:
    async with get_catalog_aggregator() as aggregator:
        page = await aggregator.get_playlists(
            provider,
            PlaylistQuery(filter_id=filter_id, offset=offset),
        )

    render_playlists_page(page)
