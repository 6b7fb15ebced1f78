from listenone.infrastructure.entrypoints.cli.dependencies import get_catalog_aggregator
from listenone.infrastructure.entrypoints.cli.render import render_lyric


async def show_logic(provider: str, track_id: str) -> None:
    async with get_catalog_aggregator() as aggregator:
        lyric = await aggregator.get_lyric(provider, track_id)

    render_lyric(lyric)
