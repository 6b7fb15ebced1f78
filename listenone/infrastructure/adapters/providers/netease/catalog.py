import logging
from itertools import batched

from listenone.domain.entities.music import Album
from listenone.domain.entities.music import Artist
from listenone.domain.entities.music import Lyric
from listenone.domain.entities.music import PagedResult
from listenone.domain.entities.music import Playlist
from listenone.domain.entities.music import Track
from listenone.domain.exceptions import ProviderResponseError
from listenone.domain.ports.providers.catalog import ProviderCatalogPort
from listenone.domain.types import MusicProvider
from listenone.infrastructure.adapters.providers.fanout import fetch_bounded
from listenone.infrastructure.adapters.providers.netease.client import NeteaseClientAdapter
from listenone.infrastructure.adapters.providers.netease.mappers import IMAGE_SIZE
from listenone.infrastructure.adapters.providers.netease.mappers import IMAGE_SIZE_TOKEN
from listenone.infrastructure.adapters.providers.netease.mappers import to_domain_album
from listenone.infrastructure.adapters.providers.netease.mappers import to_domain_artist
from listenone.infrastructure.adapters.providers.netease.mappers import to_domain_listing_playlist
from listenone.infrastructure.adapters.providers.netease.mappers import to_domain_lyric
from listenone.infrastructure.adapters.providers.netease.mappers import to_domain_playlist_summary
from listenone.infrastructure.adapters.providers.netease.mappers import to_domain_top_playlists_page
from listenone.infrastructure.adapters.providers.netease.mappers import to_domain_track
from listenone.infrastructure.adapters.providers.scraper import HtmlListingScraper
from listenone.infrastructure.adapters.providers.scraper import query_param_id
from listenone.infrastructure.config.settings.app import app_settings
from listenone.infrastructure.config.settings.netease import netease_settings

logger = logging.getLogger(__name__)


class NeteaseCatalogAdapter(ProviderCatalogPort):
    """Catalog backed by Netease Cloud Music.

    The playlists listing is scraped from the discovery page, which has no
    notion of total, hence a page reported as `page=0, page_size=0, total=0`.
    Tracks details are requested by chunks of ids through the signed weapi
    endpoints.
    """

    provider = MusicProvider.NETEASE

    def __init__(
        self,
        client: NeteaseClientAdapter,
        max_concurrency: int = app_settings.TRACKS_MAX_CONCURRENCY,
        page_limit: int = netease_settings.PLAYLIST_PAGE_LIMIT,
        order: str = netease_settings.PLAYLIST_ORDER,
        chunk_size: int = netease_settings.SONG_DETAIL_CHUNK_SIZE,
    ) -> None:
        self.client = client
        self.max_concurrency = max_concurrency
        self.page_limit = page_limit
        self.order = order
        self.chunk_size = chunk_size

        self.scraper = HtmlListingScraper(
            container_selector=".m-cvrlst",
            id_extractor=query_param_id("id"),
            image_size_token=IMAGE_SIZE_TOKEN,
            image_target_size=IMAGE_SIZE,
        )

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def list_playlists(self, filter_id: str | None = None, offset: int = 0) -> PagedResult[Playlist]:
        html = await self.client.get_playlists_page(
            order=self.order,
            offset=offset,
            limit=self.page_limit,
            category_id=filter_id,
        )
        records = self.scraper.scrape(html)

        return PagedResult(
            items=[to_domain_listing_playlist(record) for record in records],
            page=0,
            page_size=0,
            total=0,
        )

    async def get_playlist_with_tracks(self, native_id: str) -> Playlist:
        response = await self.client.get_playlist_detail(native_id)
        if response.playlist is None:
            raise ProviderResponseError(f"[Playlist({native_id})] Netease returned no playlist")

        track_ids = [track_id.id for track_id in response.playlist.track_ids]
        chunks = [list(chunk) for chunk in batched(track_ids, self.chunk_size)]
        logger.info(
            f"[Playlist({native_id})] Found {len(track_ids)} tracks. Fetching details in {len(chunks)} chunks..."
        )

        results = await fetch_bounded(
            keys=chunks,
            fetch=self._fetch_tracks,
            max_concurrency=self.max_concurrency,
            prefix_log=f"[Playlist({native_id})]",
        )

        tracks_by_id: dict[int, Track] = {}
        for chunk_tracks in results:
            if chunk_tracks is not None:
                tracks_by_id.update(chunk_tracks)

        missing_ids = [track_id for track_id in track_ids if track_id not in tracks_by_id]
        if missing_ids:
            logger.warning(f"[Playlist({native_id})] {len(missing_ids)} tracks could not be fetched")

        return Playlist(
            info=to_domain_playlist_summary(response.playlist),
            tracks=[tracks_by_id[track_id] for track_id in track_ids if track_id in tracks_by_id],
            failed_track_ids=[str(track_id) for track_id in missing_ids],
        )

    async def get_album(self, native_id: str) -> Album:
        response = await self.client.get_album(native_id)
        if response.album is None:
            logger.info(f"[Album({native_id})] Unknown album, fallback on placeholders")

        return to_domain_album(native_id, response.album)

    async def get_lyric(self, native_id: str) -> Lyric:
        response = await self.client.get_song_lyric(native_id)
        return to_domain_lyric(native_id, response)

    async def get_artist(self, native_id: str) -> Artist:
        response = await self.client.get_artist(native_id)
        if response.artist is None:
            logger.info(f"[Artist({native_id})] Unknown artist, fallback on placeholders")

        return to_domain_artist(native_id, response.artist, response.hot_songs)

    async def list_top_playlists(self) -> PagedResult[Playlist]:
        response = await self.client.get_top_playlists()
        return to_domain_top_playlists_page(response.playlists)

    async def close(self) -> None:
        await self.client.close()

    # -------------------------------------------------------------------------
    # Core Logic
    # -------------------------------------------------------------------------

    async def _fetch_tracks(self, song_ids: list[int]) -> dict[int, Track]:
        response = await self.client.get_songs(song_ids)
        return {song.id: to_domain_track(song) for song in response.songs}
