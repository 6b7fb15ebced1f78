import logging

from listenone.domain.entities.music import Album
from listenone.domain.entities.music import Artist
from listenone.domain.entities.music import Lyric
from listenone.domain.entities.music import PagedResult
from listenone.domain.entities.music import Playlist
from listenone.domain.entities.music import Track
from listenone.domain.exceptions import ProviderFeatureNotSupportedError
from listenone.domain.ports.providers.catalog import ProviderCatalogPort
from listenone.domain.types import MusicProvider
from listenone.infrastructure.adapters.providers.fanout import fetch_bounded
from listenone.infrastructure.adapters.providers.kugou.client import KugouClientAdapter
from listenone.infrastructure.adapters.providers.kugou.mappers import to_domain_album
from listenone.infrastructure.adapters.providers.kugou.mappers import to_domain_playlist_summary
from listenone.infrastructure.adapters.providers.kugou.mappers import to_domain_playlists_page
from listenone.infrastructure.adapters.providers.kugou.mappers import to_domain_track
from listenone.infrastructure.config.settings.app import app_settings
from listenone.infrastructure.config.settings.kugou import kugou_settings

logger = logging.getLogger(__name__)


class KugouCatalogAdapter(ProviderCatalogPort):
    """Catalog backed by the Kugou JSON API, which supports true pagination.

    Fetching a playlist with its tracks needs two dependent calls per track
    (song detail, then album detail), all the tracks being fetched
    concurrently up to `max_concurrency`.
    """

    provider = MusicProvider.KUGOU

    def __init__(
        self,
        client: KugouClientAdapter,
        max_concurrency: int = app_settings.TRACKS_MAX_CONCURRENCY,
        page_size: int = kugou_settings.PLAYLIST_PAGE_SIZE,
    ) -> None:
        self.client = client
        self.max_concurrency = max_concurrency
        self.page_size = page_size

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    async def list_playlists(self, filter_id: str | None = None, offset: int = 0) -> PagedResult[Playlist]:
        # The listing endpoint has no category filter, so filter_id is ignored.
        page = offset // self.page_size + 1

        response = await self.client.get_playlists(page)
        return to_domain_playlists_page(response, page)

    async def get_playlist_with_tracks(self, native_id: str) -> Playlist:
        response = await self.client.get_playlist(native_id)

        hashes = response.get_song_hashes()
        logger.info(f"[Playlist({native_id})] Found {len(hashes)} tracks. Fetching details...")

        results = await fetch_bounded(
            keys=hashes,
            fetch=self._fetch_track,
            max_concurrency=self.max_concurrency,
            prefix_log=f"[Playlist({native_id})]",
        )

        return Playlist(
            info=to_domain_playlist_summary(response.info.playlist),
            tracks=[track for track in results if track is not None],
            failed_track_ids=[song_hash for song_hash, track in zip(hashes, results) if track is None],
        )

    async def get_album(self, native_id: str) -> Album:
        response = await self.client.get_album(native_id)
        if response.data is None:
            logger.info(f"[Album({native_id})] Unknown album, fallback on placeholders")
            return to_domain_album(native_id, None, [])

        songs_response = await self.client.get_album_songs(native_id)
        songs = songs_response.data.info if songs_response.data else []

        return to_domain_album(native_id, response.data, songs)

    async def get_lyric(self, native_id: str) -> Lyric:
        raise ProviderFeatureNotSupportedError(f"Lyrics are not supported by {self.provider}")

    async def get_artist(self, native_id: str) -> Artist:
        raise ProviderFeatureNotSupportedError(f"Artists are not supported by {self.provider}")

    async def list_top_playlists(self) -> PagedResult[Playlist]:
        raise ProviderFeatureNotSupportedError(f"Top playlists are not supported by {self.provider}")

    async def close(self) -> None:
        await self.client.close()

    # -------------------------------------------------------------------------
    # Core Logic
    # -------------------------------------------------------------------------

    async def _fetch_track(self, song_hash: str) -> Track:
        song = await self.client.get_song(song_hash)

        album = None
        if song.album_id:
            album_response = await self.client.get_album(song.album_id)
            album = album_response.data

        return to_domain_track(song, album)
