from typing import ClassVar
from typing import Final

from listenone.infrastructure.adapters.providers.http import ProviderHttpClient
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouAlbumResponse
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouAlbumSongsResponse
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouPlaylistResponse
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouPlaylistsResponse
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouSong
from listenone.infrastructure.config.settings.kugou import kugou_settings


class KugouClientAdapter(ProviderHttpClient):
    """An asynchronous client for the Kugou public JSON endpoints.

    No signing is required: every read is a plain GET on the mobile (H5)
    or the mobile CDN hosts.
    """

    HOST: Final[ClassVar[str]] = "https://www.kugou.com"
    H5_HOST: Final[ClassVar[str]] = "https://m.kugou.com"
    MOBILE_CDN_HOST: Final[ClassVar[str]] = "http://mobilecdnbj.kugou.com"

    def __init__(
        self,
        timeout: float = kugou_settings.HTTP_TIMEOUT,
        max_attempts: int = kugou_settings.HTTP_MAX_ATTEMPTS,
        user_agent: str = kugou_settings.USER_AGENT,
        retry_multiplier: float = 1.0,
    ) -> None:
        super().__init__(
            headers={
                "Referer": f"{self.HOST}/",
                "Origin": f"{self.HOST}/",
                "User-Agent": user_agent,
            },
            timeout=timeout,
            max_attempts=max_attempts,
            retry_multiplier=retry_multiplier,
        )

    @property
    def playlists_url(self) -> str:
        return f"{self.H5_HOST}/plist/index"

    def playlist_url(self, playlist_id: str) -> str:
        return f"{self.H5_HOST}/plist/list/{playlist_id}"

    @property
    def song_url(self) -> str:
        return f"{self.H5_HOST}/app/i/getSongInfo.php"

    @property
    def album_url(self) -> str:
        return f"{self.MOBILE_CDN_HOST}/api/v3/album/info"

    @property
    def album_songs_url(self) -> str:
        return f"{self.MOBILE_CDN_HOST}/api/v3/album/song"

    async def get_playlists(self, page: int) -> KugouPlaylistsResponse:
        data = await self.get_json(self.playlists_url, params={"page": page, "json": "true"})
        return self.validate(KugouPlaylistsResponse, data, context=f"[Playlists(page={page})]")

    async def get_playlist(self, playlist_id: str) -> KugouPlaylistResponse:
        data = await self.get_json(self.playlist_url(playlist_id), params={"json": "true"})
        return self.validate(KugouPlaylistResponse, data, context=f"[Playlist({playlist_id})]")

    async def get_song(self, song_hash: str) -> KugouSong:
        data = await self.get_json(self.song_url, params={"cmd": "playInfo", "hash": song_hash})
        return self.validate(KugouSong, data, context=f"[Song({song_hash})]")

    async def get_album(self, album_id: int | str) -> KugouAlbumResponse:
        data = await self.get_json(self.album_url, params={"albumid": album_id})
        return self.validate(KugouAlbumResponse, data, context=f"[Album({album_id})]")

    async def get_album_songs(self, album_id: int | str) -> KugouAlbumSongsResponse:
        data = await self.get_json(self.album_songs_url, params={"albumid": album_id, "page": 1, "pagesize": -1})
        return self.validate(KugouAlbumSongsResponse, data, context=f"[AlbumSongs({album_id})]")
