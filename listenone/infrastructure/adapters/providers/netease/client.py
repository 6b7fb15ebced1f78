import random
from collections.abc import Mapping
from typing import Any
from typing import ClassVar
from typing import Final

from listenone.domain.exceptions import ProviderResponseError
from listenone.infrastructure.adapters.providers.http import ProviderHttpClient
from listenone.infrastructure.adapters.providers.netease.cookies import create_cookie_jar
from listenone.infrastructure.adapters.providers.netease.crypto import encrypt_we_api_data
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseAlbumResponse
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseArtistResponse
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseLyricResponse
from listenone.infrastructure.adapters.providers.netease.schemas import NeteasePlaylistResponse
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseResponse
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseSongsResponse
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseTopPlaylistsResponse
from listenone.infrastructure.config.settings.netease import netease_settings


class NeteaseClientAdapter(ProviderHttpClient):
    """An asynchronous client for Netease Cloud Music.

    Playlists listing is only available as a rendered HTML page, whereas the
    details are served by the protected "weapi" endpoints, which only accept
    POST forms signed with `encrypt_we_api_data`.

    A visitor cookie jar is synthesized once per client and reused for all
    the calls.
    """

    HOST: Final[ClassVar[str]] = "https://music.163.com"

    PLAYLIST_DETAIL_LIMIT: Final[ClassVar[int]] = 1000

    def __init__(
        self,
        timeout: float = netease_settings.HTTP_TIMEOUT,
        max_attempts: int = netease_settings.HTTP_MAX_ATTEMPTS,
        user_agent: str = netease_settings.USER_AGENT,
        rng: random.Random | None = None,
        retry_multiplier: float = 1.0,
    ) -> None:
        self.rng = rng or random.SystemRandom()

        super().__init__(
            headers={
                "Referer": self.HOST,
                "Origin": self.HOST,
                "User-Agent": user_agent,
            },
            cookies=create_cookie_jar(self.rng),
            timeout=timeout,
            max_attempts=max_attempts,
            retry_multiplier=retry_multiplier,
        )

    @property
    def playlists_url(self) -> str:
        return f"{self.HOST}/discover/playlist"

    @property
    def playlist_detail_url(self) -> str:
        return f"{self.HOST}/weapi/v3/playlist/detail"

    @property
    def song_detail_url(self) -> str:
        return f"{self.HOST}/weapi/v3/song/detail"

    @property
    def lyric_url(self) -> str:
        return f"{self.HOST}/weapi/song/lyric"

    @property
    def top_playlists_url(self) -> str:
        return f"{self.HOST}/weapi/toplist/detail"

    def album_url(self, album_id: str) -> str:
        return f"{self.HOST}/api/album/{album_id}"

    def artist_url(self, artist_id: str) -> str:
        return f"{self.HOST}/api/artist/{artist_id}"

    async def get_playlists_page(
        self,
        order: str,
        offset: int,
        limit: int,
        category_id: str | None = None,
    ) -> str:
        """Returns the raw HTML of the playlists discovery page."""
        params: dict[str, Any] = {"order": order, "limit": limit, "offset": offset}
        if category_id:
            params["cat"] = category_id

        return await self.get_text(self.playlists_url, params=params)

    async def get_playlist_detail(self, playlist_id: str) -> NeteasePlaylistResponse:
        data = await self._weapi(
            self.playlist_detail_url,
            payload={
                "id": playlist_id,
                "offset": 0,
                "total": True,
                "limit": self.PLAYLIST_DETAIL_LIMIT,
                "n": self.PLAYLIST_DETAIL_LIMIT,
                "csrf_token": "",
            },
        )
        return self._validate_response(NeteasePlaylistResponse, data, context=f"[Playlist({playlist_id})]")

    async def get_songs(self, song_ids: list[int]) -> NeteaseSongsResponse:
        data = await self._weapi(
            self.song_detail_url,
            payload={
                "c": "[" + ",".join(f'{{"id":{song_id}}}' for song_id in song_ids) + "]",
                "ids": ",".join(str(song_id) for song_id in song_ids),
            },
        )
        return self._validate_response(NeteaseSongsResponse, data, context=f"[Songs({len(song_ids)})]")

    async def get_album(self, album_id: str) -> NeteaseAlbumResponse:
        data = await self.get_json(self.album_url(album_id))
        return self._validate_response(NeteaseAlbumResponse, data, context=f"[Album({album_id})]")

    async def get_song_lyric(self, song_id: str) -> NeteaseLyricResponse:
        data = await self._weapi(
            self.lyric_url,
            payload={"id": song_id, "lv": -1, "tv": -1, "csrf_token": ""},
            params={"csrf_token": ""},
        )
        return self._validate_response(NeteaseLyricResponse, data, context=f"[Lyric({song_id})]")

    async def get_artist(self, artist_id: str) -> NeteaseArtistResponse:
        data = await self.get_json(self.artist_url(artist_id))
        return self._validate_response(NeteaseArtistResponse, data, context=f"[Artist({artist_id})]")

    async def get_top_playlists(self) -> NeteaseTopPlaylistsResponse:
        data = await self._weapi(self.top_playlists_url, payload={})
        return self._validate_response(NeteaseTopPlaylistsResponse, data, context="[TopPlaylists]")

    async def _weapi(
        self,
        url: str,
        payload: Mapping[str, Any],
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        form = encrypt_we_api_data(payload, rng=self.rng)
        return await self.post_form(url, form=form.to_form(), params=params)

    def _validate_response[ResponseType: NeteaseResponse](
        self,
        model: type[ResponseType],
        data: Any,
        context: str,
    ) -> ResponseType:
        response = self.validate(model, data, context=context)
        if not response.is_success:
            raise ProviderResponseError(f"{context} - Netease returned the business code {response.code}")
        return response
