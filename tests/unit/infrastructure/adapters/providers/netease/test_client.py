import json
import re
from collections.abc import Iterable
from unittest import mock
from urllib.parse import parse_qs

import pytest
from pytest_httpx import HTTPXMock

from listenone.domain.exceptions import ProviderDecodeError
from listenone.domain.exceptions import ProviderResponseError
from listenone.infrastructure.adapters.providers.netease.client import NeteaseClientAdapter
from listenone.infrastructure.adapters.providers.netease.crypto import ENC_SEC_KEY_SIZE
from listenone.infrastructure.adapters.providers.netease.crypto import encrypt_we_api_data

from tests.unit.conftest import load_json

TARGET_PATH = "listenone.infrastructure.adapters.providers.netease.client"


class TestNeteaseClient:
    @pytest.fixture
    def spy_encrypt(self) -> Iterable[mock.Mock]:
        with mock.patch(f"{TARGET_PATH}.encrypt_we_api_data", wraps=encrypt_we_api_data) as patched:
            yield patched

    def test__headers(self, netease_client: NeteaseClientAdapter) -> None:
        headers = netease_client._client.headers
        assert headers["Referer"] == "https://music.163.com"
        assert headers["Origin"] == "https://music.163.com"
        assert headers["User-Agent"] == "listenone-tests"

    async def test__get_playlists_page(self, netease_client: NeteaseClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url="https://music.163.com/discover/playlist?order=hot&limit=35&offset=70&cat=%E5%8D%8E%E8%AF%AD",
            method="GET",
            text="<html></html>",
        )

        html = await netease_client.get_playlists_page(order="hot", offset=70, limit=35, category_id="华语")
        assert html == "<html></html>"

    async def test__get_playlists_page__no_category(
        self,
        netease_client: NeteaseClientAdapter,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(url="https://music.163.com/discover/playlist?order=hot&limit=35&offset=0", text="")

        await netease_client.get_playlists_page(order="hot", offset=0, limit=35, category_id=None)

        request = httpx_mock.get_request()
        assert request is not None
        assert "cat" not in request.url.params

    async def test__cookies_sent(self, netease_client: NeteaseClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url="https://music.163.com/discover/playlist?order=hot&limit=35&offset=0", text="")

        await netease_client.get_playlists_page(order="hot", offset=0, limit=35)

        request = httpx_mock.get_request()
        assert request is not None
        assert "_ntes_nuid=" in request.headers["Cookie"]
        assert "_ntes_nnid=" in request.headers["Cookie"]

    async def test__get_playlist_detail(
        self,
        netease_client: NeteaseClientAdapter,
        spy_encrypt: mock.Mock,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(
            url="https://music.163.com/weapi/v3/playlist/detail",
            method="POST",
            json=load_json("netease", "playlist_detail"),
        )

        response = await netease_client.get_playlist_detail("2400007")

        assert response.playlist is not None
        assert [track.id for track in response.playlist.track_ids] == [186016, 186017, 186018]

        spy_encrypt.assert_called_once_with(
            {"id": "2400007", "offset": 0, "total": True, "limit": 1000, "n": 1000, "csrf_token": ""},
            rng=netease_client.rng,
        )

        request = httpx_mock.get_request()
        assert request is not None
        assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"

        form = parse_qs(request.content.decode())
        assert set(form.keys()) == {"params", "encSecKey"}
        assert len(form["encSecKey"][0]) == ENC_SEC_KEY_SIZE

    async def test__get_songs__payload(
        self,
        netease_client: NeteaseClientAdapter,
        spy_encrypt: mock.Mock,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(
            url="https://music.163.com/weapi/v3/song/detail",
            method="POST",
            json=load_json("netease", "song_detail"),
        )

        response = await netease_client.get_songs([186016, 186017])
        assert len(response.songs) == 3

        payload = spy_encrypt.call_args.args[0]
        assert payload["ids"] == "186016,186017"
        assert json.loads(payload["c"]) == [{"id": 186016}, {"id": 186017}]

    async def test__get_album(self, netease_client: NeteaseClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url="https://music.163.com/api/album/18918",
            method="GET",
            json=load_json("netease", "album"),
        )

        response = await netease_client.get_album("18918")
        assert response.album is not None
        assert response.album.name == "Variety"

    async def test__get_song_lyric(
        self,
        netease_client: NeteaseClientAdapter,
        spy_encrypt: mock.Mock,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(
            url=re.compile(r"https://music\.163\.com/weapi/song/lyric.*"),
            method="POST",
            json=load_json("netease", "lyric"),
        )

        response = await netease_client.get_song_lyric("186017")
        assert response.lrc is not None

        request = httpx_mock.get_request()
        assert request is not None
        assert request.url.params["csrf_token"] == ""

        payload = spy_encrypt.call_args.args[0]
        assert payload == {"id": "186017", "lv": -1, "tv": -1, "csrf_token": ""}

    async def test__get_artist(self, netease_client: NeteaseClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url="https://music.163.com/api/artist/17315",
            method="GET",
            json=load_json("netease", "artist"),
        )

        response = await netease_client.get_artist("17315")

        assert response.artist is not None
        assert response.artist.name == "Mariya Takeuchi"
        assert response.artist.music_size == 412
        assert [song.id for song in response.hot_songs] == [186017, 186030]

    async def test__get_top_playlists(
        self,
        netease_client: NeteaseClientAdapter,
        spy_encrypt: mock.Mock,
        httpx_mock: HTTPXMock,
    ) -> None:
        httpx_mock.add_response(
            url="https://music.163.com/weapi/toplist/detail",
            method="POST",
            json=load_json("netease", "toplist"),
        )

        response = await netease_client.get_top_playlists()

        assert [playlist.id for playlist in response.playlists] == [19723756, 3779629, 3778678]
        spy_encrypt.assert_called_once_with({}, rng=netease_client.rng)

        request = httpx_mock.get_request()
        assert request is not None
        assert set(parse_qs(request.content.decode()).keys()) == {"params", "encSecKey"}

    async def test__business_error(self, netease_client: NeteaseClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url="https://music.163.com/api/album/1",
            method="GET",
            json=load_json("netease", "error"),
        )

        with pytest.raises(ProviderResponseError, match="business code 404"):
            await netease_client.get_album("1")

    async def test__decode_error(self, netease_client: NeteaseClientAdapter, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(
            url="https://music.163.com/weapi/v3/playlist/detail",
            method="POST",
            json={"code": 200, "playlist": {"id": "not-an-int"}},
        )

        with pytest.raises(ProviderDecodeError, match="NeteasePlaylistResponse"):
            await netease_client.get_playlist_detail("2400007")
