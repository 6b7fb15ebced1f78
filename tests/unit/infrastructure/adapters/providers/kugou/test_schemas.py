from listenone.infrastructure.adapters.providers.kugou.schemas import KugouAlbumResponse
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouAlbumSongsResponse
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouPlaylistResponse
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouPlaylistsResponse
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouSong

from tests.unit.conftest import load_json


class TestKugouSchemas:
    def test__playlists(self) -> None:
        response = KugouPlaylistsResponse.model_validate(load_json("kugou", "playlists"))

        assert response.page_size == 30
        assert response.plist.playlists.total == 600
        assert len(response.plist.playlists.info) == 30

    def test__playlist__hashes_ordered(self) -> None:
        response = KugouPlaylistResponse.model_validate(load_json("kugou", "playlist"))

        assert response.info.playlist.id == 546903
        assert response.get_song_hashes() == [
            "2B6B1A3F6C3E4A1A9B7C7E5D4C3B2A10",
            "8F1E0C2D3B4A59687766554433221100",
            "C0FFEE00C0FFEE00C0FFEE00C0FFEE00",
        ]

    def test__song__empty_ids(self) -> None:
        song = KugouSong.model_validate(load_json("kugou", "song_without_singer"))

        assert song.album_id == 0
        assert song.singer_id == 0
        assert song.singer_name == ""
        assert song.album_img is None

    def test__album__empty_data(self) -> None:
        assert KugouAlbumResponse.model_validate(load_json("kugou", "album_empty")).data is None
        assert KugouAlbumResponse.model_validate({"status": 1, "data": {}}).data is None

    def test__album_songs__string_album_id(self) -> None:
        response = KugouAlbumSongsResponse.model_validate(load_json("kugou", "album_songs"))

        assert response.data is not None
        assert [song.album_id for song in response.data.info] == [960327, 960327]
