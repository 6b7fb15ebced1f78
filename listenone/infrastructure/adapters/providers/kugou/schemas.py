from typing import Annotated
from typing import Any

from pydantic import BaseModel
from pydantic import BeforeValidator
from pydantic import ConfigDict
from pydantic import Field
from pydantic import NonNegativeInt


def _empty_to_zero(v: Any) -> Any:
    """Kugou sends an empty string (or null) instead of 0 for missing numeric ids."""
    if v is None or v == "":
        return 0
    return v


def _empty_to_none(v: Any) -> Any:
    """Kugou sends an empty list or object as `data` when the entity doesn't exist."""
    if not v:
        return None
    return v


KugouId = Annotated[NonNegativeInt, BeforeValidator(_empty_to_zero)]


class KugouModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class KugouPlaylistInfo(KugouModel):
    id: int = Field(alias="specialid")
    title: str = Field(alias="specialname")
    image_url: str = Field(default="", alias="imgurl")


class KugouPlaylistInfoList(KugouModel):
    total: NonNegativeInt
    info: list[KugouPlaylistInfo]


class KugouPlaylistsPage(KugouModel):
    playlists: KugouPlaylistInfoList = Field(alias="list")


class KugouPlaylistsResponse(KugouModel):
    plist: KugouPlaylistsPage
    page_size: NonNegativeInt = Field(alias="pagesize")


class KugouPlaylistSong(KugouModel):
    hash: str


class KugouPlaylistSongList(KugouModel):
    total: NonNegativeInt = 0
    info: list[KugouPlaylistSong]


class KugouPlaylistSongPage(KugouModel):
    songs: KugouPlaylistSongList = Field(alias="list")


class KugouPlaylistHeader(KugouModel):
    playlist: KugouPlaylistInfo = Field(alias="list")


class KugouPlaylistResponse(KugouModel):
    info: KugouPlaylistHeader
    songs: KugouPlaylistSongPage = Field(alias="list")

    def get_song_hashes(self) -> list[str]:
        return [song.hash for song in self.songs.songs.info]


class KugouSong(KugouModel):
    hash: str = Field(alias="req_hash")
    title: str = Field(alias="songName")
    album_id: KugouId = Field(default=0, alias="albumid")
    singer_id: KugouId = Field(default=0, alias="singerId")
    singer_name: str | None = Field(default=None, alias="singerName")
    album_img: str | None = None


class KugouAlbum(KugouModel):
    id: KugouId = Field(alias="albumid")
    name: str | None = Field(default=None, alias="albumname")
    singer_name: str | None = Field(default=None, alias="singername")
    image_url: str = Field(default="", alias="imgurl")


class KugouAlbumResponse(KugouModel):
    data: Annotated[KugouAlbum | None, BeforeValidator(_empty_to_none)] = None


class KugouAlbumSong(KugouModel):
    hash: str
    filename: str
    album_id: KugouId = 0


class KugouAlbumSongList(KugouModel):
    total: NonNegativeInt = 0
    info: list[KugouAlbumSong] = Field(default_factory=list)


class KugouAlbumSongsResponse(KugouModel):
    data: Annotated[KugouAlbumSongList | None, BeforeValidator(_empty_to_none)] = None
