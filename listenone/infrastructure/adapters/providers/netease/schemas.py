from typing import Final

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

SUCCESS_CODE: Final[int] = 200


class NeteaseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class NeteaseResponse(NeteaseModel):
    code: int

    @property
    def is_success(self) -> bool:
        return self.code == SUCCESS_CODE


class NeteaseArtistSummary(NeteaseModel):
    id: int = 0
    name: str | None = None


class NeteaseAlbumSummary(NeteaseModel):
    id: int = 0
    name: str | None = None
    img_url: str | None = Field(default=None, alias="picUrl")


class NeteaseTrackId(NeteaseModel):
    id: int


class NeteasePlaylist(NeteaseModel):
    id: int
    title: str = Field(alias="name")
    cover_img_url: str = Field(default="", alias="coverImgUrl")
    description: str | None = None
    track_ids: list[NeteaseTrackId] = Field(alias="trackIds")


class NeteasePlaylistResponse(NeteaseResponse):
    playlist: NeteasePlaylist | None = None


class NeteaseSong(NeteaseModel):
    id: int
    title: str = Field(alias="name")
    artists: list[NeteaseArtistSummary] = Field(default_factory=list, alias="ar")
    album: NeteaseAlbumSummary | None = Field(default=None, alias="al")


class NeteaseSongsResponse(NeteaseResponse):
    songs: list[NeteaseSong] = Field(default_factory=list)


class NeteaseAlbumSong(NeteaseModel):
    id: int
    title: str = Field(alias="name")
    artists: list[NeteaseArtistSummary] = Field(default_factory=list)


class NeteaseAlbum(NeteaseModel):
    id: int
    name: str | None = None
    img_url: str | None = Field(default=None, alias="picUrl")
    artist: NeteaseArtistSummary | None = None
    songs: list[NeteaseAlbumSong] = Field(default_factory=list)


class NeteaseAlbumResponse(NeteaseResponse):
    album: NeteaseAlbum | None = None


class NeteaseLyricText(NeteaseModel):
    version: int = 0
    lyric: str = ""


class NeteaseLyricResponse(NeteaseResponse):
    lrc: NeteaseLyricText | None = None
    tlyric: NeteaseLyricText | None = None


class NeteaseArtist(NeteaseModel):
    id: int
    name: str | None = None
    img_url: str | None = Field(default=None, alias="picUrl")
    music_size: int = Field(default=0, alias="musicSize")
    album_size: int = Field(default=0, alias="albumSize")


class NeteaseHotSong(NeteaseModel):
    id: int
    title: str = Field(alias="name")
    artists: list[NeteaseArtistSummary] = Field(default_factory=list)
    album: NeteaseAlbumSummary | None = None


class NeteaseArtistResponse(NeteaseResponse):
    artist: NeteaseArtist | None = None
    hot_songs: list[NeteaseHotSong] = Field(default_factory=list, alias="hotSongs")


class NeteaseTopPlaylist(NeteaseModel):
    id: int
    title: str = Field(alias="name")
    cover_img_url: str = Field(default="", alias="coverImgUrl")
    description: str | None = None
    update_frequency: str | None = Field(default=None, alias="updateFrequency")


class NeteaseTopPlaylistsResponse(NeteaseResponse):
    playlists: list[NeteaseTopPlaylist] = Field(default_factory=list, alias="list")
