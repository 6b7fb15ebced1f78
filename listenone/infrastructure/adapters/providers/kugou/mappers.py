"""Mapping of Kugou payloads into the unified entities.

One function per entity kind. Field fallbacks:

- artist: `UNKNOWN_ARTIST` when the singer id is 0 or its name is missing.
- album: `UNKNOWN_ALBUM` when the song has no album or the album lookup is empty.
- images: the `{size}` template token is always replaced by `IMAGE_SIZE`.
"""

from typing import Final

from listenone.domain.entities.music import UNKNOWN_ALBUM
from listenone.domain.entities.music import UNKNOWN_ARTIST
from listenone.domain.entities.music import Album
from listenone.domain.entities.music import PagedResult
from listenone.domain.entities.music import Playlist
from listenone.domain.entities.music import PlaylistSummary
from listenone.domain.entities.music import Track
from listenone.domain.identity import unified_id
from listenone.domain.types import EntityKind
from listenone.domain.types import MusicProvider
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouAlbum
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouAlbumSong
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouPlaylistInfo
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouPlaylistsResponse
from listenone.infrastructure.adapters.providers.kugou.schemas import KugouSong

WEB_HOST: Final[str] = "https://www.kugou.com"

IMAGE_SIZE_TOKEN: Final[str] = "{size}"
IMAGE_SIZE: Final[str] = "400"

FILENAME_SEPARATOR: Final[str] = " - "


def resize_image_url(url: str | None) -> str:
    return (url or "").replace(IMAGE_SIZE_TOKEN, IMAGE_SIZE)


def playlist_source_url(playlist_id: int | str) -> str:
    return f"{WEB_HOST}/yy/special/single/{playlist_id}.html"


def track_source_url(song_hash: str, album_id: int | str) -> str:
    return f"{WEB_HOST}/song/#hash={song_hash}&album_id={album_id}"


def album_source_url(album_id: int | str) -> str:
    return f"{WEB_HOST}/album/{album_id}.html"


def to_domain_playlist_summary(info: KugouPlaylistInfo) -> PlaylistSummary:
    return PlaylistSummary(
        id=unified_id(MusicProvider.KUGOU, EntityKind.PLAYLIST, info.id),
        title=info.title,
        cover_img_url=resize_image_url(info.image_url),
        source_url=playlist_source_url(info.id),
    )


def to_domain_playlist(info: KugouPlaylistInfo, tracks: list[Track] | None = None) -> Playlist:
    return Playlist(info=to_domain_playlist_summary(info), tracks=tracks or [])


def to_domain_playlists_page(response: KugouPlaylistsResponse, page: int) -> PagedResult[Playlist]:
    """Converts a listing page, the page number being the requested one."""
    return PagedResult(
        items=[to_domain_playlist(info) for info in response.plist.playlists.info],
        page=page,
        page_size=response.page_size,
        total=response.plist.playlists.total,
    )


def to_domain_track(song: KugouSong, album: KugouAlbum | None = None) -> Track:
    """Merges a song detail and its (optional) album detail into a track."""
    return Track(
        id=unified_id(MusicProvider.KUGOU, EntityKind.TRACK, song.hash),
        title=song.title,
        artist=song.singer_name if song.singer_id != 0 and song.singer_name else UNKNOWN_ARTIST,
        artist_id=unified_id(MusicProvider.KUGOU, EntityKind.ARTIST, song.singer_id),
        album=album.name if album and album.name else UNKNOWN_ALBUM,
        album_id=unified_id(MusicProvider.KUGOU, EntityKind.ALBUM, song.album_id),
        source=MusicProvider.KUGOU,
        source_url=track_source_url(song.hash, song.album_id),
        img_url=resize_image_url(song.album_img),
    )


def to_domain_album_track(song: KugouAlbumSong, album: KugouAlbum) -> Track:
    """Converts an album song, whose artist and title are only known through its filename."""
    artist, separator, title = song.filename.partition(FILENAME_SEPARATOR)
    if not separator:
        artist, title = UNKNOWN_ARTIST, song.filename

    album_id = song.album_id or album.id

    return Track(
        id=unified_id(MusicProvider.KUGOU, EntityKind.TRACK, song.hash),
        title=title.strip(),
        artist=artist.strip() or UNKNOWN_ARTIST,
        artist_id=unified_id(MusicProvider.KUGOU, EntityKind.ARTIST, 0),
        album=album.name or UNKNOWN_ALBUM,
        album_id=unified_id(MusicProvider.KUGOU, EntityKind.ALBUM, album_id),
        source=MusicProvider.KUGOU,
        source_url=track_source_url(song.hash, album_id),
        img_url=resize_image_url(album.image_url),
    )


def to_domain_album(native_id: str, album: KugouAlbum | None, songs: list[KugouAlbumSong]) -> Album:
    """Converts an album, falling back to placeholders if the provider doesn't know it."""
    if album is None:
        return Album(
            id=unified_id(MusicProvider.KUGOU, EntityKind.ALBUM, native_id),
            title=UNKNOWN_ALBUM,
            cover_img_url="",
            source_url=album_source_url(native_id),
        )

    return Album(
        id=unified_id(MusicProvider.KUGOU, EntityKind.ALBUM, album.id),
        title=album.name or UNKNOWN_ALBUM,
        artist=album.singer_name or UNKNOWN_ARTIST,
        cover_img_url=resize_image_url(album.image_url),
        source_url=album_source_url(album.id),
        tracks=[to_domain_album_track(song, album) for song in songs],
    )
