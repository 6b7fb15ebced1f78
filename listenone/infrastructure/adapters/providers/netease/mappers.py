from typing import Final

from listenone.domain.entities.music import UNKNOWN_ALBUM
from listenone.domain.entities.music import UNKNOWN_ARTIST
from listenone.domain.entities.music import Album
from listenone.domain.entities.music import Artist
from listenone.domain.entities.music import Lyric
from listenone.domain.entities.music import PagedResult
from listenone.domain.entities.music import Playlist
from listenone.domain.entities.music import PlaylistSummary
from listenone.domain.entities.music import Track
from listenone.domain.identity import unified_id
from listenone.domain.types import EntityKind
from listenone.domain.types import MusicProvider
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseAlbum
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseAlbumSong
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseArtist
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseArtistSummary
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseHotSong
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseLyricResponse
from listenone.infrastructure.adapters.providers.netease.schemas import NeteasePlaylist
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseSong
from listenone.infrastructure.adapters.providers.netease.schemas import NeteaseTopPlaylist
from listenone.infrastructure.adapters.providers.scraper import ListingRecord

WEB_HOST: Final[str] = "https://music.163.com"

IMAGE_SIZE_TOKEN: Final[str] = "140y140"
IMAGE_SIZE: Final[str] = "512y512"


def playlist_source_url(playlist_id: int | str) -> str:
    return f"{WEB_HOST}/#/playlist?id={playlist_id}"


def track_source_url(song_id: int | str) -> str:
    return f"{WEB_HOST}/#/song?id={song_id}"


def album_source_url(album_id: int | str) -> str:
    return f"{WEB_HOST}/#/album?id={album_id}"


def artist_source_url(artist_id: int | str) -> str:
    return f"{WEB_HOST}/#/artist?id={artist_id}"


def track_lyric_url(song_id: int | str) -> str:
    return f"{WEB_HOST}/api/song/lyric?id={song_id}&lv=-1&tv=-1"


def _first_artist(artists: list[NeteaseArtistSummary]) -> NeteaseArtistSummary:
    return artists[0] if artists else NeteaseArtistSummary()


def to_domain_listing_playlist(record: ListingRecord) -> Playlist:
    return Playlist(
        info=PlaylistSummary(
            id=unified_id(MusicProvider.NETEASE, EntityKind.PLAYLIST, record.id),
            title=record.title,
            cover_img_url=record.cover_img_url,
            source_url=playlist_source_url(record.id),
        ),
    )


def to_domain_playlist_summary(playlist: NeteasePlaylist) -> PlaylistSummary:
    return PlaylistSummary(
        id=unified_id(MusicProvider.NETEASE, EntityKind.PLAYLIST, playlist.id),
        title=playlist.title,
        cover_img_url=playlist.cover_img_url,
        source_url=playlist_source_url(playlist.id),
    )


def to_domain_track(song: NeteaseSong | NeteaseHotSong) -> Track:
    artist = _first_artist(song.artists)
    album = song.album

    return Track(
        id=unified_id(MusicProvider.NETEASE, EntityKind.TRACK, song.id),
        title=song.title,
        artist=artist.name or UNKNOWN_ARTIST,
        artist_id=unified_id(MusicProvider.NETEASE, EntityKind.ARTIST, artist.id),
        album=album.name if album and album.name else UNKNOWN_ALBUM,
        album_id=unified_id(MusicProvider.NETEASE, EntityKind.ALBUM, album.id if album else 0),
        source=MusicProvider.NETEASE,
        source_url=track_source_url(song.id),
        img_url=album.img_url if album and album.img_url else "",
        lyric_url=track_lyric_url(song.id),
    )


def to_domain_album_track(song: NeteaseAlbumSong, album: NeteaseAlbum) -> Track:
    artist = _first_artist(song.artists)

    return Track(
        id=unified_id(MusicProvider.NETEASE, EntityKind.TRACK, song.id),
        title=song.title,
        artist=artist.name or UNKNOWN_ARTIST,
        artist_id=unified_id(MusicProvider.NETEASE, EntityKind.ARTIST, artist.id),
        album=album.name or UNKNOWN_ALBUM,
        album_id=unified_id(MusicProvider.NETEASE, EntityKind.ALBUM, album.id),
        source=MusicProvider.NETEASE,
        source_url=track_source_url(song.id),
        img_url=album.img_url or "",
        lyric_url=track_lyric_url(song.id),
    )


def to_domain_album(native_id: str, album: NeteaseAlbum | None) -> Album:
    if album is None:
        return Album(
            id=unified_id(MusicProvider.NETEASE, EntityKind.ALBUM, native_id),
            title=UNKNOWN_ALBUM,
            cover_img_url="",
            source_url=album_source_url(native_id),
        )

    return Album(
        id=unified_id(MusicProvider.NETEASE, EntityKind.ALBUM, album.id),
        title=album.name or UNKNOWN_ALBUM,
        artist=album.artist.name if album.artist and album.artist.name else UNKNOWN_ARTIST,
        cover_img_url=album.img_url or "",
        source_url=album_source_url(album.id),
        tracks=[to_domain_album_track(song, album) for song in album.songs],
    )


def to_domain_lyric(native_id: str, response: NeteaseLyricResponse) -> Lyric:
    """Converts a lyric, the translation being kept only when not blank."""
    translation = response.tlyric.lyric if response.tlyric else ""

    return Lyric(
        track_id=unified_id(MusicProvider.NETEASE, EntityKind.TRACK, native_id),
        lyric=response.lrc.lyric if response.lrc else "",
        translation=translation if translation.strip() else None,
    )


def to_domain_artist(native_id: str, artist: NeteaseArtist | None, hot_songs: list[NeteaseHotSong]) -> Artist:
    if artist is None:
        return Artist(
            id=unified_id(MusicProvider.NETEASE, EntityKind.ARTIST, native_id),
            cover_img_url="",
            source_url=artist_source_url(native_id),
        )

    return Artist(
        id=unified_id(MusicProvider.NETEASE, EntityKind.ARTIST, artist.id),
        name=artist.name or UNKNOWN_ARTIST,
        cover_img_url=artist.img_url or "",
        source_url=artist_source_url(artist.id),
        tracks=[to_domain_track(song) for song in hot_songs],
    )


def to_domain_top_playlist(playlist: NeteaseTopPlaylist) -> Playlist:
    return Playlist(
        info=PlaylistSummary(
            id=unified_id(MusicProvider.NETEASE, EntityKind.PLAYLIST, playlist.id),
            title=playlist.title,
            cover_img_url=playlist.cover_img_url,
            source_url=playlist_source_url(playlist.id),
        ),
    )


def to_domain_top_playlists_page(playlists: list[NeteaseTopPlaylist]) -> PagedResult[Playlist]:
    """Converts the charts, which come all at once."""
    return PagedResult(
        items=[to_domain_top_playlist(playlist) for playlist in playlists],
        page=0,
        page_size=0,
        total=0,
    )
