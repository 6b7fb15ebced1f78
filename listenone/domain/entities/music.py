from collections.abc import Sequence
from dataclasses import dataclass
from dataclasses import field
from typing import Final

from listenone.domain.types import MusicProvider

UNKNOWN_ARTIST: Final[str] = "未知"
UNKNOWN_ALBUM: Final[str] = ""


@dataclass(frozen=True, kw_only=True)
class Track:
    id: str
    title: str

    artist: str = UNKNOWN_ARTIST
    artist_id: str
    album: str = UNKNOWN_ALBUM
    album_id: str

    source: MusicProvider
    source_url: str
    img_url: str = ""
    lyric_url: str | None = None


@dataclass(frozen=True, kw_only=True)
class PlaylistSummary:
    id: str
    title: str
    cover_img_url: str
    source_url: str


@dataclass(frozen=True, kw_only=True)
class Playlist:
    """A playlist and, once fetched with its details, its tracks in provider order.

    Tracks whose details could not be retrieved are left out of `tracks`
    and their native ids are reported in `failed_track_ids`.
    """

    info: PlaylistSummary
    tracks: list[Track] = field(default_factory=list)
    failed_track_ids: list[str] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.info.id

    @property
    def title(self) -> str:
        return self.info.title

    @property
    def is_complete(self) -> bool:
        return not self.failed_track_ids


@dataclass(frozen=True, kw_only=True)
class Album:
    id: str
    title: str
    artist: str = UNKNOWN_ARTIST
    cover_img_url: str
    source_url: str
    tracks: list[Track] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class Artist:
    """An artist and its most popular tracks."""

    id: str
    name: str = UNKNOWN_ARTIST
    cover_img_url: str
    source_url: str
    tracks: list[Track] = field(default_factory=list)


@dataclass(frozen=True, kw_only=True)
class Lyric:
    track_id: str
    lyric: str
    translation: str | None = None


@dataclass(frozen=True, kw_only=True)
class PagedResult[T]:
    """A page of items as reported by a provider.

    Providers without true pagination report `page=0`, `page_size=0` and
    `total=0`, with every item returned on that single page.
    """

    items: Sequence[T]
    page: int
    page_size: int
    total: int
