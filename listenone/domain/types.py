from enum import StrEnum


class MusicProvider(StrEnum):
    """Enumeration of supported music providers."""

    KUGOU = "kugou"
    NETEASE = "netease"


class EntityKind(StrEnum):
    """Kinds of catalog entities carrying a unified id."""

    PLAYLIST = "playlist"
    TRACK = "track"
    ALBUM = "album"
    ARTIST = "artist"
