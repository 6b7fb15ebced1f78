from polyfactory import Use
from polyfactory.factories.dataclass_factory import DataclassFactory

from listenone.domain.entities.music import Album
from listenone.domain.entities.music import Artist
from listenone.domain.entities.music import Lyric
from listenone.domain.entities.music import Playlist
from listenone.domain.entities.music import PlaylistSummary
from listenone.domain.entities.music import Track
from listenone.domain.types import MusicProvider


class TrackFactory(DataclassFactory[Track]):
    __model__ = Track

    id = Use(lambda: f"kgtrack_{DataclassFactory.__faker__.md5().upper()}")
    title = Use(DataclassFactory.__faker__.sentence, nb_words=3)
    artist = Use(DataclassFactory.__faker__.name)
    source = MusicProvider.KUGOU
    source_url = Use(DataclassFactory.__faker__.url)
    lyric_url = None


class PlaylistSummaryFactory(DataclassFactory[PlaylistSummary]):
    __model__ = PlaylistSummary

    id = Use(lambda: f"kgplaylist_{DataclassFactory.__faker__.random_int(min=1)}")
    title = Use(DataclassFactory.__faker__.sentence, nb_words=2)
    cover_img_url = Use(DataclassFactory.__faker__.image_url)
    source_url = Use(DataclassFactory.__faker__.url)


class PlaylistFactory(DataclassFactory[Playlist]):
    __model__ = Playlist

    info = Use(PlaylistSummaryFactory.build)
    tracks = Use(TrackFactory.batch, size=3)
    failed_track_ids = Use(list)


class AlbumFactory(DataclassFactory[Album]):
    __model__ = Album

    id = Use(lambda: f"kgalbum_{DataclassFactory.__faker__.random_int(min=1)}")
    title = Use(DataclassFactory.__faker__.sentence, nb_words=2)
    artist = Use(DataclassFactory.__faker__.name)
    cover_img_url = Use(DataclassFactory.__faker__.image_url)
    source_url = Use(DataclassFactory.__faker__.url)
    tracks = Use(TrackFactory.batch, size=2)


class ArtistFactory(DataclassFactory[Artist]):
    __model__ = Artist

    id = Use(lambda: f"neartist_{DataclassFactory.__faker__.random_int(min=1)}")
    name = Use(DataclassFactory.__faker__.name)
    cover_img_url = Use(DataclassFactory.__faker__.image_url)
    source_url = Use(DataclassFactory.__faker__.url)
    tracks = Use(TrackFactory.batch, size=2)


class LyricFactory(DataclassFactory[Lyric]):
    __model__ = Lyric

    track_id = Use(lambda: f"netrack_{DataclassFactory.__faker__.random_int(min=1)}")
    lyric = "[00:00.00] la la la"
    translation = None
