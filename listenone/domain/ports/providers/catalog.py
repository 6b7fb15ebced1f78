from abc import ABC
from abc import abstractmethod
from typing import Self

from listenone.domain.entities.music import Album
from listenone.domain.entities.music import Artist
from listenone.domain.entities.music import Lyric
from listenone.domain.entities.music import PagedResult
from listenone.domain.entities.music import Playlist
from listenone.domain.types import MusicProvider


class ProviderCatalogPort(ABC):
    """A port defining the contract for reading a music provider's public catalog.

    Every implementation maps the provider's native payloads into the unified
    entities, so callers never deal with provider specific schemas.
    """

    provider: MusicProvider

    @abstractmethod
    async def list_playlists(self, filter_id: str | None = None, offset: int = 0) -> PagedResult[Playlist]:
        """Retrieves one page of the provider's featured playlists.

        Args:
            filter_id: An optional provider category used to filter playlists.
            offset: The number of playlists to skip.

        Returns:
            A page of `Playlist` entities without tracks.
        """
        ...

    @abstractmethod
    async def get_playlist_with_tracks(self, native_id: str) -> Playlist:
        """Retrieves a playlist and the details of all its tracks.

        Args:
            native_id: The playlist id as assigned by the provider.

        Returns:
            The `Playlist` entity with its tracks, in the provider's order.
        """
        ...

    @abstractmethod
    async def get_album(self, native_id: str) -> Album:
        """Retrieves an album and its tracks.

        Args:
            native_id: The album id as assigned by the provider.

        Returns:
            The `Album` entity.
        """
        ...

    @abstractmethod
    async def get_lyric(self, native_id: str) -> Lyric:
        """Retrieves the lyric of a track.

        Args:
            native_id: The track id as assigned by the provider.

        Returns:
            The `Lyric` entity.
        """
        ...

    @abstractmethod
    async def get_artist(self, native_id: str) -> Artist:
        """Retrieves an artist and its popular tracks.

        Args:
            native_id: The artist id as assigned by the provider.

        Returns:
            The `Artist` entity.
        """
        ...

    @abstractmethod
    async def list_top_playlists(self) -> PagedResult[Playlist]:
        """Retrieves the provider's charts, as playlists without tracks.

        Returns:
            A single page of `Playlist` entities, without pagination.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Closes the catalog and cleans up any underlying resources, like HTTP sessions."""
        ...

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
