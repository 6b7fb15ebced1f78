import logging
from collections.abc import Callable
from contextlib import AsyncExitStack
from dataclasses import dataclass
from typing import Self

from listenone.domain.entities.music import Album
from listenone.domain.entities.music import Artist
from listenone.domain.entities.music import Lyric
from listenone.domain.entities.music import PagedResult
from listenone.domain.entities.music import Playlist
from listenone.domain.exceptions import UnknownProviderError
from listenone.domain.ports.providers.catalog import ProviderCatalogPort
from listenone.domain.types import MusicProvider

type CatalogFactory = Callable[[MusicProvider], ProviderCatalogPort]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class PlaylistQuery:
    filter_id: str | None = None
    offset: int = 0


class CatalogAggregator:
    """Single entry point over every provider catalog.

    Provider names are resolved into a `MusicProvider`, then the call is
    forwarded as is to the matching catalog. Catalogs are built lazily through
    `catalog_factory`, once per provider, and reused for the aggregator
    lifetime. Results are never cached nor merged across providers.
    """

    def __init__(
        self,
        catalog_factory: CatalogFactory,
        default_provider: MusicProvider = MusicProvider.KUGOU,
        strict: bool = False,
    ) -> None:
        self.catalog_factory = catalog_factory
        self.default_provider = default_provider
        self.strict = strict

        self._catalogs: dict[MusicProvider, ProviderCatalogPort] = {}

    def resolve_provider(self, provider_name: str) -> MusicProvider:
        try:
            return MusicProvider(provider_name.strip().lower())
        except ValueError as e:
            if self.strict:
                raise UnknownProviderError(f"Unknown provider: {provider_name}") from e

            logger.warning(f"Unknown provider '{provider_name}', fallback on '{self.default_provider}'")
            return self.default_provider

    def get_catalog(self, provider_name: str) -> ProviderCatalogPort:
        provider = self.resolve_provider(provider_name)

        if provider not in self._catalogs:
            logger.debug(f"Build the catalog of provider '{provider}'")
            self._catalogs[provider] = self.catalog_factory(provider)

        return self._catalogs[provider]

    async def get_playlists(self, provider_name: str, query: PlaylistQuery | None = None) -> PagedResult[Playlist]:
        query = query or PlaylistQuery()
        catalog = self.get_catalog(provider_name)
        return await catalog.list_playlists(filter_id=query.filter_id, offset=query.offset)

    async def get_playlist_with_tracks(self, provider_name: str, native_id: str) -> Playlist:
        catalog = self.get_catalog(provider_name)
        return await catalog.get_playlist_with_tracks(native_id)

    async def get_album(self, provider_name: str, native_id: str) -> Album:
        catalog = self.get_catalog(provider_name)
        return await catalog.get_album(native_id)

    async def get_lyric(self, provider_name: str, native_id: str) -> Lyric:
        catalog = self.get_catalog(provider_name)
        return await catalog.get_lyric(native_id)

    async def get_artist(self, provider_name: str, native_id: str) -> Artist:
        catalog = self.get_catalog(provider_name)
        return await catalog.get_artist(native_id)

    async def get_top_playlists(self, provider_name: str) -> PagedResult[Playlist]:
        catalog = self.get_catalog(provider_name)
        return await catalog.list_top_playlists()

    async def close(self) -> None:
        # Every catalog is closed, even when a previous one fails to.
        async with AsyncExitStack() as stack:
            for catalog in self._catalogs.values():
                stack.push_async_callback(catalog.close)
            self._catalogs.clear()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
