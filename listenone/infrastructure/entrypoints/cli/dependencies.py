from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import assert_never

from listenone.application.services.catalog import CatalogAggregator
from listenone.domain.ports.providers.catalog import ProviderCatalogPort
from listenone.domain.types import MusicProvider
from listenone.infrastructure.adapters.providers.kugou.catalog import KugouCatalogAdapter
from listenone.infrastructure.adapters.providers.kugou.client import KugouClientAdapter
from listenone.infrastructure.adapters.providers.netease.catalog import NeteaseCatalogAdapter
from listenone.infrastructure.adapters.providers.netease.client import NeteaseClientAdapter
from listenone.infrastructure.config.settings.app import app_settings
from listenone.infrastructure.config.settings.kugou import kugou_settings
from listenone.infrastructure.config.settings.netease import netease_settings


def get_kugou_catalog() -> KugouCatalogAdapter:
    client = KugouClientAdapter(
        timeout=kugou_settings.HTTP_TIMEOUT,
        max_attempts=kugou_settings.HTTP_MAX_ATTEMPTS,
        user_agent=kugou_settings.USER_AGENT,
    )
    return KugouCatalogAdapter(
        client=client,
        max_concurrency=app_settings.TRACKS_MAX_CONCURRENCY,
        page_size=kugou_settings.PLAYLIST_PAGE_SIZE,
    )


def get_netease_catalog() -> NeteaseCatalogAdapter:
    client = NeteaseClientAdapter(
        timeout=netease_settings.HTTP_TIMEOUT,
        max_attempts=netease_settings.HTTP_MAX_ATTEMPTS,
        user_agent=netease_settings.USER_AGENT,
    )
    return NeteaseCatalogAdapter(
        client=client,
        max_concurrency=app_settings.TRACKS_MAX_CONCURRENCY,
        page_limit=netease_settings.PLAYLIST_PAGE_LIMIT,
        order=netease_settings.PLAYLIST_ORDER,
        chunk_size=netease_settings.SONG_DETAIL_CHUNK_SIZE,
    )


def get_provider_catalog(provider: MusicProvider) -> ProviderCatalogPort:
    match provider:
        case MusicProvider.KUGOU:
            return get_kugou_catalog()
        case MusicProvider.NETEASE:
            return get_netease_catalog()
        case _:
            assert_never(provider)


@asynccontextmanager
async def get_catalog_aggregator() -> AsyncGenerator[CatalogAggregator]:
    async with CatalogAggregator(
        catalog_factory=get_provider_catalog,
        default_provider=app_settings.DEFAULT_PROVIDER,
        strict=app_settings.STRICT_PROVIDER,
    ) as aggregator:
        yield aggregator
