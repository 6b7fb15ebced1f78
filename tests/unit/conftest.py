import json
import random
from collections.abc import AsyncGenerator
from typing import Any

import pytest

from listenone.infrastructure.adapters.providers.kugou.catalog import KugouCatalogAdapter
from listenone.infrastructure.adapters.providers.kugou.client import KugouClientAdapter
from listenone.infrastructure.adapters.providers.netease.catalog import NeteaseCatalogAdapter
from listenone.infrastructure.adapters.providers.netease.client import NeteaseClientAdapter

from tests import HTTPMOCK_DIR


def load_json(provider: str, name: str) -> dict[str, Any]:
    return json.loads((HTTPMOCK_DIR / provider / f"{name}.json").read_text())


def load_text(provider: str, filename: str) -> str:
    return (HTTPMOCK_DIR / provider / filename).read_text()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(42)


# --- Kugou ---


@pytest.fixture
async def kugou_client(request: pytest.FixtureRequest) -> AsyncGenerator[KugouClientAdapter]:
    params = getattr(request, "param", {})

    async with KugouClientAdapter(
        timeout=5.0,
        max_attempts=params.get("max_attempts", 1),
        user_agent="listenone-tests",
        retry_multiplier=0,
    ) as client:
        yield client


@pytest.fixture
def kugou_catalog(kugou_client: KugouClientAdapter) -> KugouCatalogAdapter:
    return KugouCatalogAdapter(client=kugou_client, max_concurrency=2, page_size=30)


# --- Netease ---


@pytest.fixture
async def netease_client(rng: random.Random) -> AsyncGenerator[NeteaseClientAdapter]:
    async with NeteaseClientAdapter(
        timeout=5.0,
        max_attempts=1,
        user_agent="listenone-tests",
        rng=rng,
        retry_multiplier=0,
    ) as client:
        yield client


@pytest.fixture
def netease_catalog(netease_client: NeteaseClientAdapter) -> NeteaseCatalogAdapter:
    return NeteaseCatalogAdapter(
        client=netease_client,
        max_concurrency=2,
        page_limit=35,
        order="hot",
        chunk_size=2,
    )
