from collections.abc import AsyncGenerator
from collections.abc import Callable
from collections.abc import Iterable
from collections.abc import Iterator
from contextlib import AbstractContextManager
from contextlib import asynccontextmanager
from contextlib import contextmanager
from unittest import mock

import pytest
from typer.testing import CliRunner

from listenone.application.services.catalog import CatalogAggregator

type AggregatorPatcherFactory = Callable[[str], AbstractContextManager[mock.AsyncMock]]


@pytest.fixture(autouse=True)
def force_rich_terminal_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Force a wide terminal without colors, for stable output assertions."""
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setenv("TERM", "dumb")
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("CI", "true")


@pytest.fixture
def block_cli_configure_loggers() -> Iterable[mock.Mock]:
    """Prevent the CLI 'main' callback from re-configuring logging during tests."""
    with mock.patch("listenone.infrastructure.entrypoints.cli.main.configure_loggers") as patched:
        yield patched


@pytest.fixture
def runner(block_cli_configure_loggers: mock.Mock) -> CliRunner:
    return CliRunner()


@pytest.fixture
def mock_aggregator_factory() -> AggregatorPatcherFactory:
    """Factory to patch the aggregator dependency of a command module."""

    @contextmanager
    def _patcher(target_path: str) -> Iterator[mock.AsyncMock]:
        aggregator = mock.AsyncMock(spec=CatalogAggregator)

        @asynccontextmanager
        async def _get_catalog_aggregator() -> AsyncGenerator[mock.AsyncMock]:
            yield aggregator

        with mock.patch(f"{target_path}.get_catalog_aggregator", side_effect=_get_catalog_aggregator):
            yield aggregator

    return _patcher
