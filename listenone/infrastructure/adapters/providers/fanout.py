import asyncio
import logging
from collections.abc import Awaitable
from collections.abc import Callable
from collections.abc import Sequence

from listenone.domain.exceptions import ProviderError

logger = logging.getLogger(__name__)


async def fetch_bounded[K, V](
    keys: Sequence[K],
    fetch: Callable[[K], Awaitable[V]],
    max_concurrency: int,
    prefix_log: str = "",
) -> list[V | None]:
    """Fetches every key concurrently, with at most `max_concurrency` calls in flight.

    Results keep the order of `keys`. A key whose fetch fails with a provider
    error is logged and resolved to None, so that the other results are kept.
    Any other exception cancels the whole fan-out and bubbles up.
    """
    # Use a Semaphore to limit concurrent fetching to avoid overwhelming the provider.
    semaphore = asyncio.Semaphore(max_concurrency)

    async def _fetch_with_semaphore(key: K) -> V | None:
        async with semaphore:
            try:
                return await fetch(key)
            except ProviderError as e:
                logger.warning(f"{prefix_log} Skip {key} with error: {e}")
                return None

    async with asyncio.TaskGroup() as tg:
        tasks = [tg.create_task(_fetch_with_semaphore(key)) for key in keys]

    return [task.result() for task in tasks]
