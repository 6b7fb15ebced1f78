import logging
from collections.abc import Mapping
from typing import Any
from typing import Self

import httpx
from httpx import codes

from pydantic import BaseModel
from pydantic import ValidationError

from tenacity import AsyncRetrying
from tenacity import retry_if_exception
from tenacity import stop_after_attempt
from tenacity import wait_exponential

from listenone.domain.exceptions import ProviderDecodeError
from listenone.domain.exceptions import ProviderTransportError

logger = logging.getLogger(__name__)


def _is_retryable_error(exception: BaseException) -> bool:
    if isinstance(exception, httpx.HTTPStatusError):  # Retry 429 and 5xx only
        return exception.response.status_code == codes.TOO_MANY_REQUESTS or exception.response.status_code >= 500

    return isinstance(exception, httpx.RequestError)


class ProviderHttpClient:
    """An asynchronous HTTP client shared by all the requests made to one provider.

    It owns a single `httpx.AsyncClient` (and thus its connection pool and
    cookie jar) which is reused for every call until `close` is called.
    Transient errors (network errors, 429 and 5xx) are retried, then every
    failure is translated into the provider error kinds.
    """

    def __init__(
        self,
        headers: Mapping[str, str] | None = None,
        cookies: httpx.Cookies | None = None,
        timeout: float = 30.0,
        max_attempts: int = 3,
        retry_multiplier: float = 1.0,
    ) -> None:
        self.max_attempts = max_attempts
        self.retry_multiplier = retry_multiplier

        self._client: httpx.AsyncClient = httpx.AsyncClient(
            headers=headers,
            cookies=cookies,
            timeout=timeout,
            follow_redirects=True,
        )

    async def request(
        self,
        method: str,
        url: str,
        params: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        logger.debug(f"{method.upper()} {url} (params: {params})")
        try:
            async for attempt in AsyncRetrying(
                retry=retry_if_exception(_is_retryable_error),
                wait=wait_exponential(multiplier=self.retry_multiplier, max=30),
                stop=stop_after_attempt(self.max_attempts),
                reraise=True,
            ):
                with attempt:
                    response = await self._client.request(method=method.upper(), url=url, params=params, data=data)
                    response.raise_for_status()

        except httpx.HTTPStatusError as e:
            raise ProviderTransportError(
                f"{method.upper()} {url} failed with status {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            raise ProviderTransportError(f"{method.upper()} {url} failed: {e!r}") from e

        return response

    async def get_json(self, url: str, params: Mapping[str, Any] | None = None) -> Any:
        response = await self.request("GET", url, params=params)
        return self._decode_json(response)

    async def get_text(self, url: str, params: Mapping[str, Any] | None = None) -> str:
        response = await self.request("GET", url, params=params)
        return response.text

    async def post_form(
        self,
        url: str,
        form: Mapping[str, str],
        params: Mapping[str, Any] | None = None,
    ) -> Any:
        response = await self.request("POST", url, params=params, data=form)
        return self._decode_json(response)

    @staticmethod
    def _decode_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise ProviderDecodeError(f"Invalid JSON returned by {response.request.url}") from e

    @staticmethod
    def validate[ModelType: BaseModel](model: type[ModelType], data: Any, context: str = "") -> ModelType:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ProviderDecodeError(f"{context} - {model.__name__} validation error: {e}") from e

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
