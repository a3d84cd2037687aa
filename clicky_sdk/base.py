"""Base client for Clicky SDK."""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Self

import httpx

from .endpoints import BaseURLs
from .exceptions import ClickyResponseError

logger = logging.getLogger(__name__)

_SITEKEY_PARAM = re.compile(r"(sitekey=)[^&]*")


def _mask_sitekey(path: str) -> str:
    return _SITEKEY_PARAM.sub(r"\1***", path)


@dataclass(kw_only=True)
class BaseAPIClient:
    """Base sync client for Clicky API.

    One blocking GET per call: no retries, no caching, httpx default timeout.

    Attributes:
        base_url: Base URL for the API service.
        http_client: Optional preconfigured ``httpx.Client`` (custom transport,
            proxies). When omitted, one is created and owned by this instance.
    """

    base_url: str = BaseURLs.API
    http_client: httpx.Client | None = field(default=None, repr=False)

    _client: httpx.Client = field(init=False, repr=False)
    _owns_client: bool = field(init=False, repr=False, default=False)

    def __post_init__(self) -> None:
        if self.http_client is not None:
            self._client = self.http_client
        else:
            self._client = httpx.Client()
            self._owns_client = True

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise exception for non-2xx status codes and empty bodies."""
        status = response.status_code

        if not 200 <= status < 300:
            raise ClickyResponseError("Non-success HTTP response", status_code=status)

        if not response.content:
            raise ClickyResponseError("Zero-length response", status_code=status)

    def get(self, path: str) -> bytes:
        """Make GET request and return raw response body.

        Args:
            path: Endpoint path including query string.

        Raises:
            ClickyResponseError: If the status is not 2xx or the body is empty.
        """
        logger.debug("GET %s", _mask_sitekey(path))
        response = self._client.get(f"{self.base_url}{path}")
        self._raise_for_status(response)
        return response.content
