"""
Remote todos API client.
Handles the single GET against the todos resource and classifies failures.
"""

import logging
from typing import Any, Optional

import httpx

from config import app_config

logger = logging.getLogger(__name__)


class TodosFetchError(Exception):
    """Base exception for todos fetch failures"""
    pass


class FetchTransportError(TodosFetchError):
    """The request never completed (connection, DNS, protocol or timeout error)"""
    pass


class FetchStatusError(TodosFetchError):
    """The server answered with something other than 200"""

    def __init__(self, status_code: int, url: str):
        super().__init__(f"GET {url} returned status {status_code}")
        self.status_code = status_code
        self.url = url


class TodosService:
    """
    Service class for the remote todos resource.
    One call to ``fetch_todos`` is exactly one GET request; nothing is retried.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url or app_config.todos_url
        self.timeout = timeout if timeout is not None else app_config.fetch_timeout
        # Injected in tests (httpx.MockTransport); None uses the real network
        self._transport = transport
        logger.debug("TodosService initialized for %s", self.url)

    def _create_client(self) -> httpx.AsyncClient:
        """Create a short-lived async client for one request"""
        kwargs = {"timeout": self.timeout}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        return httpx.AsyncClient(**kwargs)

    async def get(self) -> httpx.Response:
        """Issue the GET and return the raw response, whatever its status.

        Raises:
            FetchTransportError: the request did not complete.
        """
        try:
            async with self._create_client() as client:
                return await client.get(self.url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchTransportError(f"GET {self.url} failed: {e}") from e

    async def fetch_todos(self) -> Any:
        """Fetch the todo collection.

        Returns the decoded JSON body of a 200 response. The body is passed
        through untouched; items are never interpreted here.

        Raises:
            FetchTransportError: the request did not complete or the body is not JSON.
            FetchStatusError: the response status was not 200.
        """
        response = await self.get()
        if response.status_code != 200:
            raise FetchStatusError(response.status_code, self.url)
        try:
            return response.json()
        except ValueError as e:
            raise FetchTransportError(f"GET {self.url} returned a non-JSON body") from e
