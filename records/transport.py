"""HTTP transport used by the records client."""
from typing import Any, Optional, Protocol, Union

import httpx

from core.config import settings
from core.logging import get_logger
from records.errors import TransportError

logger = get_logger(__name__)


class Response(Protocol):
    """Subset of ``httpx.Response`` the client relies on."""
    status_code: int

    def json(self) -> Any:
        ...


class Transport(Protocol):
    """Anything that can GET a URL and hand back a response."""

    async def fetch(self, url: Union[str, httpx.URL]) -> Response:
        ...

    async def aclose(self) -> None:
        ...


class HttpxTransport:
    """Transport backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: Optional[float] = None,
    ):
        """
        Initialize transport.

        Args:
            client: Pre-built client (tests pass one with an ``httpx.MockTransport``)
            timeout: Request timeout in seconds; defaults to settings.request_timeout
        """
        self._owns_client = client is None
        self.client = client or httpx.AsyncClient(
            headers={"Accept": "application/json"},
            timeout=timeout if timeout is not None else settings.request_timeout,
        )

    async def fetch(self, url: Union[str, httpx.URL]) -> httpx.Response:
        """
        GET ``url``.

        Raises:
            TransportError: If no response was received
        """
        try:
            return await self.client.get(url)
        except httpx.RequestError as e:
            logger.debug("Records request failed", url=str(url), error=str(e))
            raise TransportError(f"request to {url} failed: {e}") from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()
