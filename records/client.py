"""Client for the paginated /records endpoint."""
from typing import Any, List, Mapping, Optional, Union

from core.config import settings
from core.logging import get_logger
from records.aggregator import aggregate
from records.errors import RecordsError
from records.models import RetrieveOptions, RetrieveResponse
from records.pagination import previous_page, resolve_next_page
from records.query import build_query
from records.transport import HttpxTransport, Transport
from records.validator import check_response_status

logger = get_logger(__name__)

OptionsLike = Union[RetrieveOptions, Mapping[str, Any], None]


class RecordsClient:
    """Retrieves and summarizes pages of records."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        page_size: Optional[int] = None,
        transport: Optional[Transport] = None,
    ):
        """
        Initialize records client.

        Args:
            base_url: The /records endpoint (defaults to settings.records_url)
            page_size: Records per page (defaults to settings.records_page_size)
            transport: Transport to fetch with (defaults to an HttpxTransport)
        """
        self.base_url = base_url or settings.records_url
        self.page_size = page_size or settings.records_page_size
        self._owns_transport = transport is None
        self.transport = transport or HttpxTransport()

    async def __aenter__(self) -> "RecordsClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_transport:
            await self.transport.aclose()

    async def fetch_page(self, options: RetrieveOptions) -> List[Any]:
        """
        Fetch and decode a single page.

        Raises:
            RecordsError: On invalid options, transport, HTTP or decoding failure
        """
        url = build_query(options, base_url=self.base_url, page_size=self.page_size)
        logger.debug("Fetching records page", url=str(url))
        response = await self.transport.fetch(url)
        return check_response_status(response, endpoint=self.base_url)

    async def retrieve(self, options: OptionsLike = None) -> Optional[RetrieveResponse]:
        """
        Retrieve one page of records and summarize it.

        Args:
            options: Page number and color filter

        Returns:
            The summarized page, or None if the page could not be retrieved.
            None means "could not retrieve", not "no records".
        """
        try:
            options = RetrieveOptions.coerce(options)
            payload = await self.fetch_page(options)
            summary = aggregate(payload, options)
        except RecordsError as e:
            logger.error(
                "Error when accessing records endpoint",
                endpoint=self.base_url,
                error=str(e)
            )
            return None

        response = RetrieveResponse(
            ids=summary.ids,
            open=summary.open,
            closed_primary_count=summary.closed_primary_count,
            previous_page=previous_page(options.page),
            next_page=await resolve_next_page(options, self.fetch_page),
        )

        logger.info(
            "Retrieved records page",
            page=options.page or 1,
            records=len(response.ids),
            next_page=response.next_page
        )
        return response


async def retrieve(options: OptionsLike = None) -> Optional[RetrieveResponse]:
    """Retrieve one page using a client configured from settings."""
    async with RecordsClient() as client:
        return await client.retrieve(options)
