"""Previous/next page resolution, including the look-ahead probe."""
from typing import Any, Awaitable, Callable, List, Optional

from core.logging import get_logger
from records.errors import RecordsError
from records.models import RetrieveOptions

logger = get_logger(__name__)

PageFetcher = Callable[[RetrieveOptions], Awaitable[List[Any]]]


def previous_page(page: Optional[int]) -> Optional[int]:
    if not page:
        return None
    return page - 1 if page - 1 >= 1 else None


def provisional_next_page(page: Optional[int]) -> int:
    return page + 1 if page else 2


async def resolve_next_page(options: RetrieveOptions, fetch_page: PageFetcher) -> Optional[int]:
    """
    Confirm that the page after ``options.page`` has records.

    The following page is fetched with the same color filters. Only whether it
    succeeded and whether it was empty matter; its records are discarded.

    Args:
        options: Options the current page was requested with
        fetch_page: Coroutine returning the decoded JSON array for some options

    Returns:
        The next page number, or None if it is empty or could not be fetched
    """
    candidate = provisional_next_page(options.page)
    try:
        payload = await fetch_page(options.for_page(candidate))
    except RecordsError as e:
        logger.debug("Next page probe failed", page=candidate, error=str(e))
        return None

    if len(payload) == 0:
        return None
    return candidate
