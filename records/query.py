"""Build /records query URLs from retrieve options."""
import httpx

from core.logging import get_logger
from records.colors import COLORS, lookup_color
from records.errors import InvalidArgumentError
from records.models import RetrieveOptions

logger = get_logger(__name__)

LIMIT_PARAM = "limit"
OFFSET_PARAM = "offset"
COLOR_PARAM = "color[]"


def validate_page(page) -> None:
    """
    Reject page numbers that would produce a meaningless offset.

    Raises:
        InvalidArgumentError: If page is not an integer >= 1
    """
    if page is None:
        return
    if isinstance(page, bool) or not isinstance(page, int):
        raise InvalidArgumentError(f"page must be a positive integer, got {page!r}")
    if page < 1:
        raise InvalidArgumentError(f"page must be >= 1, got {page}")


def page_offset(page, page_size: int) -> int:
    """Index of the first record on ``page``."""
    validate_page(page)
    return (page - 1) * page_size if page else 0


def build_query(options: RetrieveOptions, *, base_url: str, page_size: int) -> httpx.URL:
    """
    Build the URL for one page of records.

    Without a color filter every known color is requested explicitly, so the
    request always carries at least one ``color[]`` parameter unless the caller
    passed an empty filter.

    Args:
        options: Page and color filter
        base_url: The /records endpoint
        page_size: Value sent as ``limit``

    Returns:
        Fully qualified URL with ``limit``, ``offset`` and repeated ``color[]``
    """
    offset = page_offset(options.page, page_size)

    colors = options.requested_colors
    if colors is None:
        colors = tuple(COLORS)
    else:
        for name in colors:
            if lookup_color(name) is None:
                logger.warning("Invalid color requested", color=name)

    try:
        url = httpx.URL(base_url)
        url = url.copy_add_param(LIMIT_PARAM, page_size)
        url = url.copy_add_param(OFFSET_PARAM, offset)
        for name in colors:
            url = url.copy_add_param(COLOR_PARAM, name if isinstance(name, str) else str(name))
    except (httpx.InvalidURL, TypeError, ValueError) as e:
        raise InvalidArgumentError(f"cannot build records query: {e}") from e

    return url
