"""Gate responses on HTTP status before decoding them."""
from typing import Any, List

from records.errors import HttpError, MalformedResponseError
from records.transport import Response


def check_response_status(response: Response, *, endpoint: str = "/records") -> List[Any]:
    """
    Decode a records response, failing on HTTP errors first.

    Error bodies are never decoded.

    Args:
        response: Response from the transport
        endpoint: Name used in error messages

    Returns:
        The decoded JSON array

    Raises:
        HttpError: If status is 400 or above
        MalformedResponseError: If the body is not a JSON array
    """
    if response.status_code >= 400:
        raise HttpError(response.status_code, endpoint)

    try:
        payload = response.json()
    except ValueError as e:
        raise MalformedResponseError(f"invalid JSON from {endpoint} endpoint: {e}") from e

    if not isinstance(payload, list):
        raise MalformedResponseError(
            f"expected a JSON array from {endpoint} endpoint, got {type(payload).__name__}"
        )
    return payload
