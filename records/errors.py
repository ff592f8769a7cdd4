"""Errors raised while retrieving records."""


class RecordsError(Exception):
    """Base class for every records retrieval failure."""


class HttpError(RecordsError):
    """The endpoint answered with an HTTP error status."""

    def __init__(self, status_code: int, endpoint: str):
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(f"http error from {endpoint} endpoint: {status_code}")


class TransportError(RecordsError):
    """The request never produced a response (connection refused, DNS, timeout...)."""


class MalformedResponseError(RecordsError):
    """The response body could not be decoded into a list of records."""


class InvalidArgumentError(RecordsError, ValueError):
    """Caller supplied options that cannot be turned into a query."""
