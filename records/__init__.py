"""Client for the paginated, color-filterable /records API."""
from .colors import COLORS, Color, Disposition
from .models import Record, OpenRecord, RetrieveOptions, RetrieveResponse
from .errors import (
    RecordsError,
    HttpError,
    TransportError,
    MalformedResponseError,
    InvalidArgumentError,
)
from .transport import HttpxTransport, Transport
from .client import RecordsClient, retrieve

__all__ = [
    "COLORS",
    "Color",
    "Disposition",
    "Record",
    "OpenRecord",
    "RetrieveOptions",
    "RetrieveResponse",
    "RecordsError",
    "HttpError",
    "TransportError",
    "MalformedResponseError",
    "InvalidArgumentError",
    "HttpxTransport",
    "Transport",
    "RecordsClient",
    "retrieve",
]
