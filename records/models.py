"""Data shapes exchanged with the /records endpoint and with callers."""
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from records.errors import InvalidArgumentError, MalformedResponseError

_RECORD_FIELDS = ("id", "color", "disposition")


@dataclass(frozen=True)
class Record:
    """Record as returned by the /records endpoint."""
    id: Any
    color: Optional[str]
    disposition: Optional[str]
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, payload: Any) -> "Record":
        """
        Parse one JSON object from the endpoint.

        Missing keys become None; unknown keys are kept in ``extra``.

        Raises:
            MalformedResponseError: If the payload is not a JSON object
        """
        if not isinstance(payload, Mapping):
            raise MalformedResponseError(
                f"expected a record object, got {type(payload).__name__}"
            )
        return cls(
            id=payload.get("id"),
            color=payload.get("color"),
            disposition=payload.get("disposition"),
            extra={k: v for k, v in payload.items() if k not in _RECORD_FIELDS},
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert record back to its wire representation."""
        return {
            "id": self.id,
            "color": self.color,
            "disposition": self.disposition,
            **self.extra
        }


@dataclass(frozen=True)
class OpenRecord:
    """An open record annotated with whether its color is primary."""
    record: Record
    is_primary: bool

    @property
    def id(self) -> Any:
        return self.record.id

    @property
    def color(self) -> Optional[str]:
        return self.record.color

    @property
    def disposition(self) -> Optional[str]:
        return self.record.disposition

    def to_dict(self) -> Dict[str, Any]:
        return {**self.record.to_dict(), "isPrimary": self.is_primary}


@dataclass(frozen=True)
class RetrieveOptions:
    """
    Options accepted by ``retrieve``.

    Attributes:
        page: 1-indexed page of ``page_size`` records; None means page 1
        colors: Color names to include; None means every known color
    """
    page: Optional[int] = None
    colors: Optional[Iterable[str]] = None

    def __post_init__(self):
        # Freeze one-shot iterables so the query and the local filter see the same names
        if isinstance(self.colors, Iterable) and not isinstance(self.colors, (str, bytes, tuple)):
            object.__setattr__(self, "colors", tuple(self.colors))

    @classmethod
    def coerce(cls, value: Any) -> "RetrieveOptions":
        """Accept None, a RetrieveOptions, or a mapping with 'page'/'colors' keys."""
        if value is None:
            return cls()
        if isinstance(value, RetrieveOptions):
            return value
        if isinstance(value, Mapping):
            return cls(page=value.get("page"), colors=value.get("colors"))
        raise InvalidArgumentError(
            f"retrieve options must be a mapping or RetrieveOptions, got {type(value).__name__}"
        )

    @property
    def requested_colors(self) -> Optional[Tuple[str, ...]]:
        """
        Normalized color filter, in caller order.

        A bare string or a non-iterable value is not a list of names and is
        treated like an absent filter.
        """
        if isinstance(self.colors, tuple):
            return self.colors
        return None

    def for_page(self, page: int) -> "RetrieveOptions":
        """Same filters, different page."""
        return replace(self, page=page)


@dataclass
class RetrieveResponse:
    """Summary of one page of records."""
    ids: List[Any] = field(default_factory=list)
    open: List[OpenRecord] = field(default_factory=list)
    closed_primary_count: int = 0
    previous_page: Optional[int] = None
    next_page: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        """Render with the camelCase keys callers of the records API expect."""
        return {
            "ids": list(self.ids),
            "open": [record.to_dict() for record in self.open],
            "closedPrimaryCount": self.closed_primary_count,
            "previousPage": self.previous_page,
            "nextPage": self.next_page,
        }
