"""Summarize a page of records by color and disposition."""
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence

from records.colors import Disposition, is_primary
from records.models import OpenRecord, Record, RetrieveOptions


@dataclass
class Summary:
    """Aggregated fields of a RetrieveResponse."""
    ids: List[Any] = field(default_factory=list)
    open: List[OpenRecord] = field(default_factory=list)
    closed_primary_count: int = 0


def filter_by_colors(records: Iterable[Record], colors: Optional[Sequence[str]]) -> List[Record]:
    """Keep records whose color was requested; None keeps everything."""
    if colors is None:
        return list(records)
    return [record for record in records if any(record.color == name for name in colors)]


def aggregate(payload: Iterable[Any], options: RetrieveOptions) -> Summary:
    """
    Build ids, open records and the closed primary count for one page.

    The color filter is applied locally to the page already fetched.

    Args:
        payload: Decoded JSON array from the endpoint
        options: The options the page was requested with

    Returns:
        Summary of the (filtered) page
    """
    records = filter_by_colors(
        (Record.from_dict(item) for item in payload),
        options.requested_colors,
    )

    summary = Summary()
    for record in records:
        summary.ids.append(record.id)
        primary = is_primary(record.color)

        if record.disposition == Disposition.OPEN:
            summary.open.append(OpenRecord(record=record, is_primary=primary))
        elif record.disposition == Disposition.CLOSED and primary:
            summary.closed_primary_count += 1

    return summary
