"""Static color and disposition tables for /records data."""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Disposition(str, Enum):
    """Lifecycle state of a record."""
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class Color:
    """A known record color."""
    name: str
    is_primary: bool


# Insertion order is also the order colors are requested in when no filter is given.
COLORS: Mapping[str, Color] = MappingProxyType({
    color.name: color
    for color in (
        Color("red", is_primary=True),
        Color("brown", is_primary=False),
        Color("blue", is_primary=True),
        Color("yellow", is_primary=True),
        Color("green", is_primary=False),
    )
})


def lookup_color(name) -> Optional[Color]:
    """Return the known color for ``name``, or None if it is not in the table."""
    if not isinstance(name, str):
        return None
    return COLORS.get(name)


def is_primary(name) -> bool:
    color = lookup_color(name)
    return bool(color and color.is_primary)
