"""Core datatypes shared across cutr modules.

Key types:
- `ExtractMode`: which unit of a line a selection addresses.
- `Extract`: a validated selection bound to its extraction mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..selection import parse_extraction


class ExtractMode(str, Enum):
    """Unit addressed by a selection list."""

    FIELDS = "fields"
    BYTES = "bytes"
    CHARS = "chars"


@dataclass(frozen=True, slots=True)
class Extract:
    """A parsed selection list together with its extraction mode.

    Attributes:
        mode: Whether ranges address fields, bytes, or characters.
        ranges: 0-based half-open ranges in selection order.
    """

    mode: ExtractMode
    ranges: tuple[range, ...]

    @classmethod
    def from_selection(cls, mode: ExtractMode, text: str) -> Extract:
        """Parse `text` and bind the result to `mode`.

        Raises:
            SelectionError: If the selection list is invalid.
        """

        return cls(mode=mode, ranges=tuple(parse_extraction(text)))
