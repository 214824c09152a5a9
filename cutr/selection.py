"""Selection list parsing for field, byte, and character extraction.

Responsibilities:
- Split a selection list (`1`, `1,3`, `5-7`, mixed `1,3,5-7`) into tokens.
- Classify each token as a single position or a closed position range.
- Convert 1-based inclusive positions into 0-based half-open ranges.
- Report the first invalid token as a typed error value.

Key public functions:
- `parse_selection`: parse into an extraction or return a `ParseError` value.
- `parse_extraction`: raising wrapper used by CLI and config flows.
- `format_selection`: render an extraction back into list syntax.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Iterable, Union

from .errors import SelectionError

_RANGE_PATTERN = re.compile(r"([0-9]+)-([0-9]+)")
_SINGLE_PATTERN = re.compile(r"[0-9]+")

Extraction = list[range]


@dataclass(frozen=True, slots=True)
class Single:
    """One 1-based position, e.g. `3`."""

    value: int


@dataclass(frozen=True, slots=True)
class RangePair:
    """A closed 1-based position range, e.g. `5-7`."""

    first: int
    second: int


ParsedSelector = Union[Single, RangePair]


@dataclass(frozen=True, slots=True)
class IllegalListValue:
    """A token (or a zero-valued part of a range) that is not a valid position.

    Attributes:
        value: Offending text exactly as written by the user.
    """

    value: str

    @property
    def message(self) -> str:
        return f'illegal list value: "{self.value}"'

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class InvalidRangeOrder:
    """A well-formed range whose first position is not below the second."""

    first: int
    second: int

    @property
    def message(self) -> str:
        return (
            f"First number in range ({self.first}) "
            f"must be lower than second number ({self.second})"
        )

    def __str__(self) -> str:
        return self.message


ParseError = Union[IllegalListValue, InvalidRangeOrder]


def parse_selection(text: str) -> Extraction | ParseError:
    """Parse a selection list into 0-based half-open ranges.

    Tokens are processed left to right and the first invalid token stops the
    parse. Ranges keep input order, overlaps and repeats included.

    Args:
        text: Raw selection list, e.g. the value of `--fields`.

    Returns:
        Ordered list of `range` objects, or the `ParseError` of the first bad token.
    """

    extraction: Extraction = []
    for token in text.split(","):
        selector = classify_token(token)
        if isinstance(selector, (IllegalListValue, InvalidRangeOrder)):
            return selector
        extraction.append(selector_to_range(selector))
    return extraction


def parse_extraction(text: str) -> Extraction:
    """Parse a selection list and raise `SelectionError` on invalid input."""

    result = parse_selection(text)
    if isinstance(result, (IllegalListValue, InvalidRangeOrder)):
        raise SelectionError(result)
    return result


def classify_token(token: str) -> ParsedSelector | ParseError:
    """Classify one comma-delimited token without trimming it."""

    range_match = _RANGE_PATTERN.fullmatch(token)
    if range_match is not None:
        first_text, second_text = range_match.groups()
        first = int(first_text)
        second = int(second_text)
        # Blame the zero-valued side, not the whole range.
        if first == 0:
            return IllegalListValue(first_text)
        if second == 0:
            return IllegalListValue(second_text)
        if first >= second:
            return InvalidRangeOrder(first, second)
        return RangePair(first, second)

    if _SINGLE_PATTERN.fullmatch(token) is not None:
        value = int(token)
        if value == 0:
            return IllegalListValue(token)
        return Single(value)

    return IllegalListValue(token)


def selector_to_range(selector: ParsedSelector) -> range:
    """Convert a validated 1-based selector into a 0-based half-open range."""

    if isinstance(selector, Single):
        return range(selector.value - 1, selector.value)
    return range(selector.first - 1, selector.second)


def format_selection(extraction: Iterable[range]) -> str:
    """Format ranges into compact 1-based list syntax, preserving order."""

    parts: list[str] = []
    for span in extraction:
        if span.stop - span.start == 1:
            parts.append(str(span.stop))
        else:
            parts.append(f"{span.start + 1}-{span.stop}")
    return ",".join(parts)
