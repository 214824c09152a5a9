"""Top-level package for cutr.

This package provides a `cut`-style tool for printing selected fields, bytes,
or characters from lines of text. The selection list grammar lives in
`cutr.selection`; `parse_selection` is its main entry point.
"""

from .selection import (
    IllegalListValue,
    InvalidRangeOrder,
    format_selection,
    parse_extraction,
    parse_selection,
)

__all__ = [
    "IllegalListValue",
    "InvalidRangeOrder",
    "format_selection",
    "parse_extraction",
    "parse_selection",
    "__version__",
]

__version__ = "0.1.0"
