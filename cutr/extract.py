"""Line extraction over parsed selection ranges.

Responsibilities:
- Slice characters, bytes, or delimited fields out of one input line.
- Encode and decode delimited records with `csv` quoting rules.

Positions past the end of a line are skipped. Ranges are applied in the
order given, so repeated or overlapping ranges repeat their output.
"""

from __future__ import annotations

import csv
import io
from typing import Iterable, Sequence

from .models.datatypes import Extract, ExtractMode


def extract_chars(line: str, ranges: Iterable[range]) -> str:
    """Return the selected characters of `line`."""

    return "".join(line[span.start : span.stop] for span in ranges)


def extract_bytes(line: bytes, ranges: Iterable[range]) -> str:
    """Return the selected bytes of `line`, decoded lossily as UTF-8."""

    selected = b"".join(line[span.start : span.stop] for span in ranges)
    return selected.decode("utf-8", errors="replace")


def extract_fields(record: Sequence[str], ranges: Iterable[range]) -> list[str]:
    """Return the selected fields of an already split record."""

    fields: list[str] = []
    for span in ranges:
        fields.extend(record[span.start : span.stop])
    return fields


def split_record(line: str, delimiter: str) -> list[str]:
    """Split one line into fields, honouring double-quoted fields."""

    reader = csv.reader([line], delimiter=delimiter)
    return next(reader, [])


def join_record(fields: Sequence[str], delimiter: str) -> str:
    """Join fields with `delimiter`, quoting fields that need it."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="")
    writer.writerow(fields)
    return buffer.getvalue()


def cut_line(line: bytes, extract: Extract, delimiter: str) -> str:
    """Apply one extraction to a raw line without its line terminator."""

    if extract.mode is ExtractMode.BYTES:
        return extract_bytes(line, extract.ranges)

    text = line.decode("utf-8", errors="replace")
    if extract.mode is ExtractMode.CHARS:
        return extract_chars(text, extract.ranges)

    record = split_record(text, delimiter)
    return join_record(extract_fields(record, extract.ranges), delimiter)
