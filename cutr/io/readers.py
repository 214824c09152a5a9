"""Binary line readers for files and standard input.

Responsibilities:
- Resolve an input name (`-` for stdin) into a readable binary stream.
- Yield lines without their `\\n` or `\\r\\n` terminator.
"""

from __future__ import annotations

import sys
from typing import BinaryIO, Iterator

STDIN_NAME = "-"


def open_input(name: str) -> BinaryIO:
    """Open one named input for binary reading.

    Raises:
        OSError: If a named file cannot be opened.
    """

    if name == STDIN_NAME:
        return sys.stdin.buffer
    return open(name, "rb")


def close_input(handle: BinaryIO) -> None:
    """Close a handle returned by `open_input`, leaving stdin open."""

    if handle is not sys.stdin.buffer:
        handle.close()


def iter_lines(handle: BinaryIO) -> Iterator[bytes]:
    """Yield each line of `handle` with its line terminator removed."""

    for raw_line in handle:
        if raw_line.endswith(b"\r\n"):
            yield raw_line[:-2]
        elif raw_line.endswith(b"\n"):
            yield raw_line[:-1]
        else:
            yield raw_line
