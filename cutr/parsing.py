"""Shared parsing helpers for config value normalization."""

from __future__ import annotations

from typing import Any


def normalize_string_list(value: Any, field_name: str) -> list[str]:
    """Normalize a scalar or list value into a list of non-empty strings.

    Items are kept exactly as written, surrounding whitespace included.

    Raises:
        ValueError: If the value is not a string/list or contains empty items.
    """

    if isinstance(value, str):
        items: list[Any] = [value]
    elif isinstance(value, list):
        items = value
    else:
        raise ValueError(f"`{field_name}` must be a string or a list of strings.")

    normalized: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise ValueError(f"`{field_name}` must be a string or a list of strings.")
        if not item:
            raise ValueError(f"`{field_name}` must not contain empty entries.")
        normalized.append(item)
    return normalized
