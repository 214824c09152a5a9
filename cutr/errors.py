"""Domain exceptions for selection parsing and CLI diagnostics."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .selection import ParseError


class CommandStageError(RuntimeError):
    """Raised when a specific command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class SelectionError(ValueError):
    """Raised when a selection list is rejected by the parser.

    The underlying `ParseError` value is kept on `error` so callers can still
    inspect which rule failed.
    """

    def __init__(self, error: ParseError) -> None:
        super().__init__(error.message)
        self.error = error
