"""Input stream helpers for cutr."""

from .readers import STDIN_NAME, close_input, iter_lines, open_input

__all__ = ["STDIN_NAME", "close_input", "iter_lines", "open_input"]
