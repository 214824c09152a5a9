"""Typed domain models used by cutr."""

from .datatypes import Extract, ExtractMode

__all__ = ["Extract", "ExtractMode"]
