"""Telemetry and observability helpers.

This package emits stage events for deterministic diagnostics.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
