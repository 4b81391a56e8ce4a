"""Base error shared by every pipeline stage."""

from __future__ import annotations


class PackTestError(Exception):
    """Raised when a pack test run cannot continue."""
