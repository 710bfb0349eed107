from __future__ import annotations


class BellmanPathsError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(BellmanPathsError, ValueError):
    """Raised for malformed input: bad vertex count, source, or edge endpoints."""
