"""Exception types raised by the hierarchy package."""

from __future__ import annotations

from typing import Any, Sequence


class HierarchyError(Exception):
    """Base class for hierarchy errors."""


class PayloadNotFoundError(HierarchyError, LookupError):
    """A payload was queried that is not indexed by the tree."""

    def __init__(self, payload: Any):
        super().__init__(f"Payload not in tree: {payload!r}")
        self.payload = payload


class InvariantViolation(HierarchyError):
    """The one-node-per-payload-value invariant would be broken."""


class DuplicatePayloadError(InvariantViolation):
    """A payload value is already indexed under another node."""

    def __init__(self, payload: Any):
        super().__init__(f"Payload already indexed: {payload!r}")
        self.payload = payload


class HierarchyLoadError(HierarchyError):
    """Tabular hierarchy input could not be turned into a tree."""

    def __init__(self, message: str, errors: Sequence[str] = ()):
        super().__init__(message)
        self.errors = list(errors)
