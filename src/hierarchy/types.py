"""Payload types shown as table rows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple, runtime_checkable


@runtime_checkable
class Displayable(Protocol):
    """Hashable value that renders as one table row."""

    def __hash__(self) -> int:
        ...

    def display_fields(self) -> Tuple[str, ...]:
        ...


@dataclass(frozen=True)
class Record:
    """Immutable labeled record with a secondary integer value."""

    label: str
    """Primary text shown in the first column"""

    value: int
    """Secondary value shown in the second column"""

    def display_fields(self) -> Tuple[str, ...]:
        return (self.label, str(self.value))
