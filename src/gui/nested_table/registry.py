"""Per-view mapping from row handles to payloads."""

from __future__ import annotations

from typing import Dict, Hashable, Iterator


class RowLookupError(LookupError):
    """A row handle is not registered in this view."""

    def __init__(self, handle: int):
        super().__init__(f"Unknown row handle: {handle!r}")
        self.handle = handle


class RowRegistry:
    """Resolves handles issued by one NestedTableWidget to their payloads.

    Created fresh for every built view and discarded with it. Entries are
    never removed.
    """

    def __init__(self):
        self._rows: Dict[int, Hashable] = {}

    def put(self, handle: int, payload: Hashable) -> None:
        self._rows[handle] = payload

    def get(self, handle: int) -> Hashable:
        try:
            return self._rows[handle]
        except KeyError:
            raise RowLookupError(handle) from None

    def handles(self) -> Iterator[int]:
        return iter(list(self._rows))

    def __contains__(self, handle: int) -> bool:
        return handle in self._rows

    def __len__(self) -> int:
        return len(self._rows)
