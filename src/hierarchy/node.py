"""Tree vertex holding a payload and its child vertices."""

from __future__ import annotations

from typing import Any, Dict, Hashable, List, Optional


class Node:
    """A single vertex of the hierarchy.

    Children are kept in an insertion-ordered mapping keyed by payload value,
    so re-adding a child with an equal payload is a no-op. Two nodes compare
    equal when their payloads do.
    """

    __slots__ = ("data", "_children")

    def __init__(self, data: Hashable):
        self.data = data
        self._children: Dict[Hashable, Node] = {}

    def add_child(self, node: "Node") -> None:
        self._children.setdefault(node.data, node)

    def get_child(self, data: Hashable) -> Optional["Node"]:
        return self._children.get(data)

    def children(self) -> List["Node"]:
        return list(self._children.values())

    def has_children(self) -> bool:
        return bool(self._children)

    def __eq__(self, other: Any) -> bool:
        if self is other:
            return True
        if not isinstance(other, Node):
            return NotImplemented
        return self.data == other.data

    def __hash__(self) -> int:
        return hash(self.data)

    def __repr__(self) -> str:
        return f"Node({self.data!r}, children={len(self._children)})"
