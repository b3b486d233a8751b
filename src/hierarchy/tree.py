"""Hierarchy container with a payload-keyed node index.

The index maps every payload value reachable from the roots to the node that
holds it. It is built once by a breadth-first walk over all roots and is then
kept current by ``add_child``; nodes attached directly through ``Node.add_child``
after construction are not picked up.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Dict, Hashable, Iterable, List, Tuple

from utils.error_handling import timed

from .exceptions import DuplicatePayloadError, PayloadNotFoundError
from .node import Node

logger = logging.getLogger(__name__)


class Tree:
    """Forest of nodes plus an O(1) payload -> node index.

    Args:
        roots: Root nodes. Roots with equal payloads collapse into one.
        strict: Raise ``DuplicatePayloadError`` instead of letting a later
            node overwrite the index entry of an equal payload.
    """

    def __init__(self, roots: Iterable[Node], strict: bool = False):
        self.strict = strict
        self._roots: Dict[Hashable, Node] = {}
        for node in roots:
            self._roots.setdefault(node.data, node)
        self._index: Dict[Hashable, Node] = {}
        self._build_index()

    @classmethod
    def from_edges(
        cls,
        roots: Iterable[Hashable],
        edges: Iterable[Tuple[Hashable, Hashable]],
        strict: bool = False,
    ) -> "Tree":
        """Build a tree from root payloads and ordered (parent, child) pairs."""
        tree = cls([Node(payload) for payload in roots], strict=strict)
        for parent, child in edges:
            tree.add_child(parent, child)
        return tree

    @timed
    def _build_index(self) -> None:
        queue = deque(self._roots.values())
        while queue:
            node = queue.popleft()
            if self._index.get(node.data) is node:
                continue
            self._register(node)
            queue.extend(node.children())

        logger.debug(
            "Indexed %d nodes from %d roots",
            len(self._index),
            len(self._roots),
            extra={"event": "tree_indexed"},
        )

    def _register(self, node: Node) -> None:
        existing = self._index.get(node.data)
        if existing is not None and existing is not node:
            if self.strict:
                raise DuplicatePayloadError(node.data)
            logger.warning(
                "Payload %r already indexed; last write wins",
                node.data,
                extra={"event": "index_overwrite"},
            )
        self._index[node.data] = node

    @property
    def roots(self) -> List[Node]:
        return list(self._roots.values())

    def root_payloads(self) -> List[Hashable]:
        return list(self._roots)

    def node_for(self, payload: Hashable) -> Node:
        try:
            return self._index[payload]
        except KeyError:
            raise PayloadNotFoundError(payload) from None

    def contains(self, payload: Hashable) -> bool:
        return payload in self._index

    def has_children(self, payload: Hashable) -> bool:
        return self.node_for(payload).has_children()

    def get_children(self, payload: Hashable) -> List[Hashable]:
        return [child.data for child in self.node_for(payload).children()]

    def add_child(self, parent: Hashable, child: Hashable) -> None:
        """Attach ``child`` under the node holding ``parent``.

        Raises:
            PayloadNotFoundError: ``parent`` is not in the tree.
            DuplicatePayloadError: strict mode and ``child`` is already indexed.
        """
        parent_node = self.node_for(parent)
        if self.strict and child in self._index:
            raise DuplicatePayloadError(child)

        parent_node.add_child(Node(child))
        # An equal child already under this parent stays the attached node.
        attached = parent_node.get_child(child)
        self._register(attached)

        logger.debug(
            "Added %r under %r",
            child,
            parent,
            extra={"event": "child_added"},
        )

    def __contains__(self, payload: Hashable) -> bool:
        return self.contains(payload)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self) -> str:
        return f"Tree(roots={len(self._roots)}, nodes={len(self._index)})"
