"""Recursive, lazily expanding table views over a Tree.

``build`` renders one tier of payloads. Each row starts collapsed; the first
double click on a row with children builds the nested tier by calling
``build`` again for that row's children. Later double clicks only show or
hide the tier that already exists, so the view is only as deep as the user
has explored.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Iterable, List, Optional

from config.view_config import DEFAULT_VIEW_CONFIG, ViewConfig
from hierarchy import Displayable, Tree
from utils.error_handling import log_exception, timed

from .registry import RowRegistry
from .table import NestedTableWidget

logger = logging.getLogger(__name__)

SortKey = Callable[[Displayable], object]


def _display_sort_key(payload: Displayable) -> object:
    return tuple(payload.display_fields())


class ViewBuilder:
    """Maps tree structure onto nested NestedTableWidget tiers.

    Args:
        config: Column headers and ordering options.
        sort_key: Row ordering within a tier. Defaults to the payload's display
            fields when ``config.sort_rows`` is set, otherwise insertion order.
    """

    def __init__(self, config: ViewConfig = DEFAULT_VIEW_CONFIG, sort_key: Optional[SortKey] = None):
        self.config = config
        if sort_key is None and config.sort_rows:
            sort_key = _display_sort_key
        self.sort_key = sort_key
        self.views_built = 0

    def build_roots(self, tree: Tree) -> NestedTableWidget:
        """Render the tree's roots as the top tier."""
        return self.build(tree, tree.root_payloads(), expanded=self.config.expand_roots)

    @timed
    def build(
        self,
        tree: Tree,
        payloads: Iterable[Displayable],
        expanded: bool = False,
    ) -> NestedTableWidget:
        """Render ``payloads`` as one table and wire lazy expansion.

        Args:
            tree: Tree that owns every payload in ``payloads``
            payloads: Rows of this tier
            expanded: Reveal each row's children immediately

        Raises:
            PayloadNotFoundError: A payload is not in ``tree``.
        """
        table = NestedTableWidget(self.config.column_headers)
        registry = RowRegistry()

        for payload in self._ordered(payloads):
            handle = table.add_row(payload.display_fields(), expandable=tree.has_children(payload))
            registry.put(handle, payload)

        table.row_activated.connect(partial(self._on_row_activated, tree, table, registry))
        self.views_built += 1

        logger.debug(
            "Built view with %d rows",
            len(registry),
            extra={"event": "view_built", "expanded": expanded},
        )

        if expanded:
            for handle in registry.handles():
                self.toggle(tree, table, registry, handle)
        return table

    def toggle(
        self,
        tree: Tree,
        table: NestedTableWidget,
        registry: RowRegistry,
        handle: int,
    ) -> None:
        """Expand or collapse one row, building its nested tier on first expansion."""
        if table.has_nested(handle):
            table.set_nested_visible(handle, not table.is_nested_visible(handle))
            return

        payload = registry.get(handle)
        if not tree.has_children(payload):
            logger.debug("Row %d is a leaf", handle, extra={"event": "leaf_activated", "handle": handle})
            return

        nested = self.build(tree, tree.get_children(payload))
        table.attach_nested(handle, nested)
        table.set_nested_visible(handle, True)
        logger.debug(
            "Expanded %r",
            payload,
            extra={"event": "row_expanded", "handle": handle},
        )

    def _on_row_activated(
        self,
        tree: Tree,
        table: NestedTableWidget,
        registry: RowRegistry,
        handle: int,
    ) -> None:
        try:
            self.toggle(tree, table, registry, handle)
        except LookupError as e:
            log_exception(e, "Row expansion failed", extra={"handle": handle})
            raise

    def _ordered(self, payloads: Iterable[Displayable]) -> List[Displayable]:
        items = list(payloads)
        if self.sort_key is not None:
            items.sort(key=self.sort_key)
        return items

