"""Table widget whose rows can each host a nested view beneath them."""

from __future__ import annotations

import itertools
import logging
from typing import Dict, List, Optional, Sequence

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QAbstractItemView, QHeaderView, QTableWidget, QTableWidgetItem, QWidget

from .registry import RowLookupError

logger = logging.getLogger(__name__)

COLLAPSED_MARK = "▸"
EXPANDED_MARK = "▾"
INDICATOR_COLUMN = 0

# Handles are unique across every table in the process, so a handle from one
# view never resolves in another.
_handle_counter = itertools.count(1)


class NestedTableWidget(QTableWidget):
    """QTableWidget with one hidden detail row reserved under each data row.

    Column 0 shows the expansion indicator; the remaining columns show the
    payload's display fields. Rows are identified by opaque integer handles
    returned from ``add_row``.
    """

    row_activated = pyqtSignal(int)  # handle of the double-clicked data row
    content_resized = pyqtSignal()

    def __init__(self, column_headers: Sequence[str], parent: Optional[QWidget] = None):
        super().__init__(0, len(column_headers) + 1, parent)
        self._rows: Dict[int, QTableWidgetItem] = {}
        self._expandable: Dict[int, bool] = {}
        self._nested: Dict[int, QWidget] = {}

        self.setHorizontalHeaderLabels([""] + list(column_headers))
        self.verticalHeader().setVisible(False)
        self.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)

        header = self.horizontalHeader()
        header.setSectionResizeMode(INDICATOR_COLUMN, QHeaderView.ResizeMode.ResizeToContents)
        header.setStretchLastSection(True)

        self.cellDoubleClicked.connect(self._on_cell_double_clicked)
        self._fit_height()

    def add_row(self, fields: Sequence[str], expandable: bool = False) -> int:
        """Append a data row and its hidden detail row; return the row handle."""
        handle = next(_handle_counter)
        data_row = self.rowCount()
        self.insertRow(data_row)
        self.insertRow(data_row + 1)

        indicator = QTableWidgetItem(COLLAPSED_MARK if expandable else "")
        indicator.setData(Qt.ItemDataRole.UserRole, handle)
        indicator.setTextAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setItem(data_row, INDICATOR_COLUMN, indicator)

        for col_idx, text in enumerate(fields, start=1):
            self.setItem(data_row, col_idx, QTableWidgetItem(text))

        self.setRowHidden(data_row + 1, True)
        self._rows[handle] = indicator
        self._expandable[handle] = expandable
        self._fit_height()
        return handle

    def handles(self) -> List[int]:
        return list(self._rows)

    def row_fields(self, handle: int) -> List[str]:
        data_row = self._data_row(handle)
        return [
            self.item(data_row, col_idx).text()
            for col_idx in range(1, self.columnCount())
            if self.item(data_row, col_idx) is not None
        ]

    def is_expandable(self, handle: int) -> bool:
        self._data_row(handle)
        return self._expandable[handle]

    def attach_nested(self, handle: int, widget: QWidget) -> None:
        """Place ``widget`` in the detail row under ``handle`` (initially hidden)."""
        detail_row = self._data_row(handle) + 1
        if handle in self._nested:
            raise ValueError(f"Row {handle} already has a nested view")

        self.setSpan(detail_row, 0, 1, self.columnCount())
        self.setCellWidget(detail_row, 0, widget)
        self._nested[handle] = widget
        logger.debug("Attached nested view under row %d", handle, extra={"event": "nested_attached", "handle": handle})
        if isinstance(widget, NestedTableWidget):
            widget.content_resized.connect(self._fit_height)
        self._fit_height()

    def has_nested(self, handle: int) -> bool:
        self._data_row(handle)
        return handle in self._nested

    def nested_view(self, handle: int) -> Optional[QWidget]:
        self._data_row(handle)
        return self._nested.get(handle)

    def set_nested_visible(self, handle: int, visible: bool) -> None:
        data_row = self._data_row(handle)
        self.setRowHidden(data_row + 1, not visible)
        if self._expandable[handle]:
            self._rows[handle].setText(EXPANDED_MARK if visible else COLLAPSED_MARK)
        self._fit_height()

    def is_nested_visible(self, handle: int) -> bool:
        data_row = self._data_row(handle)
        return handle in self._nested and not self.isRowHidden(data_row + 1)

    def _data_row(self, handle: int) -> int:
        item = self._rows.get(handle)
        if item is None:
            raise RowLookupError(handle)
        return item.row()

    def _on_cell_double_clicked(self, row: int, column: int) -> None:
        item = self.item(row, INDICATOR_COLUMN)
        if item is None:
            return  # detail row
        handle = item.data(Qt.ItemDataRole.UserRole)
        if handle is None:
            return
        self.row_activated.emit(int(handle))

    def _fit_height(self) -> None:
        """Size detail rows to their nested views and the table to its rows."""
        for handle, widget in self._nested.items():
            detail_row = self._rows[handle].row() + 1
            self.setRowHeight(detail_row, widget.minimumHeight() or widget.sizeHint().height())

        total_height = self.horizontalHeader().height()
        for row in range(self.rowCount()):
            if not self.isRowHidden(row):
                total_height += self.rowHeight(row)
        total_height += 2 * self.frameWidth()

        self.setMinimumHeight(total_height)
        self.setMaximumHeight(total_height)
        self.content_resized.emit()
