"""Main application window hosting the root hierarchy view."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QLabel, QMainWindow, QScrollArea, QVBoxLayout, QWidget

from config.view_config import DEFAULT_VIEW_CONFIG, ViewConfig
from gui.nested_table import NestedTableWidget, ViewBuilder
from hierarchy import Tree
from utils.error_handling import TimingContext

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Window showing one Tree as a nested, expandable table."""

    def __init__(self, tree: Tree, config: ViewConfig = DEFAULT_VIEW_CONFIG, parent=None):
        super().__init__(parent)
        self.tree = tree
        self.config = config
        self.builder = ViewBuilder(config)
        self.root_view: NestedTableWidget | None = None

        self.setWindowTitle(config.window_title)
        self.resize(720, 560)
        self.setup_ui()

    def setup_ui(self):
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        hint = QLabel("Double-click a row to expand or collapse it.")
        layout.addWidget(hint)

        with TimingContext("root_view"):
            self.root_view = self.builder.build_roots(self.tree)
        layout.addWidget(self.root_view)
        layout.addStretch(1)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(container)
        self.setCentralWidget(scroll)

        self.statusBar().showMessage(f"{len(self.tree.roots)} roots, {len(self.tree)} records")
        logger.info(
            "Main window ready",
            extra={"event": "window_ready", "roots": len(self.tree.roots), "records": len(self.tree)},
        )
