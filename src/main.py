"""
Nested Grid - Main Entry Point

A desktop viewer that renders a hierarchy of records as nested, lazily
expandable tables.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from PyQt6.QtWidgets import QApplication, QMessageBox

from config.view_config import get_view_config
from gui.main_window import MainWindow
from hierarchy import HierarchyError
from hierarchy.loader import load_tree_from_csv
from hierarchy.sample import build_sample_tree
from utils.env import is_dev_mode
from utils.error_handling import format_error_message, log_exception
from utils.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse a hierarchy as nested tables.")
    parser.add_argument(
        "csv",
        nargs="?",
        help="CSV with parent_label, parent_value, label, value columns (default: demo data)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)
    log_file = setup_logging(logging.DEBUG if is_dev_mode() else logging.INFO)
    logger.info("Logging to %s", log_file, extra={"event": "startup"})
    config = get_view_config()

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName("Nested Grid")

    try:
        if args.csv:
            tree = load_tree_from_csv(args.csv, strict=config.strict_index)
        else:
            tree = build_sample_tree(strict=config.strict_index)
    except HierarchyError as e:
        log_exception(e, "Failed to load hierarchy", extra={"source": args.csv})
        QMessageBox.critical(None, "Error", format_error_message(e, "Failed to load hierarchy"))
        return 1

    window = MainWindow(tree, config)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
