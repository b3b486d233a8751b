"""Shared fixtures for GUI tests."""

from __future__ import annotations

import os

import pytest
from PyQt6.QtWidgets import QApplication

from gui.nested_table import ViewBuilder


@pytest.fixture(scope="session")
def qt_app():
    """Provide a QApplication instance for GUI tests."""
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    app.processEvents()
    yield app
    app.processEvents()


@pytest.fixture
def builder(qt_app) -> ViewBuilder:
    return ViewBuilder()


@pytest.fixture
def sorted_builder(qt_app) -> ViewBuilder:
    """Builder with rows ordered by label for position-based assertions."""
    return ViewBuilder(sort_key=lambda record: record.label)
