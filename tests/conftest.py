"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from hierarchy import Node, Record, Tree


# ---------------------------------------------------------------------------
# Hierarchy Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def records() -> dict:
    """Records A..D used by the small scenario tree."""
    return {
        "A": Record("A", 1),
        "B": Record("B", 2),
        "C": Record("C", 3),
        "D": Record("D", 4),
    }


@pytest.fixture
def scenario_tree(records) -> Tree:
    """Roots {A}; A -> B, A -> C, B -> D."""
    tree = Tree({Node(records["A"])})
    tree.add_child(records["A"], records["B"])
    tree.add_child(records["A"], records["C"])
    tree.add_child(records["B"], records["D"])
    return tree


@pytest.fixture
def edges_rows() -> list[dict]:
    """Parent/child rows in loader column format."""
    return [
        {"parent_label": None, "parent_value": None, "label": "Site", "value": 1},
        {"parent_label": "Site", "parent_value": 1, "label": "Building", "value": 2},
        {"parent_label": "Building", "parent_value": 2, "label": "Floor", "value": 3},
        {"parent_label": "Site", "parent_value": 1, "label": "Parking", "value": 2},
    ]
