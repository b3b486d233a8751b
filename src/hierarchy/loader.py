"""Build a hierarchy from tabular parent/child rows.

Expected columns:
    parent_label, parent_value, label, value

A row with an empty parent declares a root. Rows are applied in order, so a
parent must appear (as a root or as a child) before its own children.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

import pandas as pd

from utils.error_handling import ErrorCollector

from .exceptions import HierarchyLoadError
from .node import Node
from .tree import Tree
from .types import Record

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("parent_label", "parent_value", "label", "value")


def _record(label, value) -> Record:
    if pd.isna(label) or not str(label).strip():
        raise ValueError("label is empty")
    if pd.isna(value):
        raise ValueError(f"value is empty for {label!r}")
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"value {value!r} for {label!r} is not a whole number")
    return Record(str(label).strip(), int(number))


def _parent_of(row) -> Optional[Record]:
    if pd.isna(row["parent_label"]) or not str(row["parent_label"]).strip():
        return None
    return _record(row["parent_label"], row["parent_value"])


def load_edges_frame(df: pd.DataFrame, strict: bool = False) -> Tree:
    """Create a Tree from a DataFrame of parent/child rows.

    Raises:
        HierarchyLoadError: Columns are missing or any row is invalid.
    """
    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        raise HierarchyLoadError(f"Missing required columns: {', '.join(missing)}")

    collector = ErrorCollector("hierarchy load")
    roots: List[Record] = []
    edges: List[Tuple[Record, Record]] = []

    for idx, row in df.iterrows():
        with collector.catch(f"row {idx}"):
            child = _record(row["label"], row["value"])
            parent = _parent_of(row)
            if parent is None:
                roots.append(child)
            else:
                edges.append((parent, child))

    if collector.has_errors:
        raise HierarchyLoadError(collector.get_summary(), collector.errors)

    tree = Tree([Node(payload) for payload in roots], strict=strict)
    for parent, child in edges:
        with collector.catch(f"edge {parent.label} -> {child.label}"):
            tree.add_child(parent, child)

    if collector.has_errors:
        raise HierarchyLoadError(collector.get_summary(), collector.errors)

    logger.info(
        "Loaded hierarchy with %d roots and %d nodes",
        len(tree.roots),
        len(tree),
        extra={"event": "hierarchy_loaded"},
    )
    return tree


def load_tree_from_csv(path: Union[str, Path], strict: bool = False) -> Tree:
    """Read a CSV of parent/child rows and build a Tree."""
    path = Path(path)
    if not path.exists():
        raise HierarchyLoadError(f"File not found: {path}")

    try:
        df = pd.read_csv(path, dtype={"parent_label": "string", "label": "string"})
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError) as e:
        raise HierarchyLoadError(f"Could not read {path}: {e}") from e
    logger.debug("Read %d rows from %s", len(df), path, extra={"event": "csv_read"})
    return load_edges_frame(df, strict=strict)
