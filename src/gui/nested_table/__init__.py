"""Nested table package for lazily expandable hierarchy views.

- table: NestedTableWidget presentation primitives
- registry: RowRegistry mapping row handles back to payloads
- view_builder: ViewBuilder wiring recursive expansion
"""

from .registry import RowLookupError, RowRegistry
from .table import NestedTableWidget
from .view_builder import ViewBuilder

__all__ = ["NestedTableWidget", "RowLookupError", "RowRegistry", "ViewBuilder"]
