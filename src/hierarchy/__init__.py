"""In-memory hierarchy of display records.

- types: Record payload and the Displayable protocol
- node: Node vertex owning a payload and its children
- tree: Tree container with a payload-keyed index
- loader: build a Tree from tabular parent/child rows
- sample: bundled demo hierarchy
"""

from .exceptions import (
    DuplicatePayloadError,
    HierarchyError,
    HierarchyLoadError,
    InvariantViolation,
    PayloadNotFoundError,
)
from .node import Node
from .tree import Tree
from .types import Displayable, Record

__all__ = [
    "Displayable",
    "DuplicatePayloadError",
    "HierarchyError",
    "HierarchyLoadError",
    "InvariantViolation",
    "Node",
    "PayloadNotFoundError",
    "Record",
    "Tree",
]
