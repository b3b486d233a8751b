"""Bundled demo hierarchy."""

from __future__ import annotations

from .node import Node
from .tree import Tree
from .types import Record


def build_sample_tree(strict: bool = False) -> Tree:
    """Return the demo tree.

    The three roots are separately constructed but equal ``Root(1)`` records,
    so they collapse into a single root and every edge below lands on it.
    """
    first_root = Record("Root", 1)
    second_root = Record("Root", 1)
    third_root = Record("Root", 1)

    tree = Tree([Node(first_root), Node(second_root), Node(third_root)], strict=strict)

    qq = Record("QQ", 2)
    tree.add_child(first_root, qq)
    tree.add_child(first_root, Record("QW", 2))

    tree.add_child(qq, Record("QWEASD", 3))
    tree.add_child(qq, Record("ASDZXC", 3))
    tree.add_child(qq, Record("ZXCASD", 3))

    zxc = Record("ZXC", 2)
    cxz = Record("CXZ", 2)
    tree.add_child(second_root, zxc)
    tree.add_child(second_root, cxz)

    tree.add_child(zxc, Record("ZZZ", 3))
    tree.add_child(cxz, Record("CCC", 3))
    return tree
