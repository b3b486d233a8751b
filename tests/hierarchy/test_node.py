"""Tests for the Node vertex."""

from hierarchy import Node, Record


def test_new_node_has_no_children():
    node = Node(Record("A", 1))
    assert node.children() == []
    assert not node.has_children()


def test_add_child_marks_has_children():
    node = Node(Record("A", 1))
    node.add_child(Node(Record("B", 2)))

    assert node.has_children()
    assert [child.data for child in node.children()] == [Record("B", 2)]


def test_adding_equal_child_twice_is_noop():
    node = Node(Record("A", 1))
    first = Node(Record("B", 2))
    node.add_child(first)
    node.add_child(Node(Record("B", 2)))

    assert len(node.children()) == 1
    assert node.children()[0] is first


def test_get_child_by_payload():
    node = Node(Record("A", 1))
    child = Node(Record("B", 2))
    node.add_child(child)

    assert node.get_child(Record("B", 2)) is child
    assert node.get_child(Record("Z", 9)) is None


def test_nodes_compare_by_payload_value():
    assert Node(Record("A", 1)) == Node(Record("A", 1))
    assert Node(Record("A", 1)) != Node(Record("A", 2))
    assert len({Node(Record("A", 1)), Node(Record("A", 1))}) == 1
