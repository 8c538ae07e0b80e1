"""Unit tests for the TreeViewNode class."""

from arenatree.arena_tree.view_node import TreeViewNode


def test_tree_view_node_initialization():
    """Test basic initialization of TreeViewNode."""
    node = TreeViewNode(3, (1, "one"))
    assert node.node_id == 3
    assert node.value == (1, "one")
    assert node.name == "(1, 'one')"
    assert node.parent is None
    assert node.depth == 0


def test_tree_view_node_parent_child():
    """Test parent-child relationships in TreeViewNode."""
    root = TreeViewNode(0, 10)
    child1 = TreeViewNode(1, 1, parent=root)
    child2 = TreeViewNode(2, 2, parent=root)
    grandchild = TreeViewNode(3, 2, parent=child1)

    assert child1.parent == root
    assert grandchild.parent == child1
    assert root.children == (child1, child2)
    assert grandchild.depth == 2
    assert [node.node_id for node in grandchild.path] == [0, 1, 3]
