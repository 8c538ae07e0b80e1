"""Node representation used to mirror an arena tree as an anytree hierarchy."""

from typing import Any, Optional

from anytree import Node


class TreeViewNode(Node):  # type: ignore
    """Node class mirroring one arena node in an anytree hierarchy.

    Extends anytree.Node so that the arena tree can be drawn and walked with
    anytree's rendering and traversal helpers. The view is a snapshot: nodes
    added to the arena afterwards do not appear in it.

    Attributes:
        name (str): Display text for the node, ``str(value)``.
        parent (Optional[TreeViewNode]): The parent view node.
        node_id (int): Arena index of the mirrored node.
        depth (int): Depth of the mirrored node (computed by anytree from the ancestors).
        value (Any): The payload of the mirrored node.
        children (tuple[TreeViewNode]): The child view nodes (inherited from anytree.Node).

    Example:
        >>> root = TreeViewNode(0, "root")
        >>> leaf = TreeViewNode(1, 42, parent=root)
        >>> leaf.name
        '42'
        >>> leaf.parent.node_id
        0
    """

    def __init__(self, node_id: int, value: Any, parent: Optional["TreeViewNode"] = None, **kwargs: Any) -> None:
        """Initialize a TreeViewNode.

        Args:
            node_id: Arena index of the mirrored node.
            value: The payload of the mirrored node.
            parent: The parent view node. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(str(value), parent, **kwargs)
        self.node_id = node_id
        self.value = value
