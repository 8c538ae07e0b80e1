"""Node record stored in a tree's arena."""

from typing import Any, Generic, List, Optional

from arenatree.types import NodeId, T


class Node(Generic[T]):
    """A single entry of a tree's arena.

    Nodes do not hold references to other nodes. Parent and children are arena
    indices, so a node is only meaningful together with the tree that owns it.

    Attributes:
        depth (int): Distance from the root; 0 for the root.
        parent (Optional[int]): Arena index of the parent, None for the root.
        children (List[int]): Arena indices of the children, in insertion order.
        value (T): The payload carried by the node.

    Example:
        >>> root = Node(0, None, "root")
        >>> root.is_root, root.is_leaf
        (True, True)
        >>> child = Node(1, 0, "child")
        >>> child.parent
        0
    """

    def __init__(
        self,
        depth: int,
        parent: Optional[NodeId],
        value: T,
        children: Optional[List[NodeId]] = None,
    ) -> None:
        """Initialize a Node.

        Args:
            depth: Distance from the root.
            parent: Arena index of the parent node, or None for the root.
            value: The payload.
            children: Arena indices of the children. Defaults to an empty list.
        """
        self.depth = depth
        self.parent = parent
        self.value = value
        self.children: List[NodeId] = list(children) if children is not None else []

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def copy(self) -> "Node[T]":
        """Return a detached copy of this node.

        The copy owns its own children list, so appending to the original does not
        affect it. The value object itself is shared, not copied.

        Returns:
            A new Node with the same depth, parent, value and children.
        """
        return Node(self.depth, self.parent, self.value, self.children)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Node):
            return False
        return (
            self.depth == other.depth
            and self.parent == other.parent
            and self.children == other.children
            and self.value == other.value
        )

    # Nodes are mutable records
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Node(depth={self.depth}, parent={self.parent}, children={self.children}, value={self.value!r})"
