"""Arena tree with chainable construction, predicate search and branch matching.

This module provides the main Tree class. All nodes of a tree live in one
append-only list (the arena) and refer to each other by index, so node ids are
stable for the lifetime of the tree.
"""

import logging
from typing import Generic, Iterator, List, Optional, Sequence, Tuple

from anytree import RenderTree

from arenatree.arena_tree.mismatch_action import MismatchAction
from arenatree.arena_tree.node import Node
from arenatree.arena_tree.view_node import TreeViewNode
from arenatree.exceptions import InvalidNodeIdError
from arenatree.types import BranchPredicate, NodeId, T, U, ValuePredicate

logger = logging.getLogger(__name__)

ROOT_ID: NodeId = 0


class Tree(Generic[T]):
    """A generic tree whose nodes are stored in a single arena and addressed by index.

    The arena only grows: nodes are appended by ``add`` and never removed or moved,
    so an id handed out once stays valid. Index 0, when present, is the root, and a
    parent always has a smaller id than its children.

    Construction is chainable because ``add`` returns the tree itself. Queries never
    mutate the arena.

    Branch Matching:
        ``matches_branch`` walks a sequence of values from the root downwards. At each
        step only the first child (in insertion order) whose value matches is followed;
        siblings are never backtracked into. What happens when a value matches nothing
        is controlled by ``mismatch_action``:
        - SKIP (default): the value is skipped and the next one is tried against the
          same frontier
        - ABORT: matching stops and no node is returned

    Attributes:
        mismatch_action (MismatchAction): Default policy for unmatched branch values.

    Example:
        >>> tree = Tree.new(10).add(1, 0).add(2, 0).add(3, 1)
        >>> tree.get_current_max_depth()
        2
        >>> tree.matches_branch([10, 1, 3]).value
        3
        >>> tree.find(lambda value: value == 2)
        2
    """

    def __init__(self, mismatch_action: MismatchAction = MismatchAction.SKIP) -> None:
        """Initialize an empty Tree.

        Args:
            mismatch_action: How branch matching treats a value that matches no node of
                the current frontier. Defaults to SKIP.
        """
        self.mismatch_action = mismatch_action
        self._nodes: List[Node[T]] = []

    @classmethod
    def new_empty(cls, mismatch_action: MismatchAction = MismatchAction.SKIP) -> "Tree[T]":
        """Create a tree without any node.

        Every operation that addresses a node by id raises InvalidNodeIdError until a
        root exists.

        Args:
            mismatch_action: Default branch-matching policy. Defaults to SKIP.

        Returns:
            An empty tree.
        """
        return cls(mismatch_action)

    @classmethod
    def new(cls, value: T, mismatch_action: MismatchAction = MismatchAction.SKIP) -> "Tree[T]":
        """Create a tree holding a single root node.

        Args:
            value: The value of the root.
            mismatch_action: Default branch-matching policy. Defaults to SKIP.

        Returns:
            A tree whose only node is a root at depth 0.

        Example:
            >>> tree = Tree.new("root")
            >>> len(tree)
            1
        """
        tree = cls(mismatch_action)
        tree._nodes.append(Node(0, None, value))
        return tree

    @property
    def nodes(self) -> Tuple[Node[T], ...]:
        """Snapshot of the arena in id order, as detached copies of the nodes."""
        return tuple(node.copy() for node in self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def _check_node_id(self, node_id: NodeId) -> None:
        """Raise InvalidNodeIdError unless node_id addresses an existing node."""
        if not isinstance(node_id, int) or not 0 <= node_id < len(self._nodes):
            raise InvalidNodeIdError(node_id, len(self._nodes))

    def get_node(self, node_id: NodeId) -> Node[T]:
        """Get the node stored at node_id.

        Args:
            node_id: Arena index of the node.

        Returns:
            A detached copy of the node. Changing it does not affect the tree.

        Raises:
            InvalidNodeIdError: If node_id is not an existing index.
        """
        self._check_node_id(node_id)
        return self._nodes[node_id].copy()

    def add(self, value: T, parent_id: NodeId) -> "Tree[T]":
        """Append a new node under parent_id and return the tree.

        The new node gets the next free id, is placed one level below its parent and
        is registered at the end of the parent's children.

        Args:
            value: The value of the new node.
            parent_id: Arena index of the parent.

        Returns:
            The tree itself, so that calls can be chained.

        Raises:
            InvalidNodeIdError: If parent_id is not an existing index. The tree is not
                modified in that case.

        Example:
            >>> tree = Tree.new(0).add(1, 0).add(2, 1).add(3, 2)
            >>> [node.value for node in tree.nodes]
            [0, 1, 2, 3]
        """
        self.add_child(value, parent_id)
        return self

    def add_child(self, value: T, parent_id: NodeId) -> NodeId:
        """Append a new node under parent_id and return its id.

        Behaves like ``add`` but hands back the id of the created node instead of the
        tree, which is convenient when further nodes must be attached below it.

        Args:
            value: The value of the new node.
            parent_id: Arena index of the parent.

        Returns:
            The id of the new node.

        Raises:
            InvalidNodeIdError: If parent_id is not an existing index.
        """
        self._check_node_id(parent_id)
        parent = self._nodes[parent_id]
        node_id = len(self._nodes)
        self._nodes.append(Node(parent.depth + 1, parent_id, value))
        parent.children.append(node_id)
        logger.debug("Added node %d under %d at depth %d", node_id, parent_id, parent.depth + 1)
        return node_id

    def get_current_max_depth(self) -> int:
        """Get the depth of the deepest node.

        Returns:
            The maximum depth over all nodes. An empty tree reports 0, the same as a
            tree holding only a root.
        """
        return max((node.depth for node in self._nodes), default=0)

    def get_children(self, parent_id: NodeId) -> List[Node[T]]:
        """Get the children of a node in insertion order.

        Args:
            parent_id: Arena index of the parent.

        Returns:
            Detached copies of the child nodes; empty for a leaf.

        Raises:
            InvalidNodeIdError: If parent_id is not an existing index.
        """
        self._check_node_id(parent_id)
        return [self._nodes[child_id].copy() for child_id in self._nodes[parent_id].children]

    def matches_children(self, parent_id: NodeId, value: T) -> Optional[NodeId]:
        """Find the first child of parent_id whose value equals value.

        Args:
            parent_id: Arena index of the parent.
            value: The value to look for.

        Returns:
            The id of the first equal child in insertion order, or None.

        Raises:
            InvalidNodeIdError: If parent_id is not an existing index.
        """
        self._check_node_id(parent_id)
        for child_id in self._nodes[parent_id].children:
            if self._nodes[child_id].value == value:
                return child_id
        return None

    def find(self, predicate: ValuePredicate[T]) -> Optional[NodeId]:
        """Find the first node, in creation order, whose value satisfies predicate.

        This is a flat scan over the arena rather than a tree traversal. Parents are
        still visited before their children because they are created first.

        Args:
            predicate: Called with each value until it returns True.

        Returns:
            The id of the first matching node, or None.
        """
        for node_id, node in enumerate(self._nodes):
            if predicate(node.value):
                return node_id
        return None

    def get_branch(self, node_id: NodeId) -> List[T]:
        """Get the values on the path from the root down to node_id.

        Args:
            node_id: Arena index of the last node of the path.

        Returns:
            The values from the root to node_id, both included.

        Raises:
            InvalidNodeIdError: If node_id is not an existing index.

        Example:
            >>> tree = Tree.new("a").add("b", 0).add("c", 1)
            >>> tree.get_branch(2)
            ['a', 'b', 'c']
        """
        self._check_node_id(node_id)
        values: List[T] = []
        current: Optional[NodeId] = node_id
        while current is not None:
            node = self._nodes[current]
            values.append(node.value)
            current = node.parent
        values.reverse()
        return values

    def matches_branch(
        self, branch: Sequence[T], mismatch_action: Optional[MismatchAction] = None
    ) -> Optional[Node[T]]:
        """Match a sequence of values against the paths starting at the root.

        Values are compared with ``==``. See ``matches_branch_predicated`` for the
        matching rules.

        Args:
            branch: Values expected along the path, starting with the root's value.
            mismatch_action: Overrides the tree's default policy for this call.

        Returns:
            A copy of the deepest matched node, or None.

        Example:
            >>> tree = Tree.new(0).add(1, 0).add(2, 1).add(3, 2)
            >>> tree.matches_branch([0, 1, 2, 3]).value
            3
        """
        return self.matches_branch_predicated(
            branch, lambda branch_value, tree_value: branch_value == tree_value, mismatch_action
        )

    def matches_branch_predicated(
        self,
        branch: Sequence[U],
        predicate: BranchPredicate[U, T],
        mismatch_action: Optional[MismatchAction] = None,
    ) -> Optional[Node[T]]:
        """Match a sequence of candidates against the paths starting at the root.

        Matching starts with the root as the only frontier node. For each candidate,
        the frontier is scanned in order and the first node for which
        ``predicate(candidate, node.value)`` holds is selected:
        - if it is a leaf, or the candidate is the last one, a copy of it is returned
        - otherwise its children become the new frontier
        Siblings after the first match are never explored.

        A candidate that matches no frontier node is handled according to the mismatch
        action: SKIP leaves the frontier unchanged and moves on to the next candidate,
        ABORT returns None.

        Args:
            branch: Candidates expected along the path, starting with the root.
            predicate: Called as ``predicate(candidate, tree_value)``. The candidate type
                may differ from the tree's value type.
            mismatch_action: Overrides the tree's default policy for this call.

        Returns:
            A copy of the deepest matched node, or None if the branch is empty, the tree
            is empty, or the candidates run out before a match is returned.

        Example:
            >>> tree = Tree.new((0, "zero")).add((1, "one"), 0)
            >>> node = tree.matches_branch_predicated([0, 1], lambda c, v: c == v[0])
            >>> node.value, node.parent
            ((1, 'one'), 0)
        """
        action = mismatch_action if mismatch_action is not None else self.mismatch_action
        if not self._nodes:
            return None

        frontier: List[NodeId] = [ROOT_ID]
        last_position = len(branch) - 1
        for position, candidate in enumerate(branch):
            if not frontier:
                break

            matched_id = next(
                (node_id for node_id in frontier if predicate(candidate, self._nodes[node_id].value)), None
            )
            if matched_id is None:
                if action == MismatchAction.ABORT:
                    logger.debug("Branch candidate at position %d matched no node; aborting", position)
                    return None
                logger.debug("Branch candidate at position %d matched no node; skipping", position)
                continue

            node = self._nodes[matched_id]
            if node.is_leaf or position == last_position:
                return node.copy()
            frontier = list(node.children)

        return None

    def to_anytree(self) -> Optional[TreeViewNode]:
        """Mirror the arena as an anytree hierarchy.

        Returns:
            The root TreeViewNode, or None for an empty tree. Children appear in
            insertion order.
        """
        if not self._nodes:
            return None

        views: List[TreeViewNode] = []
        for node_id, node in enumerate(self._nodes):
            parent_view = views[node.parent] if node.parent is not None else None
            views.append(TreeViewNode(node_id, node.value, parent=parent_view))
        return views[ROOT_ID]

    def stream_tree_representation(self) -> Iterator[str]:
        """Generate a drawing of the tree one line at a time.

        Produces output similar to the Unix 'tree' command, one line per node, with
        children listed in insertion order.

        Yields:
            Lines of the drawing, including the connecting lines.

        Example:
            >>> tree = Tree.new(10).add(1, 0).add(2, 1).add(5, 0)
            >>> for line in tree.stream_tree_representation():
            ...     print(line)
            10
            ├── 1
            │   └── 2
            └── 5
        """
        root = self.to_anytree()
        if root is None:
            return

        for prefix, _, view in RenderTree(root):
            yield f"{prefix}{view.name}"

    def get_tree_representation(self) -> str:
        """Get the complete drawing of the tree.

        Returns:
            The lines of ``stream_tree_representation`` joined by newlines; an empty
            string for an empty tree.
        """
        return "\n".join(self.stream_tree_representation())
