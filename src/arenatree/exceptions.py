class InvalidNodeIdError(IndexError):
    """
    Exception raised when an operation addresses a node id that is not present in the arena.

    Node ids are assigned in creation order starting at 0, so a valid id is any integer in
    the range ``0 <= node_id < len(tree)``. Negative ids are rejected even though Python
    lists would accept them. The exception is raised before any mutation takes place, so
    the tree is left unchanged.

    Attributes:
        node_id (int): The id that was requested.
        node_count (int): The number of nodes in the tree at the time of the request.

    Example:
        >>> error = InvalidNodeIdError(7, 3)
        >>> str(error)
        'Invalid node id: 7 (tree has 3 nodes)'
        >>> isinstance(error, IndexError)
        True
    """

    def __init__(self, node_id: int, node_count: int) -> None:
        """
        Initialize the exception with the offending id and the current arena size.

        Args:
            node_id (int): The id that was requested.
            node_count (int): The number of nodes in the tree.
        """
        self.node_id = node_id
        self.node_count = node_count
        super().__init__(f"Invalid node id: {node_id} (tree has {node_count} nodes)")
