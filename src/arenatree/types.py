from typing import Callable, TypeVar

# Index of a node in a tree's arena
NodeId = int

# Value type stored in the tree
T = TypeVar("T")

# Candidate type used when matching a branch with a predicate
U = TypeVar("U")

# Predicate over a single tree value, used by Tree.find
ValuePredicate = Callable[[T], bool]

# Comparison between a branch candidate and a tree value
BranchPredicate = Callable[[U, T], bool]
